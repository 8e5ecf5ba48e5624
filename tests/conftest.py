import pytest

from sqlguard.dtos import ValidationReport


@pytest.fixture
def make_report():
    """Empty report for driving a single analyzer stage"""

    def _make(query="", params=None, verbose=False):
        return ValidationReport(
            query=query,
            params=params,
            is_parameterized=params is not None,
            verbose=verbose,
        )

    return _make
