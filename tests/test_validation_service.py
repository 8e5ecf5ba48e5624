import pytest

from sqlguard import (
    ParameterizedQuery,
    QueryValidator,
    RawQuery,
    is_valid,
    validate,
    version,
)
from sqlguard.services import CallableNotifier


def _codes(findings):
    return [f.code for f in findings]


def test_raw_select_star_verbose():
    report = validate(RawQuery(text="SELECT * FROM users"), enabled=True, verbose=True)

    assert "select_star" in _codes(report.warnings)
    assert "non_parameterized" in _codes(report.warnings)
    assert report.suggestion is not None
    assert report.suggestion.example_query == "SELECT * FROM table WHERE column = ?"


def test_parameterized_select_star_succeeds():
    report = validate(ParameterizedQuery(text="SELECT * FROM t WHERE id = ?", params={0: 5}))

    assert report.status == "success"
    assert "select_star" in _codes(report.warnings)
    assert report.error_count == 0
    assert report.suggestion is None


def test_parameterized_count_mismatch():
    report = validate(ParameterizedQuery(text="SELECT * FROM t WHERE id = ? AND name = ?", params={0: 5}))

    assert report.status == "error"
    assert _codes(report.errors) == ["placeholder_count_mismatch"]
    assert "2" in report.errors[0].message and "1" in report.errors[0].message


def test_delete_without_where_is_error():
    report = validate(RawQuery(text="DELETE FROM logs"))
    assert report.status == "error"
    assert "delete_without_where" in _codes(report.errors)


def test_update_without_where_is_only_warning():
    report = validate(RawQuery(text="UPDATE t SET x=1"))
    assert report.status == "success"
    assert report.errors == []
    assert "update_without_where" in _codes(report.warnings)


@pytest.mark.parametrize("sql", [
    "SELECT * FROM users WHERE id = ? AND x = :y",
    "INSERT INTO t (a) VALUES (?)",
    "DELETE FROM logs",
    "SELECT 'a'' FROM t",
])
def test_raw_queries_never_check_parameter_count(sql):
    report = validate(sql, verbose=True)
    for finding in report.findings:
        assert "parameter count" not in finding.message.lower()


@pytest.mark.parametrize("params", [{}, {0: 1}, {0: 1, "y": 2}, {0: 1, 1: 2, 2: 3, 3: 4}])
def test_mixed_placeholders_exactly_one_error(params):
    report = validate(ParameterizedQuery(text="SELECT a FROM t WHERE a = ? AND b = :y;", params=params))
    assert _codes(report.errors).count("mixed_placeholders") == 1


def test_matching_counts_have_no_mismatch_error():
    report = validate(ParameterizedQuery(text="UPDATE t SET a = :a WHERE id = :id;", params={"a": 1, "id": 2}))
    assert "placeholder_count_mismatch" not in _codes(report.errors)
    assert report.status == "success"


def test_disabled_is_bypassed_without_analysis():
    report = validate("DELETE FROM (((", enabled=False, verbose=True)

    assert report.status == "bypassed"
    assert report.query == "DELETE FROM ((("
    assert report.errors == [] and report.warnings == [] and report.infos == []
    assert report.suggestion is None


def test_disabled_extracts_text_from_mapping():
    report = validate({"sql": "SELECT 1", "params": [1]}, enabled=False)
    assert report.status == "bypassed"
    assert report.query == "SELECT 1"


def test_empty_query_short_circuits():
    report = validate("   ", verbose=True)

    assert report.status == "error"
    assert _codes(report.errors) == ["empty_query"]
    assert report.warnings == []
    assert report.suggestion is None


def test_mapping_input_is_parameterized():
    report = validate({"sql": "SELECT a FROM t WHERE id = ?;", "params": [1]})

    assert report.is_parameterized
    assert report.params == {0: 1}
    assert report.status == "success"
    assert report.findings == []


def test_unsupported_input_type():
    with pytest.raises(TypeError):
        validate(42)


def test_repeated_validation_is_idempotent():
    query = ParameterizedQuery(
        text="SELECT * FROM t WHERE a = ? AND b = 'x' -- c",
        params=["1 UNION SELECT 2"],
    )
    first = validate(query, verbose=True)
    second = validate(query, verbose=True)

    def snapshot(report):
        return [(f.severity, f.code, f.message) for f in report.findings]

    assert snapshot(first) == snapshot(second)
    assert first.suggestion == second.suggestion
    assert first.status == second.status


def test_counts_match_finding_lists():
    report = validate(RawQuery(text="DELETE FROM t WHERE name = 'x; DROP TABLE t' -- "), verbose=True)
    assert report.error_count == len(report.errors)
    assert report.warning_count == len(report.warnings)

    dumped = report.model_dump()
    assert dumped["error_count"] == len(dumped["errors"])
    assert dumped["warning_count"] == len(dumped["warnings"])


def test_notifier_called_once_after_finalize():
    received = []

    def record(report):
        received.append((report.status, report.error_count))

    validator = QueryValidator(notifier=CallableNotifier(record, name="recorder"))
    report = validator.validate("DELETE FROM logs")

    assert received == [("error", 1)]
    assert "notification_sent" in _codes(report.infos)
    assert "Error report sent via recorder" in [f.message for f in report.infos]


def test_notifier_not_called_without_errors():
    received = []
    validator = QueryValidator(notifier=CallableNotifier(received.append))
    report = validator.validate("SELECT a FROM t WHERE id = 1;")

    assert report.status == "success"
    assert received == []


def test_notifier_failure_becomes_warning():
    def broken(report):
        raise RuntimeError("smtp down")

    validator = QueryValidator(notifier=CallableNotifier(broken))
    report = validator.validate("DELETE FROM logs")

    assert report.status == "error"
    failures = [f for f in report.warnings if f.code == "notification_failed"]
    assert len(failures) == 1
    assert "smtp down" in failures[0].message
    assert report.warning_count == len(report.warnings)


def test_context_is_attached_untouched():
    context = {"file": "app.py", "line": 10, "custom": object()}
    report = validate("SELECT a FROM t;", context=context)
    assert report.context["custom"] is context["custom"]


def test_is_valid():
    assert is_valid("SELECT a FROM t WHERE id = 1;")
    assert not is_valid("DELETE FROM logs")
    assert is_valid("DELETE FROM logs", enabled=False)


def test_version():
    assert version() == "1.0.0"
