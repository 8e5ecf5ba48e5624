from sqlguard.pipeline.stages import analyze_syntax


def _codes(findings):
    return [f.code for f in findings]


def _run(make_report, sql, params=None, verbose=False):
    report = make_report(sql, params=params, verbose=verbose)
    analyze_syntax(sql, report)
    return report


def test_unbalanced_parentheses(make_report):
    report = _run(make_report, "SELECT COUNT(id FROM t;")
    assert _codes(report.errors) == ["unbalanced_parentheses"]
    assert "opening: 1, closing: 0" in report.errors[0].message


def test_unpaired_quotes_checked_independently(make_report):
    report = _run(make_report, "SELECT 'a, \"b FROM t;")
    assert _codes(report.errors) == ["unpaired_single_quotes", "unpaired_double_quotes"]


def test_quotes_not_checked_for_parameterized(make_report):
    report = _run(make_report, "SELECT 'a FROM t WHERE id = ?;", params={0: 1})
    assert report.errors == []


def test_missing_semicolon_is_warning(make_report):
    report = _run(make_report, "SELECT id FROM t")
    assert _codes(report.warnings) == ["missing_semicolon"]
    assert report.errors == []


def test_insert_placeholder_mismatch(make_report):
    sql = "INSERT INTO users (name, email, age) VALUES (?, ?);"
    report = _run(make_report, sql, params={0: "a", 1: "b"})
    assert _codes(report.errors) == ["insert_placeholder_count_mismatch"]
    assert "Field count (3)" in report.errors[0].message
    assert "placeholder count (2)" in report.errors[0].message


def test_insert_named_placeholders_match(make_report):
    sql = "INSERT INTO users (name, email) VALUES (:name, :email);"
    report = _run(make_report, sql, params={"name": "a", "email": "b"}, verbose=True)
    assert report.errors == []
    messages = [f.message for f in report.infos]
    assert "Target table: users" in messages


def test_insert_raw_value_mismatch(make_report):
    report = _run(make_report, "INSERT INTO users (name, email) VALUES ('a');")
    assert _codes(report.errors) == ["insert_value_count_mismatch"]


def test_insert_select_form_skips_arity_check(make_report):
    report = _run(make_report, "INSERT INTO archive SELECT * FROM logs;")
    assert report.errors == []
    assert "select_star" not in _codes(report.warnings)


def test_update_without_where_is_warning(make_report):
    report = _run(make_report, "UPDATE t SET x = 1;")
    assert _codes(report.warnings) == ["update_without_where"]
    assert report.errors == []


def test_update_with_where(make_report):
    report = _run(make_report, "UPDATE t SET x = 1 WHERE id = 2;")
    assert report.warnings == []


def test_update_multiple_set(make_report):
    report = _run(make_report, "UPDATE t SET a = 1 SET b = 2 WHERE id = 3;")
    assert _codes(report.warnings) == ["multiple_set_clauses"]
    assert "(2)" in report.warnings[0].message


def test_select_star_case_and_whitespace(make_report):
    report = _run(make_report, "select  *\n from t;")
    assert _codes(report.warnings) == ["select_star"]


def test_select_join_count_in_verbose(make_report):
    report = _run(make_report, "SELECT a.id FROM a JOIN b ON a.id = b.id;", verbose=True)
    assert "SELECT: 1 JOIN(s) detected" in [f.message for f in report.infos]


def test_delete_without_where_is_error(make_report):
    report = _run(make_report, "DELETE FROM logs;")
    assert _codes(report.errors) == ["delete_without_where"]


def test_delete_with_where(make_report):
    report = _run(make_report, "DELETE FROM logs WHERE id = 1;")
    assert report.errors == []


def test_unknown_statement_runs_only_generic_checks(make_report):
    report = _run(make_report, "TRUNCATE logs")
    assert report.errors == []
    assert _codes(report.warnings) == ["missing_semicolon"]
