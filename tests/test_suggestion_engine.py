from sqlguard.pipeline.stages import analyze_parameters, generate_suggestion


def test_no_suggestion_without_verbose(make_report):
    report = make_report("SELECT * FROM users")
    assert generate_suggestion(report) is None


def test_raw_select_gets_parameterized_template(make_report):
    report = make_report("SELECT * FROM users", verbose=True)
    suggestion = generate_suggestion(report)
    assert suggestion.example_query == "SELECT * FROM table WHERE column = ?"
    assert "cursor.execute" in suggestion.example_code


def test_raw_unknown_type_gets_explanation_only(make_report):
    report = make_report("SHOW TABLES", verbose=True)
    suggestion = generate_suggestion(report)
    assert suggestion.example_query is None
    assert suggestion.example_code is None
    assert "parameterized" in suggestion.explanation


def test_too_few_params_padded(make_report):
    sql = "SELECT a FROM t WHERE a = ? AND b = ?"
    report = make_report(sql, params={0: 5}, verbose=True)
    analyze_parameters(sql, report)

    suggestion = generate_suggestion(report)
    assert suggestion.example_query == sql
    assert "{0: 5, 1: 'missing_value'}" in suggestion.example_code
    assert "Add 1 more parameter(s)" in suggestion.explanation


def test_too_many_params_truncated(make_report):
    sql = "SELECT a FROM t WHERE a = ?"
    report = make_report(sql, params={0: 1, 1: 2, 2: 3}, verbose=True)
    analyze_parameters(sql, report)

    suggestion = generate_suggestion(report)
    assert "params={0: 1}" in suggestion.example_code
    assert "Remove 2 parameter(s)" in suggestion.explanation


def test_priority_order(make_report):
    report = make_report("DELETE FROM t", params={}, verbose=True)
    report.add_warning("Use of SELECT *", code="select_star")
    report.add_warning("UPDATE without WHERE", code="update_without_where")
    report.add_error("DELETE without WHERE", code="delete_without_where")

    suggestion = generate_suggestion(report)
    assert suggestion.example_query == "DELETE FROM table WHERE id = ?"


def test_update_where_template(make_report):
    report = make_report("UPDATE t SET a = ?", params={0: 1}, verbose=True)
    report.add_warning("UPDATE without WHERE", code="update_without_where")
    suggestion = generate_suggestion(report)
    assert suggestion.explanation.startswith("CRITICAL: UPDATE without WHERE clause")


def test_field_count_template(make_report):
    report = make_report("INSERT INTO t (a, b) VALUES (?)", params={0: 1}, verbose=True)
    report.add_error("INSERT error", code="insert_placeholder_count_mismatch")
    suggestion = generate_suggestion(report)
    assert suggestion.example_query == "INSERT INTO table (field1, field2, field3) VALUES (?, ?, ?)"


def test_select_star_and_hardcoded_templates(make_report):
    report = make_report("SELECT * FROM t WHERE a = 'x'", params={}, verbose=True)
    report.add_warning("Hardcoded values", code="hardcoded_literal")
    assert "logs" in generate_suggestion(report).example_query

    report.add_warning("Use of SELECT *", code="select_star")
    assert generate_suggestion(report).example_query.startswith("SELECT id, name, email")


def test_clean_parameterized_query_has_no_suggestion(make_report):
    report = make_report("SELECT a FROM t WHERE id = ?;", params={0: 1}, verbose=True)
    assert generate_suggestion(report) is None
