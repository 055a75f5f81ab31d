from src.payroll_engine.payroll_engine.database.bootstrap import _strip_create_db_and_use, iter_sql_statements


def test_splitter_respects_quotes_and_comments():
    sql = "CREATE TABLE a (x INT);\n-- comment; with a semicolon\nINSERT INTO a VALUES ('x;y');\n"

    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('x;y')",
    ]


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS payroll_db;\nUSE payroll_db;\nCREATE TABLE t (id INT);"

    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
