"""Tests for error message formatting."""

from orm_platform.utils.error_format import format_error_message


def test_message_with_type():
    assert format_error_message(ValueError("invalid dsn")) == "ValueError: invalid dsn"


def test_key_error_keeps_repr_message():
    assert format_error_message(KeyError("KeyError inside")) == "KeyError: 'KeyError inside'"


def test_bare_import_error_names_missing_module():
    assert format_error_message(ModuleNotFoundError(name="psycopg2")) == "ModuleNotFoundError: cannot import 'psycopg2'"


def test_import_error_message_preferred_over_name():
    error = ModuleNotFoundError("No module named 'pymysql'", name="pymysql")

    assert format_error_message(error) == "ModuleNotFoundError: No module named 'pymysql'"


def test_import_error_path_is_appended():
    error = ImportError("bad magic number", name="pg", path="/srv/app/vendor/pg.pyc")

    assert format_error_message(error) == "ImportError: bad magic number (from /srv/app/vendor/pg.pyc)"


def test_import_error_path_not_repeated():
    error = ImportError("cannot load /srv/app/vendor/pg.py", path="/srv/app/vendor/pg.py")

    assert format_error_message(error) == "ImportError: cannot load /srv/app/vendor/pg.py"


def test_empty_message_without_details():
    assert format_error_message(RuntimeError()) == "RuntimeError: (no additional details)"
