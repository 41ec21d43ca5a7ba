import sqlite3

import pymysql
from sqlalchemy.exc import IntegrityError

from ..errors import ConstraintViolation, DuplicateKey, translate_integrity_error, unique_constraint_name


def _wrap(orig):
    return IntegrityError("INSERT INTO users ...", {}, orig)


def test_mysql_duplicate_entry():
    exc = _wrap(pymysql.err.IntegrityError(1062, "Duplicate entry 'a@b.c' for key 'users.email'"))

    assert unique_constraint_name(exc) == "users.email"
    err = translate_integrity_error(exc)
    assert isinstance(err, DuplicateKey)
    assert err.constraint == "users.email"
    assert err.reason == "duplicate_entry"


def test_mysql_not_null_is_not_duplicate():
    exc = _wrap(pymysql.err.IntegrityError(1048, "Column 'name' cannot be null"))

    err = translate_integrity_error(exc)
    assert isinstance(err, ConstraintViolation)
    assert not isinstance(err, DuplicateKey)


def test_sqlite_unique_failure():
    exc = _wrap(sqlite3.IntegrityError("UNIQUE constraint failed: users.email"))

    err = translate_integrity_error(exc)
    assert isinstance(err, DuplicateKey)
    assert err.constraint == "users.email"


def test_sqlite_not_null_failure():
    exc = _wrap(sqlite3.IntegrityError("NOT NULL constraint failed: users.name"))

    assert unique_constraint_name(exc) is None
    assert type(translate_integrity_error(exc)) is ConstraintViolation
