# tests/test_sa/test_errors.py
import pytest
from types import SimpleNamespace
from sqlalchemy.exc import IntegrityError
from catalog.sa.errors import (
    ConstraintViolation, FormatViolation, NotNullViolation, RangeViolation,
    ReferentialIntegrityViolation, UniquenessViolation, check_violation_class,
    translate_integrity_error
)


class FakePostgresError(Exception):
    """Stand-in for a psycopg error carrying SQLSTATE and diagnostics"""

    def __init__(self, message, pgcode, constraint_name=None, table_name=None, column_name=None):
        super().__init__(message)
        self.pgcode = pgcode
        self.diag = SimpleNamespace(
            constraint_name=constraint_name,
            table_name=table_name,
            column_name=column_name
        )


def integrity_error(orig):
    return IntegrityError("INSERT ...", {}, orig)


@pytest.mark.parametrize("message, expected, constraint, table", [
    ("UNIQUE constraint failed: Members.email", UniquenessViolation, "email", "Members"),
    ("NOT NULL constraint failed: BookCopies.branch_id", NotNullViolation, "branch_id", "BookCopies"),
    ("FOREIGN KEY constraint failed", ReferentialIntegrityViolation, None, None),
    ("CHECK constraint failed: chk_isbn", FormatViolation, "chk_isbn", None),
    ("CHECK constraint failed: chk_salary", RangeViolation, "chk_salary", None),
    ("CHECK constraint failed: loan_status", RangeViolation, "loan_status", None),
])
def test_sqlite_messages(message, expected, constraint, table):
    violation = translate_integrity_error(integrity_error(Exception(message)))
    assert type(violation) is expected
    assert violation.constraint == constraint
    assert violation.table == table


def test_sqlite_composite_unique():
    violation = translate_integrity_error(integrity_error(
        Exception("UNIQUE constraint failed: BookAuthors.book_id, BookAuthors.author_id")))
    assert isinstance(violation, UniquenessViolation)
    assert violation.table == "BookAuthors"
    assert violation.constraint == "book_id"


@pytest.mark.parametrize("pgcode, constraint, expected", [
    ("23505", "uq_books_isbn", UniquenessViolation),
    ("23503", "fk_loan_member", ReferentialIntegrityViolation),
    ("23514", "chk_email", FormatViolation),
    ("23514", "chk_due_date", RangeViolation),
])
def test_postgres_codes(pgcode, constraint, expected):
    orig = FakePostgresError("violates constraint", pgcode, constraint_name=constraint, table_name="Books")
    violation = translate_integrity_error(integrity_error(orig))
    assert type(violation) is expected
    assert violation.constraint == constraint
    assert violation.table == "Books"


def test_postgres_not_null_reports_column():
    orig = FakePostgresError("null value in column", "23502", table_name="Staff", column_name="branch_id")
    violation = translate_integrity_error(integrity_error(orig))
    assert isinstance(violation, NotNullViolation)
    assert violation.constraint == "branch_id"


@pytest.mark.parametrize("errno, message, expected", [
    (1062, "Duplicate entry 'a@b.c' for key 'uq_members_email'", UniquenessViolation),
    (1048, "Column 'email' cannot be null", NotNullViolation),
    (1451, "Cannot delete or update a parent row", ReferentialIntegrityViolation),
    (1452, "Cannot add or update a child row", ReferentialIntegrityViolation),
    (3819, "Check constraint 'chk_pub_email' is violated.", FormatViolation),
])
def test_mysql_error_numbers(errno, message, expected):
    violation = translate_integrity_error(integrity_error(Exception(errno, message)))
    assert type(violation) is expected


def test_mysql_check_name_extracted():
    violation = translate_integrity_error(
        integrity_error(Exception(3819, "Check constraint 'chk_fine_amount' is violated.")))
    assert violation.constraint == "chk_fine_amount"
    assert isinstance(violation, RangeViolation)


def test_unknown_error_falls_back_to_base_class():
    violation = translate_integrity_error(integrity_error(Exception("something odd")))
    assert type(violation) is ConstraintViolation


def test_violations_are_value_errors():
    assert issubclass(ConstraintViolation, ValueError)
    assert check_violation_class("chk_branch_email") is FormatViolation
    assert check_violation_class(None) is RangeViolation
