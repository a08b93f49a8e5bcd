# catalog/sa/errors.py
import re
from typing import Optional

from sqlalchemy.exc import IntegrityError


class ConstraintViolation(ValueError):
    """Raised when a write would leave a row that breaks a schema constraint

    Attributes:
        constraint: Name of the violated constraint, or the offending column
                    when the database only reports that
        table: Table the row belongs to, when known
    """

    def __init__(self, message: str, constraint: Optional[str] = None, table: Optional[str] = None):
        super().__init__(message)
        self.constraint = constraint
        self.table = table


class UniquenessViolation(ConstraintViolation):
    """Duplicate email, ISBN, publisher name or join-table pair"""


class FormatViolation(ConstraintViolation):
    """Malformed email or an ISBN that is too short"""


class RangeViolation(ConstraintViolation):
    """Value outside its permitted range, ordering or closed value set"""


class ReferentialIntegrityViolation(ConstraintViolation):
    """Foreign key target is missing, or the row is still referenced"""


class NotNullViolation(ConstraintViolation):
    """Required column left empty"""


# CHECK constraints that validate the shape of a value rather than its range
FORMAT_CHECKS = frozenset({
    'chk_email',
    'chk_pub_email',
    'chk_staff_email',
    'chk_branch_email',
    'chk_isbn',
})

# PostgreSQL SQLSTATE codes
PG_UNIQUE = '23505'
PG_NOT_NULL = '23502'
PG_FOREIGN_KEY = '23503'
PG_CHECK = '23514'

# MySQL error numbers
MYSQL_DUPLICATE = 1062
MYSQL_NOT_NULL = 1048
MYSQL_FOREIGN_KEY = (1451, 1452)
MYSQL_CHECK = 3819

_SQLITE_DETAIL = re.compile(r'constraint failed: (?P<detail>.+)$')
_MYSQL_CHECK_NAME = re.compile(r"Check constraint '(?P<name>[^']+)'")


def check_violation_class(constraint: Optional[str]) -> type[ConstraintViolation]:
    """Pick the violation type for a failed CHECK constraint"""
    if constraint in FORMAT_CHECKS:
        return FormatViolation
    return RangeViolation


def _sqlite_detail(message: str) -> tuple[Optional[str], Optional[str]]:
    """Split 'UNIQUE constraint failed: Members.email' into (constraint, table)"""
    match = _SQLITE_DETAIL.search(message)
    if not match:
        return None, None
    detail = match.group('detail').split(',')[0].strip()
    if '.' in detail:
        table, column = detail.split('.', 1)
        return column, table
    return detail, None


def _error_code(orig) -> tuple[Optional[str], Optional[int]]:
    sqlstate = getattr(orig, 'pgcode', None) or getattr(orig, 'sqlstate', None)
    errno = None
    args = getattr(orig, 'args', ())
    if args and isinstance(args[0], int):
        errno = args[0]
    return sqlstate, errno


def translate_integrity_error(exc: IntegrityError) -> ConstraintViolation:
    """Map a driver-level IntegrityError onto the violation taxonomy.

    Understands SQLite message text, PostgreSQL SQLSTATE codes and MySQL
    error numbers. Anything unrecognised comes back as a plain
    ConstraintViolation so callers can still catch a single type.

    Args:
        exc: The IntegrityError raised by SQLAlchemy on flush or commit

    Returns:
        The ConstraintViolation to raise in its place
    """
    orig = exc.orig if exc.orig is not None else exc
    message = str(orig)
    sqlstate, errno = _error_code(orig)

    diag = getattr(orig, 'diag', None)
    constraint = getattr(diag, 'constraint_name', None)
    table = getattr(diag, 'table_name', None)
    if constraint is None and table is None:
        constraint, table = _sqlite_detail(message)

    if sqlstate == PG_UNIQUE or errno == MYSQL_DUPLICATE or message.startswith('UNIQUE constraint failed'):
        return UniquenessViolation(f"Duplicate value violates {constraint or 'a unique constraint'}: {message}",
                                   constraint, table)

    if sqlstate == PG_NOT_NULL or errno == MYSQL_NOT_NULL or message.startswith('NOT NULL constraint failed'):
        if constraint is None:
            constraint = getattr(diag, 'column_name', None)
        return NotNullViolation(f"Missing required value for {constraint or 'a column'}: {message}",
                                constraint, table)

    if sqlstate == PG_FOREIGN_KEY or errno in MYSQL_FOREIGN_KEY or message.startswith('FOREIGN KEY constraint failed'):
        return ReferentialIntegrityViolation(f"Foreign key check failed: {message}", constraint, table)

    if sqlstate == PG_CHECK or errno == MYSQL_CHECK or message.startswith('CHECK constraint failed'):
        if errno == MYSQL_CHECK:
            match = _MYSQL_CHECK_NAME.search(message)
            constraint = match.group('name') if match else constraint
        violation_class = check_violation_class(constraint)
        return violation_class(f"Check constraint {constraint or '(unnamed)'} failed: {message}",
                               constraint, table)

    return ConstraintViolation(message, constraint, table)
