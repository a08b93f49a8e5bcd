# catalog/sa/validation.py
"""Row checks run in Python before a row is flushed.

Each helper mirrors a CHECK, NOT NULL or ENUM rule that the database also
enforces, so the caller gets a typed violation naming the constraint
before any SQL is sent.
"""
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from sqlalchemy import inspect

from .errors import FormatViolation, NotNullViolation, RangeViolation

# Same shape as the SQL pattern email LIKE '%@%.%'
EMAIL_PATTERN = re.compile(r'.*@.*\..*', re.DOTALL)


def _table(row) -> Optional[str]:
    return getattr(row, '__tablename__', None)


def apply_defaults(row) -> None:
    """Fill in Python-side column defaults for attributes never assigned.

    Runs before validation so NOT NULL and ordering checks see the value
    the INSERT will carry. Attributes explicitly set to None are left alone.
    """
    state = inspect(row)
    for attr in state.mapper.column_attrs:
        column = attr.columns[0]
        default = column.default
        if default is None or attr.key in state.dict:
            continue
        if default.is_scalar:
            setattr(row, attr.key, default.arg)
        elif default.is_callable:
            setattr(row, attr.key, default.arg(None))


def check_not_null(row) -> None:
    """Reject empty required columns.

    Primary and foreign key columns are left to the database: their values
    may only be synchronised from relationships during the flush.
    """
    state = inspect(row)
    for attr in state.mapper.column_attrs:
        column = attr.columns[0]
        if column.nullable or column.primary_key or column.foreign_keys:
            continue
        if getattr(row, attr.key) is None:
            raise NotNullViolation(f"{_table(row)}.{attr.key} is required", attr.key, _table(row))


def check_email(row, field: str, constraint: str) -> None:
    value = getattr(row, field)
    if value is not None and not EMAIL_PATTERN.fullmatch(value):
        raise FormatViolation(f"{_table(row)}.{field} is not a valid email address: {value!r}",
                              constraint, _table(row))


def check_min_length(row, field: str, minimum: int, constraint: str) -> None:
    value = getattr(row, field)
    if value is not None and len(value) < minimum:
        raise FormatViolation(f"{_table(row)}.{field} must be at least {minimum} characters, got {value!r}",
                              constraint, _table(row))


def check_positive(row, field: str, constraint: str) -> None:
    value = getattr(row, field)
    if value is not None and value <= 0:
        raise RangeViolation(f"{_table(row)}.{field} must be greater than zero, got {value}",
                             constraint, _table(row))


def check_non_negative(row, field: str, constraint: str) -> None:
    value = getattr(row, field)
    if value is not None and value < 0:
        raise RangeViolation(f"{_table(row)}.{field} cannot be negative, got {value}",
                             constraint, _table(row))


def check_order(row, earlier: str, later: str, constraint: str, strict: bool = False) -> None:
    """Require row.later >= row.earlier (or > when strict); skipped if either is None"""
    first = getattr(row, earlier)
    second = getattr(row, later)
    if first is None or second is None:
        return
    if second < first or (strict and second == first):
        relation = 'after' if strict else 'on or after'
        raise RangeViolation(f"{_table(row)}.{later} must be {relation} {earlier} ({second} vs {first})",
                             constraint, _table(row))


def _enum_check_name(row, field: Optional[str]) -> Optional[str]:
    """Name of the CHECK the database uses for an enum column, e.g. loan_status"""
    table = getattr(row, '__table__', None)
    if table is None or field is None or field not in table.c:
        return field
    return getattr(table.c[field].type, 'name', None) or field


def coerce_enum(enum_class: type[Enum], value: Any, row=None, field: Optional[str] = None) -> Optional[Enum]:
    """Convert a raw value to a member of a closed enum, rejecting anything else"""
    if value is None or isinstance(value, enum_class):
        return value
    try:
        return enum_class(value)
    except ValueError:
        allowed = ', '.join(member.value for member in enum_class)
        table = _table(row) if row is not None else None
        raise RangeViolation(f"{value!r} is not a valid {enum_class.__name__} (allowed: {allowed})",
                             _enum_check_name(row, field), table) from None


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Store timestamps as naive UTC; naive input is taken to be UTC already"""
    if getattr(value, 'tzinfo', None) is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
