# catalog/sa/models/base.py
from datetime import datetime, UTC
from enum import Enum as PyEnum

from sqlalchemy import Enum, event
from sqlalchemy.orm import DeclarativeBase, Session

from ..validation import apply_defaults, check_not_null


class Base(DeclarativeBase):
    """Base class for all models"""

    def validate(self) -> None:
        """Check the row-level rules of this table. Overridden per model."""


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the naive DATETIME columns"""
    return datetime.now(UTC).replace(tzinfo=None)


def status_enum(enum_class: type[PyEnum], name: str) -> Enum:
    """Column type for a closed value set, stored as its display values with a named CHECK"""
    return Enum(
        enum_class,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=20,
        validate_strings=True,
        values_callable=lambda members: [member.value for member in members],
    )


@event.listens_for(Session, 'before_flush')
def _validate_pending_rows(session, flush_context, instances):
    """Check new and changed rows before any SQL for them is emitted"""
    for row in session.new:
        if isinstance(row, Base):
            apply_defaults(row)
            check_not_null(row)
            row.validate()
    for row in session.dirty:
        if isinstance(row, Base) and session.is_modified(row):
            check_not_null(row)
            row.validate()
