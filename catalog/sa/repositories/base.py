# catalog/sa/repositories/base.py
import logging
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import translate_integrity_error
from ..models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=Base)


class CatalogRepository(Generic[ModelT]):
    """Create, update, delete and fetch rows of one table.

    Every write runs as its own transaction. A write that breaks a
    constraint is rolled back in full and re-raised as a
    ConstraintViolation subclass, so nothing of the row is persisted.
    """

    model: type[ModelT]

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def get_by_id(self, row_id: Any) -> Optional[ModelT]:
        """Get a row by its primary key.

        Args:
            row_id: Primary key value (a tuple for composite keys)

        Returns:
            The row if found, None otherwise
        """
        return self.session.get(self.model, row_id)

    def count(self) -> int:
        return self.session.query(self.model).count()

    def create(self, **attributes: Any) -> ModelT:
        """Insert a new row.

        Args:
            attributes: Column values for the new row

        Returns:
            The persisted row

        Raises:
            ConstraintViolation: If any NOT NULL, UNIQUE, CHECK or FOREIGN KEY rule fails
        """
        try:
            row = self.model(**attributes)
            self.session.add(row)
            self.session.commit()
        except Exception as exc:
            self._fail(f"create {self.table_name} row", exc)
        return row

    def update(self, row_id: Any, **attributes: Any) -> Optional[ModelT]:
        """Change columns of an existing row; the whole row is re-validated.

        Args:
            row_id: Primary key of the row to update
            attributes: Column values to change

        Returns:
            The updated row if found, None otherwise

        Raises:
            AttributeError: If an attribute is not a column of the table
            ConstraintViolation: If the resulting row breaks a constraint
        """
        row = self.get_by_id(row_id)
        if row is None:
            return None

        columns = inspect(self.model).column_attrs
        for key in attributes:
            if key not in columns:
                raise AttributeError(f"{self.table_name} has no column '{key}'")

        try:
            for key, value in attributes.items():
                setattr(row, key, value)
            self.session.commit()
        except Exception as exc:
            self._fail(f"update {self.table_name} row {row_id}", exc)
        return row

    def delete(self, row_id: Any) -> bool:
        """Delete a row; dependents go with it only where the relationship cascades.

        Args:
            row_id: Primary key of the row to delete

        Returns:
            True if the row was deleted, False if not found

        Raises:
            ReferentialIntegrityViolation: If other rows still reference it
        """
        row = self.get_by_id(row_id)
        if row is None:
            return False

        try:
            self.session.delete(row)
            self.session.commit()
        except Exception as exc:
            self._fail(f"delete {self.table_name} row {row_id}", exc)
        return True

    def _fail(self, action: str, exc: Exception) -> None:
        """Roll back the failed write; database integrity errors are re-raised as ConstraintViolation"""
        self.session.rollback()
        if isinstance(exc, IntegrityError):
            violation = translate_integrity_error(exc)
            logger.error(f"Failed to {action}: {violation}")
            raise violation from exc
        logger.error(f"Failed to {action}: {exc}")
        raise exc
