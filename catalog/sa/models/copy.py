# catalog/sa/models/copy.py
from datetime import date
from enum import Enum

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from ..validation import coerce_enum
from .base import Base, status_enum


class CopyCondition(str, Enum):
    NEW = "New"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    LOST = "Lost"


class CopyStatus(str, Enum):
    AVAILABLE = "Available"
    CHECKED_OUT = "Checked Out"
    RESERVED = "Reserved"
    LOST = "Lost"
    REMOVED = "Removed"


class BookCopy(Base):
    """One physical unit of a Book, held at a branch"""
    __tablename__ = 'BookCopies'

    copy_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    branch_id: Mapped[int] = mapped_column(
        ForeignKey('LibraryBranches.branch_id', name='fk_copy_branch'), nullable=False)
    book_id: Mapped[int] = mapped_column(
        ForeignKey('Books.book_id', name='fk_copy_book', ondelete='CASCADE'), nullable=False)
    acquisition_date: Mapped[date] = mapped_column(Date, nullable=False)
    condition: Mapped[CopyCondition] = mapped_column(
        status_enum(CopyCondition, 'copy_condition'),
        nullable=False,
        default=CopyCondition.GOOD,
        server_default=CopyCondition.GOOD.value,
    )
    location: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[CopyStatus] = mapped_column(
        status_enum(CopyStatus, 'copy_status'),
        nullable=False,
        default=CopyStatus.AVAILABLE,
        server_default=CopyStatus.AVAILABLE.value,
    )
    last_checkout_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    book = relationship('Book', back_populates='copies')
    branch = relationship('LibraryBranch', back_populates='copies')
    loans = relationship('Loan', back_populates='copy', passive_deletes='all')

    __table_args__ = (
        Index('idx_copies_book', 'book_id'),
        Index('idx_copies_status', 'status'),
    )

    @validates('condition', 'status')
    def validate_enums(self, key, value):
        enum_class = CopyCondition if key == 'condition' else CopyStatus
        return coerce_enum(enum_class, value, self, key)
