# catalog/sa/models/loan.py
from datetime import datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from ..validation import check_order, coerce_enum, to_naive_utc
from .base import Base, status_enum


class LoanStatus(str, Enum):
    ACTIVE = "Active"
    RETURNED = "Returned"
    OVERDUE = "Overdue"
    LOST = "Lost"


class Loan(Base):
    """A checkout of one copy by one member"""
    __tablename__ = 'Loans'

    loan_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    copy_id: Mapped[int] = mapped_column(
        ForeignKey('BookCopies.copy_id', name='fk_loan_copy'), nullable=False)
    member_id: Mapped[int] = mapped_column(
        ForeignKey('Members.member_id', name='fk_loan_member'), nullable=False)
    checkout_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    due_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    return_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    late_fee: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True, default=Decimal('0.00'), server_default='0.00')
    status: Mapped[LoanStatus] = mapped_column(
        status_enum(LoanStatus, 'loan_status'),
        nullable=False,
        default=LoanStatus.ACTIVE,
        server_default=LoanStatus.ACTIVE.value,
    )

    # Relationships
    copy = relationship('BookCopy', back_populates='loans')
    member = relationship('Member', back_populates='loans')
    fines = relationship('Fine', back_populates='loan', passive_deletes='all')

    __table_args__ = (
        CheckConstraint('due_date > checkout_date', name='chk_due_date'),
        CheckConstraint('return_date IS NULL OR return_date >= checkout_date', name='chk_return_date'),

        Index('idx_loans_member', 'member_id'),
        Index('idx_loans_copy', 'copy_id'),
        Index('idx_loans_dates', 'checkout_date', 'due_date', 'return_date'),
    )

    @validates('status')
    def validate_status(self, key, value):
        return coerce_enum(LoanStatus, value, self, key)

    @validates('checkout_date', 'due_date', 'return_date')
    def validate_timestamp(self, key, value):
        return to_naive_utc(value)

    def validate(self) -> None:
        check_order(self, 'checkout_date', 'due_date', 'chk_due_date', strict=True)
        check_order(self, 'checkout_date', 'return_date', 'chk_return_date')
