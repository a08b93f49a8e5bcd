# catalog/sa/models/fine.py
from datetime import date
from decimal import Decimal
from enum import Enum

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from ..validation import check_non_negative, check_order, coerce_enum
from .base import Base, status_enum


class FineStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    WAIVED = "Waived"


class Fine(Base):
    __tablename__ = 'Fines'

    fine_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(
        ForeignKey('Members.member_id', name='fk_fine_member'), nullable=False)
    loan_id: Mapped[int | None] = mapped_column(
        ForeignKey('Loans.loan_id', name='fk_fine_loan'), nullable=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    issue_date: Mapped[date] = mapped_column(Date, nullable=False)
    payment_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[FineStatus] = mapped_column(
        status_enum(FineStatus, 'fine_status'),
        nullable=False,
        default=FineStatus.PENDING,
        server_default=FineStatus.PENDING.value,
    )
    reason: Mapped[str] = mapped_column(String(200), nullable=False)

    # Relationships
    member = relationship('Member', back_populates='fines')
    loan = relationship('Loan', back_populates='fines')

    __table_args__ = (
        CheckConstraint('amount >= 0', name='chk_fine_amount'),
        CheckConstraint('payment_date IS NULL OR payment_date >= issue_date', name='chk_payment_date'),
    )

    @validates('status')
    def validate_status(self, key, value):
        return coerce_enum(FineStatus, value, self, key)

    def validate(self) -> None:
        check_non_negative(self, 'amount', 'chk_fine_amount')
        check_order(self, 'issue_date', 'payment_date', 'chk_payment_date')
