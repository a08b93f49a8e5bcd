# catalog/sa/models/staff.py
from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..validation import check_email, check_non_negative
from .base import Base


class Staff(Base):
    """A library employee; supervisors form a hierarchy within this table"""
    __tablename__ = 'Staff'

    staff_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    position: Mapped[str] = mapped_column(String(50), nullable=False)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    salary: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    supervisor_id: Mapped[int | None] = mapped_column(
        ForeignKey('Staff.staff_id', name='fk_staff_supervisor'), nullable=True)
    branch_id: Mapped[int] = mapped_column(
        ForeignKey('LibraryBranches.branch_id', name='fk_staff_branch'), nullable=False)

    # Relationships
    supervisor = relationship('Staff', remote_side=[staff_id], back_populates='subordinates')
    subordinates = relationship('Staff', back_populates='supervisor', passive_deletes='all')
    branch = relationship('LibraryBranch', foreign_keys=[branch_id], back_populates='staff')
    managed_branches = relationship('LibraryBranch', foreign_keys='LibraryBranch.manager_id',
                                    back_populates='manager', post_update=True, passive_deletes='all')

    __table_args__ = (
        UniqueConstraint('email', name='uq_staff_email'),
        CheckConstraint("email LIKE '%@%.%'", name='chk_staff_email'),
        CheckConstraint('salary >= 0', name='chk_salary'),
    )

    def validate(self) -> None:
        check_email(self, 'email', 'chk_staff_email')
        check_non_negative(self, 'salary', 'chk_salary')
