# catalog/sa/models/member.py
from datetime import date
from enum import Enum

from sqlalchemy import CheckConstraint, Date, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from ..validation import check_email, coerce_enum
from .base import Base, status_enum


class MembershipStatus(str, Enum):
    ACTIVE = "Active"
    EXPIRED = "Expired"
    SUSPENDED = "Suspended"


class Member(Base):
    """A person eligible to borrow"""
    __tablename__ = 'Members'

    member_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    membership_date: Mapped[date] = mapped_column(Date, nullable=False)
    membership_status: Mapped[MembershipStatus] = mapped_column(
        status_enum(MembershipStatus, 'membership_status'),
        nullable=False,
        default=MembershipStatus.ACTIVE,
        server_default=MembershipStatus.ACTIVE.value,
    )

    # Relationships; restrict deletes, the database raises while these exist
    loans = relationship('Loan', back_populates='member', passive_deletes='all')
    reservations = relationship('Reservation', back_populates='member', passive_deletes='all')
    fines = relationship('Fine', back_populates='member', passive_deletes='all')

    __table_args__ = (
        UniqueConstraint('email', name='uq_members_email'),
        CheckConstraint("email LIKE '%@%.%'", name='chk_email'),

        # Search indexes
        Index('idx_members_name', 'last_name', 'first_name'),
        Index('idx_members_email', 'email'),
    )

    @validates('membership_status')
    def validate_membership_status(self, key, value):
        return coerce_enum(MembershipStatus, value, self, key)

    def validate(self) -> None:
        check_email(self, 'email', 'chk_email')
