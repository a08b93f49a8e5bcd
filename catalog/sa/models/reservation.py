# catalog/sa/models/reservation.py
from datetime import datetime
from enum import Enum

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, func
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from ..validation import check_order, coerce_enum, to_naive_utc
from .base import Base, status_enum, utcnow


class ReservationStatus(str, Enum):
    PENDING = "Pending"
    FULFILLED = "Fulfilled"
    CANCELLED = "Cancelled"
    EXPIRED = "Expired"


class Reservation(Base):
    """A member's hold request on a book"""
    __tablename__ = 'Reservations'

    reservation_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    book_id: Mapped[int] = mapped_column(
        ForeignKey('Books.book_id', name='fk_reservation_book'), nullable=False)
    member_id: Mapped[int] = mapped_column(
        ForeignKey('Members.member_id', name='fk_reservation_member'), nullable=False)
    reservation_date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, server_default=func.current_timestamp())
    expiration_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[ReservationStatus] = mapped_column(
        status_enum(ReservationStatus, 'reservation_status'),
        nullable=False,
        default=ReservationStatus.PENDING,
        server_default=ReservationStatus.PENDING.value,
    )

    # Relationships
    book = relationship('Book', back_populates='reservations')
    member = relationship('Member', back_populates='reservations')

    __table_args__ = (
        CheckConstraint('expiration_date > reservation_date', name='chk_reservation_dates'),

        Index('idx_reservations_book', 'book_id'),
        Index('idx_reservations_member', 'member_id'),
    )

    @validates('status')
    def validate_status(self, key, value):
        return coerce_enum(ReservationStatus, value, self, key)

    @validates('reservation_date', 'expiration_date')
    def validate_timestamp(self, key, value):
        return to_naive_utc(value)

    def validate(self) -> None:
        check_order(self, 'reservation_date', 'expiration_date', 'chk_reservation_dates', strict=True)
