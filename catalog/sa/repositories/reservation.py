# catalog/sa/repositories/reservation.py
from typing import List, Optional

from ..models import Reservation, ReservationStatus
from .base import CatalogRepository


class ReservationRepository(CatalogRepository[Reservation]):
    model = Reservation

    def get_by_book(self, book_id: int, status: Optional[ReservationStatus] = None) -> List[Reservation]:
        """Get the holds on a book in the order they were placed"""
        query = self.session.query(Reservation).filter(Reservation.book_id == book_id)
        if status is not None:
            query = query.filter(Reservation.status == status)
        return query.order_by(Reservation.reservation_date.asc()).all()

    def get_by_member(self, member_id: int) -> List[Reservation]:
        return (
            self.session.query(Reservation)
            .filter(Reservation.member_id == member_id)
            .order_by(Reservation.reservation_date.desc())
            .all()
        )
