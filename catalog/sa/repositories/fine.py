# catalog/sa/repositories/fine.py
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func

from ..models import Fine, FineStatus
from .base import CatalogRepository


class FineRepository(CatalogRepository[Fine]):
    model = Fine

    def get_by_member(self, member_id: int, status: Optional[FineStatus] = None) -> List[Fine]:
        query = self.session.query(Fine).filter(Fine.member_id == member_id)
        if status is not None:
            query = query.filter(Fine.status == status)
        return query.order_by(Fine.issue_date.desc()).all()

    def get_by_loan(self, loan_id: int) -> List[Fine]:
        return self.session.query(Fine).filter(Fine.loan_id == loan_id).all()

    def total_pending(self, member_id: int) -> Decimal:
        """Sum of a member's unpaid, unwaived fines"""
        total = (
            self.session.query(func.sum(Fine.amount))
            .filter(Fine.member_id == member_id, Fine.status == FineStatus.PENDING)
            .scalar()
        )
        return Decimal(total or 0).quantize(Decimal('0.01'))
