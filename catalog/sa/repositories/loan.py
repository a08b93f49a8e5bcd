# catalog/sa/repositories/loan.py
from datetime import datetime
from typing import List, Optional

from ..models import Loan, LoanStatus
from .base import CatalogRepository


class LoanRepository(CatalogRepository[Loan]):
    model = Loan

    def get_by_member(self, member_id: int, status: Optional[LoanStatus] = None) -> List[Loan]:
        """Get a member's loans, newest checkout first"""
        query = self.session.query(Loan).filter(Loan.member_id == member_id)
        if status is not None:
            query = query.filter(Loan.status == status)
        return query.order_by(Loan.checkout_date.desc()).all()

    def get_by_copy(self, copy_id: int) -> List[Loan]:
        """Get the loan history of one copy, newest checkout first"""
        return (
            self.session.query(Loan)
            .filter(Loan.copy_id == copy_id)
            .order_by(Loan.checkout_date.desc())
            .all()
        )

    def get_due_between(self, start: datetime, end: datetime, unreturned_only: bool = True) -> List[Loan]:
        """Get loans whose due date falls in [start, end].

        Args:
            start: Earliest due date to include
            end: Latest due date to include
            unreturned_only: Skip loans that already have a return date

        Returns:
            List of Loan objects ordered by due date
        """
        query = self.session.query(Loan).filter(Loan.due_date >= start, Loan.due_date <= end)
        if unreturned_only:
            query = query.filter(Loan.return_date.is_(None))
        return query.order_by(Loan.due_date.asc()).all()
