# catalog/sa/repositories/copy.py
from typing import List, Optional

from ..models import BookCopy, CopyStatus
from .base import CatalogRepository


class BookCopyRepository(CatalogRepository[BookCopy]):
    model = BookCopy

    def get_by_book(self, book_id: int, status: Optional[CopyStatus] = None) -> List[BookCopy]:
        """Get the copies of a book, optionally only those in one status"""
        query = self.session.query(BookCopy).filter(BookCopy.book_id == book_id)
        if status is not None:
            query = query.filter(BookCopy.status == status)
        return query.order_by(BookCopy.copy_id).all()

    def get_by_status(self, status: CopyStatus, branch_id: Optional[int] = None) -> List[BookCopy]:
        query = self.session.query(BookCopy).filter(BookCopy.status == status)
        if branch_id is not None:
            query = query.filter(BookCopy.branch_id == branch_id)
        return query.order_by(BookCopy.copy_id).all()

    def get_by_branch(self, branch_id: int) -> List[BookCopy]:
        return self.session.query(BookCopy).filter(BookCopy.branch_id == branch_id).all()
