# catalog/sa/repositories/member.py
from typing import List, Optional

from ..models import Member, MembershipStatus
from .base import CatalogRepository


class MemberRepository(CatalogRepository[Member]):
    model = Member

    def get_by_email(self, email: str) -> Optional[Member]:
        """Get a member by email address"""
        return self.session.query(Member).filter(Member.email == email).first()

    def search_by_name(self, last_name: str, first_name: Optional[str] = None, limit: int = 20) -> List[Member]:
        """Find members by last name, optionally narrowed by first name.

        Matches are prefix matches so the (last_name, first_name) index applies.
        """
        query = self.session.query(Member).filter(Member.last_name.like(f"{last_name}%"))
        if first_name:
            query = query.filter(Member.first_name.like(f"{first_name}%"))
        return query.order_by(Member.last_name, Member.first_name).limit(limit).all()

    def get_by_status(self, status: MembershipStatus) -> List[Member]:
        return self.session.query(Member).filter(Member.membership_status == status).all()
