# catalog/sa/repositories/staff.py
from typing import List, Optional

from ..models import Staff
from .base import CatalogRepository


class StaffRepository(CatalogRepository[Staff]):
    model = Staff

    def get_by_email(self, email: str) -> Optional[Staff]:
        return self.session.query(Staff).filter(Staff.email == email).first()

    def get_subordinates(self, supervisor_id: int) -> List[Staff]:
        """Get the staff who report directly to a supervisor"""
        return (
            self.session.query(Staff)
            .filter(Staff.supervisor_id == supervisor_id)
            .order_by(Staff.last_name, Staff.first_name)
            .all()
        )

    def get_by_branch(self, branch_id: int) -> List[Staff]:
        return self.session.query(Staff).filter(Staff.branch_id == branch_id).all()
