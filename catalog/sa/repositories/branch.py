# catalog/sa/repositories/branch.py
from typing import Optional

from ..errors import ReferentialIntegrityViolation
from ..models import LibraryBranch, Staff
from .base import CatalogRepository


class BranchRepository(CatalogRepository[LibraryBranch]):
    model = LibraryBranch

    def get_by_name(self, name: str) -> Optional[LibraryBranch]:
        return self.session.query(LibraryBranch).filter(LibraryBranch.name == name).first()

    def assign_manager(self, branch_id: int, staff_id: Optional[int]) -> Optional[LibraryBranch]:
        """Set or clear the manager of a branch.

        Args:
            branch_id: The branch to update
            staff_id: The staff member to make manager, or None to clear

        Returns:
            The updated branch if found, None otherwise

        Raises:
            ReferentialIntegrityViolation: If the staff member does not exist
        """
        if staff_id is not None and self.session.get(Staff, staff_id) is None:
            raise ReferentialIntegrityViolation(f"Staff {staff_id} does not exist",
                                                'fk_branch_manager', 'LibraryBranches')
        return self.update(branch_id, manager_id=staff_id)
