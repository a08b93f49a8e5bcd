# catalog/sa/models/branch.py
from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..validation import check_email
from .base import Base


class LibraryBranch(Base):
    """A physical branch location"""
    __tablename__ = 'LibraryBranches'

    branch_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    opening_hours: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # Staff rows reference branches too; this side is added after both tables exist
    manager_id: Mapped[int | None] = mapped_column(
        ForeignKey('Staff.staff_id', name='fk_branch_manager', use_alter=True), nullable=True)

    # Relationships
    manager = relationship('Staff', foreign_keys=[manager_id], back_populates='managed_branches',
                           post_update=True)
    staff = relationship('Staff', foreign_keys='Staff.branch_id', back_populates='branch',
                         passive_deletes='all')
    copies = relationship('BookCopy', back_populates='branch', passive_deletes='all')

    __table_args__ = (
        CheckConstraint("email IS NULL OR email LIKE '%@%.%'", name='chk_branch_email'),
    )

    def validate(self) -> None:
        check_email(self, 'email', 'chk_branch_email')
