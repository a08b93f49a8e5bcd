# catalog/sa/models/publisher.py
from sqlalchemy import CheckConstraint, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..validation import check_email
from .base import Base


class Publisher(Base):
    __tablename__ = 'Publishers'

    publisher_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    website: Mapped[str | None] = mapped_column(String(100), nullable=True)
    founding_year: Mapped[int | None] = mapped_column(Integer, nullable=True)

    books = relationship('Book', back_populates='publisher', passive_deletes='all')

    __table_args__ = (
        UniqueConstraint('name', name='uq_publishers_name'),
        UniqueConstraint('email', name='uq_publishers_email'),
        CheckConstraint("email LIKE '%@%.%'", name='chk_pub_email'),
    )

    def validate(self) -> None:
        check_email(self, 'email', 'chk_pub_email')
