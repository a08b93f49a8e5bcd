# catalog/sa/models/author.py
from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..validation import check_order
from .base import Base


class Author(Base):
    __tablename__ = 'Authors'

    author_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    birth_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    death_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(50), nullable=True)
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships; BookAuthors rows go with the author
    book_authors = relationship('BookAuthor', back_populates='author',
                                cascade='all, delete-orphan', passive_deletes=True)

    # Convenience relationship
    books = relationship('Book', secondary='BookAuthors', viewonly=True)

    __table_args__ = (
        CheckConstraint(
            'death_year IS NULL OR birth_year IS NULL OR death_year >= birth_year',
            name='chk_life_years',
        ),
    )

    def validate(self) -> None:
        check_order(self, 'birth_year', 'death_year', 'chk_life_years')
