# catalog/sa/models/book.py
from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..validation import check_min_length, check_positive
from .base import Base

DEFAULT_CONTRIBUTION = "Primary Author"


class BookAuthor(Base):
    """Association model for authors of a book"""
    __tablename__ = 'BookAuthors'

    book_id: Mapped[int] = mapped_column(
        ForeignKey('Books.book_id', name='fk_ba_book', ondelete='CASCADE'), primary_key=True)
    author_id: Mapped[int] = mapped_column(
        ForeignKey('Authors.author_id', name='fk_ba_author', ondelete='CASCADE'), primary_key=True)
    contribution_type: Mapped[str | None] = mapped_column(
        String(50), nullable=True, default=DEFAULT_CONTRIBUTION, server_default=DEFAULT_CONTRIBUTION)

    # Relationships
    book = relationship('Book', back_populates='book_authors')
    author = relationship('Author', back_populates='book_authors')


class Book(Base):
    """A logical work; physical units are BookCopy rows"""
    __tablename__ = 'Books'

    book_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False)
    publisher_id: Mapped[int | None] = mapped_column(
        ForeignKey('Publishers.publisher_id', name='fk_book_publisher'), nullable=True)
    publication_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    edition: Mapped[int | None] = mapped_column(Integer, nullable=True, default=1, server_default='1')
    page_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    language: Mapped[str | None] = mapped_column(String(30), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Relationships; authors and copies are removed with the book
    publisher = relationship('Publisher', back_populates='books')
    book_authors = relationship('BookAuthor', back_populates='book',
                                cascade='all, delete-orphan', passive_deletes=True)
    copies = relationship('BookCopy', back_populates='book',
                          cascade='all, delete-orphan', passive_deletes=True)
    reservations = relationship('Reservation', back_populates='book', passive_deletes='all')

    # Convenience relationship
    authors = relationship('Author', secondary='BookAuthors', viewonly=True)

    __table_args__ = (
        UniqueConstraint('isbn', name='uq_books_isbn'),
        CheckConstraint('LENGTH(isbn) >= 10', name='chk_isbn'),
        CheckConstraint('page_count > 0', name='chk_page_count'),

        # Search indexes
        Index('idx_books_title', 'title'),
        Index('idx_books_isbn', 'isbn'),
    )

    def validate(self) -> None:
        check_min_length(self, 'isbn', 10, 'chk_isbn')
        check_positive(self, 'page_count', 'chk_page_count')
