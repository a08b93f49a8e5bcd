# catalog/sa/repositories/book.py
import logging
from typing import List, Optional

from ..errors import ReferentialIntegrityViolation, UniquenessViolation
from ..models import Author, Book, BookAuthor, BookCopy
from .base import CatalogRepository

logger = logging.getLogger(__name__)


class BookRepository(CatalogRepository[Book]):
    model = Book

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by its ISBN"""
        return self.session.query(Book).filter(Book.isbn == isbn).first()

    def search_by_title(self, query: str, limit: int = 20) -> List[Book]:
        """Search for books by title.

        Args:
            query: The search query string
            limit: Maximum number of results to return (default: 20)

        Returns:
            List of matching Book objects ordered by title
        """
        return (
            self.session.query(Book)
            .filter(Book.title.ilike(f"%{query}%"))
            .order_by(Book.title)
            .limit(limit)
            .all()
        )

    def get_copies(self, book_id: int) -> List[BookCopy]:
        return self.session.query(BookCopy).filter(BookCopy.book_id == book_id).all()

    def add_author(self, book_id: int, author_id: int, contribution_type: Optional[str] = None) -> BookAuthor:
        """Link an author to a book.

        Args:
            book_id: The book to credit
            author_id: The author being credited
            contribution_type: Role of the author; defaults to "Primary Author"

        Returns:
            The created BookAuthor row

        Raises:
            ReferentialIntegrityViolation: If the book or the author does not exist
            UniquenessViolation: If the pair is already linked
        """
        if self.session.get(Book, book_id) is None:
            raise ReferentialIntegrityViolation(f"Book {book_id} does not exist", 'fk_ba_book', 'BookAuthors')
        if self.session.get(Author, author_id) is None:
            raise ReferentialIntegrityViolation(f"Author {author_id} does not exist", 'fk_ba_author', 'BookAuthors')

        # Check if the pair already exists
        if self.session.get(BookAuthor, (book_id, author_id)) is not None:
            raise UniquenessViolation(f"Author {author_id} is already linked to book {book_id}",
                                      'BookAuthors_pkey', 'BookAuthors')

        attributes = {'book_id': book_id, 'author_id': author_id}
        if contribution_type is not None:
            attributes['contribution_type'] = contribution_type
        try:
            book_author = BookAuthor(**attributes)
            self.session.add(book_author)
            self.session.commit()
        except Exception as exc:
            self._fail(f"link author {author_id} to book {book_id}", exc)
        return book_author

    def remove_author(self, book_id: int, author_id: int) -> bool:
        """Unlink an author from a book; returns False if they were not linked"""
        book_author = self.session.get(BookAuthor, (book_id, author_id))
        if book_author is None:
            return False
        try:
            self.session.delete(book_author)
            self.session.commit()
        except Exception as exc:
            self._fail(f"unlink author {author_id} from book {book_id}", exc)
        logger.info(f"Removed author {author_id} from book {book_id}")
        return True
