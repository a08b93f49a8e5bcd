# catalog/sa/repositories/author.py
from typing import List

from sqlalchemy import or_

from ..models import Author, Book, BookAuthor
from .base import CatalogRepository


class AuthorRepository(CatalogRepository[Author]):
    model = Author

    def search_authors(self, query: str, limit: int = 20) -> List[Author]:
        """Search authors by first or last name"""
        base_query = self.session.query(Author)
        if query:  # Only apply filter if query is not empty
            base_query = base_query.filter(or_(
                Author.first_name.ilike(f"%{query}%"),
                Author.last_name.ilike(f"%{query}%"),
            ))
        return base_query.order_by(Author.last_name, Author.first_name).limit(limit).all()

    def get_authors_by_book(self, book_id: int) -> List[Author]:
        """Get all authors for a specific book"""
        return (
            self.session.query(Author)
            .join(BookAuthor, BookAuthor.author_id == Author.author_id)
            .filter(BookAuthor.book_id == book_id)
            .all()
        )

    def get_books(self, author_id: int) -> List[Book]:
        """Get all books an author contributed to"""
        return (
            self.session.query(Book)
            .join(BookAuthor, BookAuthor.book_id == Book.book_id)
            .filter(BookAuthor.author_id == author_id)
            .order_by(Book.title)
            .all()
        )
