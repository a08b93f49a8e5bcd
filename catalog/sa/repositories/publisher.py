# catalog/sa/repositories/publisher.py
from typing import List, Optional

from ..models import Book, Publisher
from .base import CatalogRepository


class PublisherRepository(CatalogRepository[Publisher]):
    model = Publisher

    def get_by_name(self, name: str) -> Optional[Publisher]:
        return self.session.query(Publisher).filter(Publisher.name == name).first()

    def get_books(self, publisher_id: int) -> List[Book]:
        return self.session.query(Book).filter(Book.publisher_id == publisher_id).order_by(Book.title).all()
