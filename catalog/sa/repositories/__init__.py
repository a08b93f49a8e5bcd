# catalog/sa/repositories/__init__.py
from .base import CatalogRepository
from .member import MemberRepository
from .author import AuthorRepository
from .publisher import PublisherRepository
from .book import BookRepository
from .copy import BookCopyRepository
from .loan import LoanRepository
from .reservation import ReservationRepository
from .fine import FineRepository
from .staff import StaffRepository
from .branch import BranchRepository

__all__ = [
    'CatalogRepository',
    'MemberRepository',
    'AuthorRepository',
    'PublisherRepository',
    'BookRepository',
    'BookCopyRepository',
    'LoanRepository',
    'ReservationRepository',
    'FineRepository',
    'StaffRepository',
    'BranchRepository'
]
