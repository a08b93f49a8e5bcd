# catalog/sa/models/__init__.py
from .base import Base, status_enum, utcnow
from .member import Member, MembershipStatus
from .author import Author
from .publisher import Publisher
from .book import Book, BookAuthor, DEFAULT_CONTRIBUTION
from .branch import LibraryBranch
from .staff import Staff
from .copy import BookCopy, CopyCondition, CopyStatus
from .loan import Loan, LoanStatus
from .reservation import Reservation, ReservationStatus
from .fine import Fine, FineStatus

__all__ = [
    'Base',
    'status_enum',
    'utcnow',
    'Member',
    'MembershipStatus',
    'Author',
    'Publisher',
    'Book',
    'BookAuthor',
    'DEFAULT_CONTRIBUTION',
    'LibraryBranch',
    'Staff',
    'BookCopy',
    'CopyCondition',
    'CopyStatus',
    'Loan',
    'LoanStatus',
    'Reservation',
    'ReservationStatus',
    'Fine',
    'FineStatus'
]
