# catalog/sa/__init__.py
from .database import Database
from .ddl import render_ddl, schema_statements
from .errors import (
    ConstraintViolation, UniquenessViolation, FormatViolation,
    RangeViolation, ReferentialIntegrityViolation, NotNullViolation,
    translate_integrity_error
)
from .models import (
    Base, Member, Author, Publisher, Book, BookAuthor, BookCopy,
    Loan, Reservation, Fine, Staff, LibraryBranch,
    MembershipStatus, CopyCondition, CopyStatus, LoanStatus,
    ReservationStatus, FineStatus
)

__all__ = [
    'Database',
    'render_ddl',
    'schema_statements',
    'ConstraintViolation',
    'UniquenessViolation',
    'FormatViolation',
    'RangeViolation',
    'ReferentialIntegrityViolation',
    'NotNullViolation',
    'translate_integrity_error',
    'Base',
    'Member',
    'Author',
    'Publisher',
    'Book',
    'BookAuthor',
    'BookCopy',
    'Loan',
    'Reservation',
    'Fine',
    'Staff',
    'LibraryBranch',
    'MembershipStatus',
    'CopyCondition',
    'CopyStatus',
    'LoanStatus',
    'ReservationStatus',
    'FineStatus'
]
