# tests/test_sa/conftest.py
import sys
import pytest
from pathlib import Path
from datetime import date, datetime, timedelta
from decimal import Decimal

# Add project root to Python path
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from catalog.sa.database import Database
from catalog.sa.models import (
    Author, Book, BookAuthor, BookCopy, LibraryBranch, Loan,
    Member, Publisher, Staff
)

CHECKOUT = datetime(2026, 3, 2, 10, 30)


@pytest.fixture
def database(tmp_path):
    """Create a fresh database file with the full schema for each test"""
    db = Database(f"sqlite:///{tmp_path / 'test_library.db'}")
    db.init_db()
    yield db
    db.engine.dispose()


@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sample_branch(db_session):
    """Create a sample branch for testing."""
    branch = LibraryBranch(
        name="Central",
        address="1 Main Street",
        phone="555-0100",
        email="central@library.org",
        opening_hours="Mon-Sat 9-18"
    )
    db_session.add(branch)
    db_session.commit()
    return branch


@pytest.fixture
def sample_publisher(db_session):
    """Create a sample publisher for testing."""
    publisher = Publisher(
        name="Acme Press",
        email="info@acmepress.com",
        founding_year=1950
    )
    db_session.add(publisher)
    db_session.commit()
    return publisher


@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(
        first_name="Ursula",
        last_name="Le Guin",
        birth_year=1929,
        death_year=2018,
        nationality="American"
    )
    db_session.add(author)
    db_session.commit()
    return author


@pytest.fixture
def sample_book(db_session, sample_publisher):
    """Create a sample book for testing."""
    book = Book(
        title="Test Book",
        isbn="1234567890",
        publisher_id=sample_publisher.publisher_id,
        publication_year=1969,
        page_count=300,
        category="Fiction"
    )
    db_session.add(book)
    db_session.commit()
    return book


@pytest.fixture
def sample_book_with_author(db_session, sample_book, sample_author):
    """Create a book credited to the sample author."""
    db_session.add(BookAuthor(book_id=sample_book.book_id, author_id=sample_author.author_id))
    db_session.commit()
    return sample_book


@pytest.fixture
def sample_copy(db_session, sample_book, sample_branch):
    """Create a copy of the sample book at the sample branch."""
    copy = BookCopy(
        book_id=sample_book.book_id,
        branch_id=sample_branch.branch_id,
        acquisition_date=date(2025, 1, 15),
        location="Shelf A1"
    )
    db_session.add(copy)
    db_session.commit()
    return copy


@pytest.fixture
def sample_member(db_session):
    """Create a sample member for testing."""
    member = Member(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        membership_date=date(2025, 6, 1)
    )
    db_session.add(member)
    db_session.commit()
    return member


@pytest.fixture
def sample_loan(db_session, sample_copy, sample_member):
    """Create an active loan of the sample copy to the sample member."""
    loan = Loan(
        copy_id=sample_copy.copy_id,
        member_id=sample_member.member_id,
        checkout_date=CHECKOUT,
        due_date=CHECKOUT + timedelta(days=14)
    )
    db_session.add(loan)
    db_session.commit()
    return loan


@pytest.fixture
def sample_staff(db_session, sample_branch):
    """Create a staff member working at the sample branch."""
    staff = Staff(
        first_name="Grace",
        last_name="Hopper",
        email="grace@library.org",
        position="Head Librarian",
        hire_date=date(2020, 1, 6),
        salary=Decimal("52000.00"),
        branch_id=sample_branch.branch_id
    )
    db_session.add(staff)
    db_session.commit()
    return staff
