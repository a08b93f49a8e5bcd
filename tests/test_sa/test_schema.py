# tests/test_sa/test_schema.py
import pytest
from catalog.sa.models import (
    Author, Base, Book, BookAuthor, BookCopy, Fine, LibraryBranch, Loan,
    Member, Publisher, Reservation, Staff
)
from tests.test_sa.utils import DBInspector, print_table_schema, compare_model_to_db

ALL_MODELS = [
    Member, Author, Publisher, Book, BookAuthor, BookCopy,
    Loan, Reservation, Fine, Staff, LibraryBranch
]


def test_all_tables_created(db_session):
    """Every table of the library schema exists"""
    tables = set(DBInspector(db_session).get_all_tables())
    assert tables == {
        'Members', 'Authors', 'Publishers', 'Books', 'BookAuthors', 'BookCopies',
        'Loans', 'Reservations', 'Fines', 'Staff', 'LibraryBranches'
    }
    assert tables == set(Base.metadata.tables)


@pytest.mark.parametrize("model", ALL_MODELS, ids=lambda m: m.__tablename__)
def test_model_matches_table(db_session, model):
    """Test each model matches its database table"""
    print_table_schema(db_session, model.__tablename__)
    differences = compare_model_to_db(db_session, model)
    assert not differences, f"Schema differences found: {differences}"


@pytest.mark.parametrize("table, expected", [
    ('Books', ['idx_books_isbn', 'idx_books_title']),
    ('Members', ['idx_members_email', 'idx_members_name']),
    ('Loans', ['idx_loans_copy', 'idx_loans_dates', 'idx_loans_member']),
    ('BookCopies', ['idx_copies_book', 'idx_copies_status']),
    ('Reservations', ['idx_reservations_book', 'idx_reservations_member']),
])
def test_search_indexes(db_session, table, expected):
    assert DBInspector(db_session).get_index_names(table) == expected


def test_member_name_index_column_order(db_session):
    indexes = {idx['name']: idx for idx in DBInspector(db_session).inspector.get_indexes('Members')}
    assert indexes['idx_members_name']['column_names'] == ['last_name', 'first_name']


@pytest.mark.parametrize("table, expected", [
    ('Members', ['chk_email']),
    ('Authors', ['chk_life_years']),
    ('Publishers', ['chk_pub_email']),
    ('Books', ['chk_isbn', 'chk_page_count']),
    ('Loans', ['chk_due_date', 'chk_return_date']),
    ('Reservations', ['chk_reservation_dates']),
    ('Fines', ['chk_fine_amount', 'chk_payment_date']),
    ('Staff', ['chk_salary', 'chk_staff_email']),
    ('LibraryBranches', ['chk_branch_email']),
])
def test_named_check_constraints(db_session, table, expected):
    names = DBInspector(db_session).get_check_names(table)
    for name in expected:
        assert name in names


@pytest.mark.parametrize("table, referred", [
    ('BookAuthors', {'Books', 'Authors'}),
    ('Books', {'Publishers'}),
    ('BookCopies', {'Books', 'LibraryBranches'}),
    ('Loans', {'BookCopies', 'Members'}),
    ('Reservations', {'Books', 'Members'}),
    ('Fines', {'Members', 'Loans'}),
    ('Staff', {'Staff', 'LibraryBranches'}),
    ('LibraryBranches', {'Staff'}),
])
def test_foreign_keys(db_session, table, referred):
    fks = DBInspector(db_session).get_table_info(table)['foreign_keys']
    assert {fk['referred_table'] for fk in fks} == referred


def test_join_table_has_composite_key(db_session):
    pk = DBInspector(db_session).get_table_info('BookAuthors')['primary_key']
    assert sorted(pk['constrained_columns']) == ['author_id', 'book_id']
