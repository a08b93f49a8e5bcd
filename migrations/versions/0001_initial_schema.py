"""Initial library schema

Revision ID: 0001_initial_schema
Revises: 
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _status(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True, length=20)


def upgrade() -> None:
    # SQLite cannot add a foreign key to an existing table, but it also does not
    # check that the referenced table exists yet, so the manager key goes inline there
    inline_manager_fk = op.get_context().dialect.name == 'sqlite'

    op.create_table('Members',
        sa.Column('member_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=False),
        sa.Column('last_name', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('address', sa.String(length=200), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('membership_date', sa.Date(), nullable=False),
        sa.Column('membership_status', _status('membership_status', 'Active', 'Expired', 'Suspended'),
                  server_default='Active', nullable=False),
        sa.PrimaryKeyConstraint('member_id'),
        sa.UniqueConstraint('email', name='uq_members_email'),
        sa.CheckConstraint("email LIKE '%@%.%'", name='chk_email')
    )

    op.create_table('Authors',
        sa.Column('author_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=False),
        sa.Column('last_name', sa.String(length=50), nullable=False),
        sa.Column('birth_year', sa.Integer(), nullable=True),
        sa.Column('death_year', sa.Integer(), nullable=True),
        sa.Column('nationality', sa.String(length=50), nullable=True),
        sa.Column('biography', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('author_id'),
        sa.CheckConstraint('death_year IS NULL OR birth_year IS NULL OR death_year >= birth_year',
                           name='chk_life_years')
    )

    op.create_table('Publishers',
        sa.Column('publisher_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('address', sa.String(length=200), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.Column('website', sa.String(length=100), nullable=True),
        sa.Column('founding_year', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('publisher_id'),
        sa.UniqueConstraint('name', name='uq_publishers_name'),
        sa.UniqueConstraint('email', name='uq_publishers_email'),
        sa.CheckConstraint("email LIKE '%@%.%'", name='chk_pub_email')
    )

    op.create_table('Books',
        sa.Column('book_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('isbn', sa.String(length=20), nullable=False),
        sa.Column('publisher_id', sa.Integer(), nullable=True),
        sa.Column('publication_year', sa.Integer(), nullable=True),
        sa.Column('edition', sa.Integer(), server_default='1', nullable=True),
        sa.Column('page_count', sa.Integer(), nullable=True),
        sa.Column('language', sa.String(length=30), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint('book_id'),
        sa.ForeignKeyConstraint(['publisher_id'], ['Publishers.publisher_id'], name='fk_book_publisher'),
        sa.UniqueConstraint('isbn', name='uq_books_isbn'),
        sa.CheckConstraint('LENGTH(isbn) >= 10', name='chk_isbn'),
        sa.CheckConstraint('page_count > 0', name='chk_page_count')
    )

    op.create_table('BookAuthors',
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('contribution_type', sa.String(length=50), server_default='Primary Author', nullable=True),
        sa.PrimaryKeyConstraint('book_id', 'author_id'),
        sa.ForeignKeyConstraint(['book_id'], ['Books.book_id'], name='fk_ba_book', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['author_id'], ['Authors.author_id'], name='fk_ba_author', ondelete='CASCADE')
    )

    branch_constraints = [
        sa.PrimaryKeyConstraint('branch_id'),
        sa.CheckConstraint("email IS NULL OR email LIKE '%@%.%'", name='chk_branch_email'),
    ]
    if inline_manager_fk:
        branch_constraints.append(
            sa.ForeignKeyConstraint(['manager_id'], ['Staff.staff_id'], name='fk_branch_manager'))
    op.create_table('LibraryBranches',
        sa.Column('branch_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('address', sa.String(length=200), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.Column('opening_hours', sa.String(length=100), nullable=True),
        sa.Column('manager_id', sa.Integer(), nullable=True),
        *branch_constraints
    )

    op.create_table('Staff',
        sa.Column('staff_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=False),
        sa.Column('last_name', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('address', sa.String(length=200), nullable=True),
        sa.Column('position', sa.String(length=50), nullable=False),
        sa.Column('hire_date', sa.Date(), nullable=False),
        sa.Column('salary', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('supervisor_id', sa.Integer(), nullable=True),
        sa.Column('branch_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('staff_id'),
        sa.ForeignKeyConstraint(['supervisor_id'], ['Staff.staff_id'], name='fk_staff_supervisor'),
        sa.ForeignKeyConstraint(['branch_id'], ['LibraryBranches.branch_id'], name='fk_staff_branch'),
        sa.UniqueConstraint('email', name='uq_staff_email'),
        sa.CheckConstraint("email LIKE '%@%.%'", name='chk_staff_email'),
        sa.CheckConstraint('salary >= 0', name='chk_salary')
    )

    if not inline_manager_fk:
        op.create_foreign_key('fk_branch_manager', 'LibraryBranches', 'Staff', ['manager_id'], ['staff_id'])

    op.create_table('BookCopies',
        sa.Column('copy_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('branch_id', sa.Integer(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('acquisition_date', sa.Date(), nullable=False),
        sa.Column('condition', _status('copy_condition', 'New', 'Good', 'Fair', 'Poor', 'Lost'),
                  server_default='Good', nullable=False),
        sa.Column('location', sa.String(length=50), nullable=False),
        sa.Column('status', _status('copy_status', 'Available', 'Checked Out', 'Reserved', 'Lost', 'Removed'),
                  server_default='Available', nullable=False),
        sa.Column('last_checkout_date', sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint('copy_id'),
        sa.ForeignKeyConstraint(['branch_id'], ['LibraryBranches.branch_id'], name='fk_copy_branch'),
        sa.ForeignKeyConstraint(['book_id'], ['Books.book_id'], name='fk_copy_book', ondelete='CASCADE')
    )

    op.create_table('Loans',
        sa.Column('loan_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('copy_id', sa.Integer(), nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('checkout_date', sa.DateTime(), nullable=False),
        sa.Column('due_date', sa.DateTime(), nullable=False),
        sa.Column('return_date', sa.DateTime(), nullable=True),
        sa.Column('late_fee', sa.Numeric(precision=10, scale=2), server_default='0.00', nullable=True),
        sa.Column('status', _status('loan_status', 'Active', 'Returned', 'Overdue', 'Lost'),
                  server_default='Active', nullable=False),
        sa.PrimaryKeyConstraint('loan_id'),
        sa.ForeignKeyConstraint(['copy_id'], ['BookCopies.copy_id'], name='fk_loan_copy'),
        sa.ForeignKeyConstraint(['member_id'], ['Members.member_id'], name='fk_loan_member'),
        sa.CheckConstraint('due_date > checkout_date', name='chk_due_date'),
        sa.CheckConstraint('return_date IS NULL OR return_date >= checkout_date', name='chk_return_date')
    )

    op.create_table('Reservations',
        sa.Column('reservation_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('reservation_date', sa.DateTime(), server_default=sa.func.current_timestamp(), nullable=False),
        sa.Column('expiration_date', sa.DateTime(), nullable=False),
        sa.Column('status', _status('reservation_status', 'Pending', 'Fulfilled', 'Cancelled', 'Expired'),
                  server_default='Pending', nullable=False),
        sa.PrimaryKeyConstraint('reservation_id'),
        sa.ForeignKeyConstraint(['book_id'], ['Books.book_id'], name='fk_reservation_book'),
        sa.ForeignKeyConstraint(['member_id'], ['Members.member_id'], name='fk_reservation_member'),
        sa.CheckConstraint('expiration_date > reservation_date', name='chk_reservation_dates')
    )

    op.create_table('Fines',
        sa.Column('fine_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('loan_id', sa.Integer(), nullable=True),
        sa.Column('amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('issue_date', sa.Date(), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=True),
        sa.Column('status', _status('fine_status', 'Pending', 'Paid', 'Waived'),
                  server_default='Pending', nullable=False),
        sa.Column('reason', sa.String(length=200), nullable=False),
        sa.PrimaryKeyConstraint('fine_id'),
        sa.ForeignKeyConstraint(['member_id'], ['Members.member_id'], name='fk_fine_member'),
        sa.ForeignKeyConstraint(['loan_id'], ['Loans.loan_id'], name='fk_fine_loan'),
        sa.CheckConstraint('amount >= 0', name='chk_fine_amount'),
        sa.CheckConstraint('payment_date IS NULL OR payment_date >= issue_date', name='chk_payment_date')
    )

    # Indexes for performance
    op.create_index('idx_books_title', 'Books', ['title'])
    op.create_index('idx_books_isbn', 'Books', ['isbn'])
    op.create_index('idx_members_name', 'Members', ['last_name', 'first_name'])
    op.create_index('idx_members_email', 'Members', ['email'])
    op.create_index('idx_loans_member', 'Loans', ['member_id'])
    op.create_index('idx_loans_copy', 'Loans', ['copy_id'])
    op.create_index('idx_loans_dates', 'Loans', ['checkout_date', 'due_date', 'return_date'])
    op.create_index('idx_copies_book', 'BookCopies', ['book_id'])
    op.create_index('idx_copies_status', 'BookCopies', ['status'])
    op.create_index('idx_reservations_book', 'Reservations', ['book_id'])
    op.create_index('idx_reservations_member', 'Reservations', ['member_id'])


def downgrade() -> None:
    if op.get_context().dialect.name != 'sqlite':
        op.drop_constraint('fk_branch_manager', 'LibraryBranches', type_='foreignkey')

    # Dropping a table drops its indexes too
    op.drop_table('Fines')
    op.drop_table('Reservations')
    op.drop_table('Loans')
    op.drop_table('BookCopies')
    op.drop_table('Staff')
    op.drop_table('LibraryBranches')
    op.drop_table('BookAuthors')
    op.drop_table('Books')
    op.drop_table('Publishers')
    op.drop_table('Authors')
    op.drop_table('Members')
