"""initial schema: staff, ledgers and students

Revision ID: 3c1d7a9e5b20
Revises:
Create Date: 2025-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3c1d7a9e5b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade():
    op.create_table(
        'employees',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('branch', sa.Integer(), nullable=False),
        sa.Column('employment_type', sa.Integer(), nullable=False),
        sa.Column('designation', sa.Integer(), nullable=False),
        sa.Column('fullname', sa.String(length=100), nullable=False),
        sa.Column('profile_image', sa.String(length=255), nullable=True),
        sa.Column('nid_no', sa.String(length=10), nullable=False),
        sa.Column('gender', sa.String(length=20), nullable=False),
        sa.Column('phone_number', sa.String(length=11), nullable=False),
        sa.Column('join_date', sa.DateTime(), nullable=False),
        sa.Column('resign_date', sa.DateTime(), nullable=True),
        sa.Column('salary', sa.Numeric(12, 2), nullable=False),
        sa.Column('bonus', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('current_location', sa.String(length=250), nullable=False),
        sa.Column('permanent_location', sa.String(length=250), nullable=False),
        sa.Column('disable', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('nid_no'),
        sa.UniqueConstraint('phone_number'),
        sa.CheckConstraint('salary >= 0', name='ck_employee_salary_positive'),
        sa.CheckConstraint('bonus >= 0', name='ck_employee_bonus_positive'),
    )
    op.create_index('ix_employees_branch', 'employees', ['branch'])

    op.create_table(
        'admins',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('employee_id', sa.Uuid(), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Integer(), nullable=False, server_default='2'),
        sa.Column('access_boys_section', sa.Boolean(), nullable=False),
        sa.Column('access_girls_section', sa.Boolean(), nullable=False),
        sa.Column('disable', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.id']),
        sa.UniqueConstraint('employee_id'),
    )

    op.create_table(
        'incomes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('admin_id', sa.Uuid(), nullable=False),
        sa.Column('branch', sa.Integer(), nullable=False),
        sa.Column('type', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('income_date', sa.DateTime(), nullable=False),
        sa.Column('notes', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id']),
        sa.CheckConstraint('amount >= 0', name='ck_income_amount_positive'),
    )
    op.create_index('ix_incomes_branch_date', 'incomes', ['branch', 'income_date'])

    op.create_table(
        'donations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('admin_id', sa.Uuid(), nullable=False),
        sa.Column('branch', sa.Integer(), nullable=False),
        sa.Column('donation_type', sa.Integer(), nullable=False),
        sa.Column('fullname', sa.String(length=100), nullable=False),
        sa.Column('phone_number', sa.String(length=15), nullable=False),
        sa.Column('donation_amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('donation_date', sa.DateTime(), nullable=False),
        sa.Column('notes', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id']),
        sa.CheckConstraint('donation_type BETWEEN 1 AND 4', name='ck_donation_type'),
        sa.CheckConstraint('donation_amount >= 0', name='ck_donation_amount_positive'),
    )
    op.create_index('ix_donations_branch_date', 'donations', ['branch', 'donation_date'])

    op.create_table(
        'expenses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('admin_id', sa.Uuid(), nullable=False),
        sa.Column('branch', sa.Integer(), nullable=False),
        sa.Column('type', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('expense_date', sa.DateTime(), nullable=False),
        sa.Column('notes', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id']),
        sa.CheckConstraint('amount >= 0', name='ck_expense_amount_positive'),
    )
    op.create_index('ix_expenses_branch_date', 'expenses', ['branch', 'expense_date'])

    op.create_table(
        'students',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('admin_id', sa.Uuid(), nullable=False),
        sa.Column('branch', sa.Integer(), nullable=False),
        sa.Column('fullname', sa.String(length=100), nullable=False),
        sa.Column('profile_image', sa.String(length=255), nullable=True),
        sa.Column('blood_group', sa.String(length=10), nullable=False),
        sa.Column('gender', sa.String(length=50), nullable=False),
        sa.Column('birth_certificate_no', sa.String(length=17), nullable=False),
        sa.Column('registration_date', sa.DateTime(), nullable=False),
        sa.Column('is_residential', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('residential_category', sa.String(length=50), nullable=True),
        sa.Column('residential_fee', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('is_day_care', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('waiver_amount', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('current_location', sa.String(length=150), nullable=False),
        sa.Column('permanent_location', sa.String(length=150), nullable=False),
        sa.Column('disable', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['admin_id'], ['admins.id']),
        sa.CheckConstraint('residential_fee >= 0', name='ck_student_residential_fee_positive'),
        sa.CheckConstraint('waiver_amount >= 0', name='ck_student_waiver_positive'),
    )
    op.create_index('ix_students_branch', 'students', ['branch'])

    op.create_table(
        'student_enrollments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('student_id', sa.Uuid(), nullable=False),
        sa.Column('group', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('section', sa.Integer(), nullable=True),
        sa.Column('class', sa.Integer(), nullable=True),
        sa.Column('roll', sa.Integer(), nullable=False),
        sa.Column('academic_year', sa.Integer(), nullable=False),
        sa.Column('fee', sa.Numeric(12, 2), nullable=False, server_default='0'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['student_id'], ['students.id']),
        sa.CheckConstraint('fee >= 0', name='ck_enrollment_fee_positive'),
    )
    op.create_index('ix_student_enrollments_student_id', 'student_enrollments', ['student_id'])
    op.create_index('ix_student_enrollments_student_year', 'student_enrollments', ['student_id', 'academic_year'])

    op.create_table(
        'student_guardians',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('student_id', sa.Uuid(), nullable=False),
        sa.Column('guardian_name', sa.String(length=100), nullable=False),
        sa.Column('guardian_relation', sa.String(length=50), nullable=False),
        sa.Column('phone_number', sa.String(length=11), nullable=False),
        sa.Column('alternative_phone_number', sa.String(length=11), nullable=True),
        sa.Column('current_location', sa.String(length=150), nullable=False),
        sa.Column('permanent_location', sa.String(length=150), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['student_id'], ['students.id']),
        sa.UniqueConstraint('student_id'),
    )


def downgrade():
    op.drop_table('student_guardians')
    op.drop_index('ix_student_enrollments_student_year', table_name='student_enrollments')
    op.drop_index('ix_student_enrollments_student_id', table_name='student_enrollments')
    op.drop_table('student_enrollments')
    op.drop_index('ix_students_branch', table_name='students')
    op.drop_table('students')
    op.drop_index('ix_expenses_branch_date', table_name='expenses')
    op.drop_table('expenses')
    op.drop_index('ix_donations_branch_date', table_name='donations')
    op.drop_table('donations')
    op.drop_index('ix_incomes_branch_date', table_name='incomes')
    op.drop_table('incomes')
    op.drop_table('admins')
    op.drop_index('ix_employees_branch', table_name='employees')
    op.drop_table('employees')
