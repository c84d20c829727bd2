"""Create portfolio tables

Revision ID: 20261017_000001
Revises: None
Create Date: 2026-10-17

This migration creates owners, properties, tenants, leases, rent payments,
expenses and valuation snapshots.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261017_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PROPERTY_TYPES = (
    'APARTMENT', 'OFFICETEL', 'VILLA', 'STUDIO', 'COMMERCIAL',
    'OFFICE', 'BUILDING', 'LAND', 'OTHER',
)
PAYMENT_STATUSES = ('PAID', 'PENDING', 'PARTIAL', 'OVERDUE')
EXPENSE_TYPES = (
    'PROPERTY_TAX', 'INCOME_TAX', 'MAINTENANCE', 'INSURANCE', 'MANAGEMENT_FEE',
    'LOAN_INTEREST', 'VACANCY_COST', 'AGENT_FEE', 'OTHER',
)


def upgrade() -> None:
    """Create all portfolio tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column(
            'property_type',
            sa.Enum(*PROPERTY_TYPES, name='property_type', create_constraint=True),
            nullable=False,
        ),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('address_detail', sa.String(length=255), nullable=True),
        sa.Column('area', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('purchase_price', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('purchase_date', sa.Date(), nullable=False),
        sa.Column('acquisition_cost', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('loan_amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('loan_interest_rate', sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column('current_value', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column(
            'status',
            sa.Enum('OCCUPIED', 'VACANT', 'MAINTENANCE', 'FOR_SALE', name='property_status', create_constraint=True),
            nullable=False,
        ),
        sa.Column('memo', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['owner_id'],
            ['users.id'],
            name='fk_properties_owner_id',
            ondelete='CASCADE'
        ),
    )
    op.create_index('ix_properties_owner_id', 'properties', ['owner_id'])
    op.create_index('ix_properties_status', 'properties', ['status'])

    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('id_number', sa.String(length=100), nullable=True),
        sa.Column('memo', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'leases',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('floor', sa.String(length=20), nullable=True),
        sa.Column('area_pyeong', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column(
            'lease_type',
            sa.Enum('JEONSE', 'MONTHLY', 'HALF_JEONSE', name='lease_type', create_constraint=True),
            nullable=False,
        ),
        sa.Column('deposit', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('monthly_rent', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('management_fee', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('has_vat', sa.Boolean(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('rent_due_day', sa.Integer(), nullable=False),
        sa.Column(
            'status',
            sa.Enum('ACTIVE', 'EXPIRED', 'TERMINATED', 'PENDING', name='lease_status', create_constraint=True),
            nullable=False,
        ),
        sa.Column('memo', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_leases_property_id',
            ondelete='NO ACTION'
        ),
        sa.ForeignKeyConstraint(
            ['tenant_id'],
            ['tenants.id'],
            name='fk_leases_tenant_id',
            ondelete='SET NULL'
        ),
    )
    op.create_index('ix_leases_property_id', 'leases', ['property_id'])
    op.create_index('ix_leases_tenant_id', 'leases', ['tenant_id'])
    op.create_index('ix_leases_status', 'leases', ['status'])

    op.create_table(
        'rent_payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('lease_id', sa.Integer(), nullable=False),
        sa.Column('payment_year', sa.Integer(), nullable=False),
        sa.Column('payment_month', sa.Integer(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('payment_date', sa.DateTime(), nullable=True),
        sa.Column('rent_amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('management_fee_amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column(
            'payment_method',
            sa.Enum('TRANSFER', 'CASH', 'CARD', 'AUTO_TRANSFER', name='payment_method', create_constraint=True),
            nullable=False,
        ),
        sa.Column(
            'rent_status',
            sa.Enum(*PAYMENT_STATUSES, name='rent_status', create_constraint=True),
            nullable=False,
        ),
        sa.Column(
            'management_fee_status',
            sa.Enum(*PAYMENT_STATUSES, name='management_fee_status', create_constraint=True),
            nullable=False,
        ),
        sa.Column('memo', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['lease_id'],
            ['leases.id'],
            name='fk_rent_payments_lease_id',
            ondelete='CASCADE'
        ),
        sa.UniqueConstraint(
            'lease_id', 'payment_year', 'payment_month',
            name='uq_rent_payments_lease_year_month'
        ),
    )
    op.create_index('ix_rent_payments_lease_id', 'rent_payments', ['lease_id'])
    op.create_index('ix_rent_payments_due_date', 'rent_payments', ['due_date'])
    op.create_index('ix_rent_payments_rent_status', 'rent_payments', ['rent_status'])

    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column(
            'expense_type',
            sa.Enum(*EXPENSE_TYPES, name='expense_type', create_constraint=True),
            nullable=False,
        ),
        sa.Column('amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('expense_date', sa.Date(), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('is_recurring', sa.Boolean(), nullable=False),
        sa.Column('recurring_month', sa.Integer(), nullable=True),
        sa.Column('memo', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_expenses_property_id',
            ondelete='NO ACTION'
        ),
    )
    op.create_index('ix_expenses_property_id', 'expenses', ['property_id'])
    op.create_index('ix_expenses_expense_date', 'expenses', ['expense_date'])

    op.create_table(
        'property_valuations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('annual_rent', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('total_deposit', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('annual_expense', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('net_income', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('total_investment', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('gross_yield', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('net_yield', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('cash_on_cash', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('target_yield', sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column('suggested_price', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('expected_profit', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('memo', sa.Text(), nullable=True),
        sa.Column('calculated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['property_id'],
            ['properties.id'],
            name='fk_property_valuations_property_id',
            ondelete='NO ACTION'
        ),
    )
    op.create_index('ix_property_valuations_property_id', 'property_valuations', ['property_id'])


def downgrade() -> None:
    """Drop all portfolio tables."""
    op.drop_index('ix_property_valuations_property_id', table_name='property_valuations')
    op.drop_table('property_valuations')

    op.drop_index('ix_expenses_expense_date', table_name='expenses')
    op.drop_index('ix_expenses_property_id', table_name='expenses')
    op.drop_table('expenses')

    op.drop_index('ix_rent_payments_rent_status', table_name='rent_payments')
    op.drop_index('ix_rent_payments_due_date', table_name='rent_payments')
    op.drop_index('ix_rent_payments_lease_id', table_name='rent_payments')
    op.drop_table('rent_payments')

    op.drop_index('ix_leases_status', table_name='leases')
    op.drop_index('ix_leases_tenant_id', table_name='leases')
    op.drop_index('ix_leases_property_id', table_name='leases')
    op.drop_table('leases')

    op.drop_table('tenants')

    op.drop_index('ix_properties_status', table_name='properties')
    op.drop_index('ix_properties_owner_id', table_name='properties')
    op.drop_table('properties')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
