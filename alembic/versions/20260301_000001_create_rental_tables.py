"""Create rental management tables

Revision ID: 20260301_000001
Revises: None
Create Date: 2026-03-01

Creates one table per record collection: tenants, properties, payments,
maintenances, reminders, documents and owner_info.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20260301_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _money(precision: int = 12) -> sa.Numeric:
    return sa.Numeric(precision=precision, scale=2)


def upgrade() -> None:
    """Create the rental management tables."""
    op.create_table(
        'properties',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('address', sa.String(255), nullable=False),
        sa.Column('base_rent', _money(), nullable=False),
        sa.Column('water_charges', _money(10), nullable=False),
        sa.Column('electricity_charges', _money(10), nullable=False),
        sa.Column('gas_charges', _money(10), nullable=False),
        sa.Column('common_charges', _money(10), nullable=False),
        sa.Column('rent', _money(), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('image_path', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'tenants',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('national_id', sa.String(100), nullable=False),
        sa.Column('nationality', sa.String(100), nullable=False),
        sa.Column('bank_account', sa.String(100), nullable=False),
        sa.Column('property_id', sa.String(36), nullable=True),
        sa.Column('property_name', sa.String(255), nullable=False),
        sa.Column('lease_start', sa.Date(), nullable=True),
        sa.Column('lease_duration', sa.Integer(), nullable=False),
        sa.Column('payment_due_day', sa.Integer(), nullable=False),
        sa.Column('rent', _money(), nullable=False),
        sa.Column('deposit_amount', _money(), nullable=False),
        sa.Column('deposit_status', sa.String(50), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('id_card_url', sa.String(500), nullable=True),
        sa.Column('id_card_path', sa.String(500), nullable=True),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tenants_property_id', 'tenants', ['property_id'])

    # Payments keep snapshots of the tenant and the amount due; no foreign key
    op.create_table(
        'payments',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('tenant_id', sa.String(36), nullable=False),
        sa.Column('tenant_first_name', sa.String(100), nullable=False),
        sa.Column('tenant_last_name', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('property', sa.String(255), nullable=False),
        sa.Column('rent_due', _money(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('amount', _money(), nullable=False),
        sa.Column('status', sa.String(50), nullable=False),
        sa.Column('period', sa.String(100), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_payments_tenant_id', 'payments', ['tenant_id'])
    op.create_index('ix_payments_date', 'payments', ['date'])

    op.create_table(
        'maintenances',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('property_id', sa.String(36), nullable=False),
        sa.Column('property_name', sa.String(255), nullable=False),
        sa.Column('tenant_id', sa.String(36), nullable=True),
        sa.Column('tenant_name', sa.String(255), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('cost', _money(), nullable=False),
        sa.Column('deducted_from_deposit', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_maintenances_property_id', 'maintenances', ['property_id'])
    op.create_index('ix_maintenances_tenant_id', 'maintenances', ['tenant_id'])

    op.create_table(
        'reminders',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('tenant_id', sa.String(36), nullable=False),
        sa.Column('tenant', sa.String(255), nullable=False),
        sa.Column('property', sa.String(255), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('amount', _money(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_reminders_tenant_id', 'reminders', ['tenant_id'])

    op.create_table(
        'documents',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', sa.String(100), nullable=False),
        sa.Column('size', sa.String(50), nullable=False),
        sa.Column('uploaded', sa.String(20), nullable=False),
        sa.Column('url', sa.String(500), nullable=False),
        sa.Column('path', sa.String(500), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'owner_info',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('address', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('bank_account', sa.String(100), nullable=True),
        sa.Column('company_number', sa.String(100), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    """Drop the rental management tables."""
    op.drop_table('owner_info')
    op.drop_table('documents')
    op.drop_index('ix_reminders_tenant_id', table_name='reminders')
    op.drop_table('reminders')
    op.drop_index('ix_maintenances_tenant_id', table_name='maintenances')
    op.drop_index('ix_maintenances_property_id', table_name='maintenances')
    op.drop_table('maintenances')
    op.drop_index('ix_payments_date', table_name='payments')
    op.drop_index('ix_payments_tenant_id', table_name='payments')
    op.drop_table('payments')
    op.drop_index('ix_tenants_property_id', table_name='tenants')
    op.drop_table('tenants')
    op.drop_table('properties')
