"""initial tyre service schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-17 09:12:44.508113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'clients',
        sa.Column('id_key', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('full_name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint('id_key'),
    )
    op.create_index(op.f('ix_clients_full_name'), 'clients', ['full_name'], unique=False)

    op.create_table(
        'masters',
        sa.Column('id_key', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('full_name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('specialization', sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint('id_key'),
    )
    op.create_index(op.f('ix_masters_full_name'), 'masters', ['full_name'], unique=False)

    op.create_table(
        'services',
        sa.Column('id_key', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('service_code', sa.Integer(), nullable=False),
        sa.Column('service_name', sa.String(length=100), nullable=False),
        sa.Column('service_cost', sa.Float(), nullable=False),
        sa.CheckConstraint('service_cost >= 0 AND service_cost <= 1000000', name='ck_services_cost'),
        sa.PrimaryKeyConstraint('id_key'),
    )
    op.create_index(op.f('ix_services_service_code'), 'services', ['service_code'], unique=True)

    op.create_table(
        'cars',
        sa.Column('id_key', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('brand', sa.String(length=50), nullable=False),
        sa.Column('model', sa.String(length=50), nullable=False),
        sa.Column('manufacture_year', sa.Integer(), nullable=False),
        sa.Column('license_plate', sa.String(length=20), nullable=False),
        sa.Column('vin', sa.String(length=17), nullable=True),
        sa.Column('photo_path', sa.String(length=255), nullable=True),
        sa.Column('additional_photos', sa.Text(), nullable=True),
        sa.Column('version_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['client_id'], ['clients.id_key'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id_key'),
    )
    op.create_index(op.f('ix_cars_client_id'), 'cars', ['client_id'], unique=False)
    op.create_index(op.f('ix_cars_license_plate'), 'cars', ['license_plate'], unique=False)

    op.create_table(
        'tires',
        sa.Column('id_key', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('car_id', sa.Integer(), nullable=False),
        sa.Column('tire_type', sa.String(length=50), nullable=False),
        sa.Column('seasonality', sa.String(length=50), nullable=False),
        sa.Column('manufacturer', sa.String(length=50), nullable=False),
        sa.Column('tire_model', sa.String(length=50), nullable=False),
        sa.Column('size', sa.String(length=20), nullable=False),
        sa.Column('load_index', sa.Integer(), nullable=False),
        sa.Column('wear_percentage', sa.Integer(), nullable=False),
        sa.Column('pressure', sa.Numeric(precision=3, scale=1), nullable=False),
        sa.CheckConstraint('wear_percentage >= 0 AND wear_percentage <= 100', name='ck_tires_wear_percentage'),
        sa.CheckConstraint('pressure >= 0 AND pressure <= 10', name='ck_tires_pressure'),
        sa.ForeignKeyConstraint(['car_id'], ['cars.id_key'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id_key'),
    )
    op.create_index(op.f('ix_tires_car_id'), 'tires', ['car_id'], unique=False)

    op.create_table(
        'orders',
        sa.Column('id_key', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('order_number', sa.Integer(), nullable=False),
        sa.Column('car_id', sa.Integer(), nullable=False),
        sa.Column('master_id', sa.Integer(), nullable=True),
        sa.Column('order_date', sa.DateTime(), nullable=False),
        sa.Column('payment_date', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['car_id'], ['cars.id_key'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['master_id'], ['masters.id_key'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id_key'),
    )
    op.create_index(op.f('ix_orders_order_number'), 'orders', ['order_number'], unique=True)
    op.create_index(op.f('ix_orders_car_id'), 'orders', ['car_id'], unique=False)
    op.create_index(op.f('ix_orders_master_id'), 'orders', ['master_id'], unique=False)
    op.create_index(op.f('ix_orders_order_date'), 'orders', ['order_date'], unique=False)

    op.create_table(
        'completed_works',
        sa.Column('id_key', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('order_number', sa.Integer(), nullable=False),
        sa.Column('service_code', sa.Integer(), nullable=False),
        sa.Column('master_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['order_number'], ['orders.order_number'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['service_code'], ['services.service_code'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['master_id'], ['masters.id_key'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id_key'),
    )
    op.create_index(op.f('ix_completed_works_order_number'), 'completed_works', ['order_number'], unique=False)
    op.create_index(op.f('ix_completed_works_service_code'), 'completed_works', ['service_code'], unique=False)
    op.create_index(op.f('ix_completed_works_master_id'), 'completed_works', ['master_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('completed_works')
    op.drop_table('orders')
    op.drop_table('tires')
    op.drop_table('cars')
    op.drop_table('services')
    op.drop_table('masters')
    op.drop_table('clients')
