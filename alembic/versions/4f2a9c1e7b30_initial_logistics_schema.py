"""Initial logistics schema: suppliers, trips, trip_animals, users

Revision ID: 4f2a9c1e7b30
Revises:
Create Date: 2026-10-19 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f2a9c1e7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table(
        'suppliers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=64), nullable=True),
        sa.Column('region', sa.String(length=128), nullable=True),
        sa.Column('default_mark', sa.String(length=64), nullable=True),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_suppliers'),
    )
    op.create_index('ix_suppliers_name', 'suppliers', ['name'])
    op.create_index('ix_suppliers_user_id', 'suppliers', ['user_id'])

    op.create_table(
        'trips',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('region', sa.String(length=128), nullable=False),
        sa.Column('truck_no', sa.String(length=64), nullable=False),
        sa.Column('form_no', sa.String(length=64), nullable=False),
        sa.Column('driver_name', sa.String(length=255), nullable=False),
        sa.Column('escort_name', sa.String(length=255), nullable=False),
        sa.Column('prepared_by_name', sa.String(length=255), nullable=True),
        sa.Column('prepared_by_position', sa.String(length=255), nullable=True),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_trips'),
    )
    op.create_index('ix_trips_date', 'trips', ['date'])
    op.create_index('ix_trips_region', 'trips', ['region'])
    op.create_index('ix_trips_user_id', 'trips', ['user_id'])

    op.create_table(
        'trip_animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('trip_id', sa.Uuid(), nullable=False),
        sa.Column('supplier_id', sa.Uuid(), nullable=False),
        sa.Column('mark', sa.String(length=64), nullable=False),
        sa.Column('goats_count', sa.Integer(), nullable=False),
        sa.Column('sheep_count', sa.Integer(), nullable=False),
        sa.Column('total_animals', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('goats_count >= 0', name='ck_trip_animals_goats_non_negative'),
        sa.CheckConstraint('sheep_count >= 0', name='ck_trip_animals_sheep_non_negative'),
        sa.ForeignKeyConstraint(
            ['trip_id'], ['trips.id'], name='fk_trip_animals_trip_id_trips', ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_trip_animals'),
    )
    op.create_index('ix_trip_animals_trip_id', 'trip_animals', ['trip_id'])
    op.create_index('ix_trip_animals_supplier_id', 'trip_animals', ['supplier_id'])


def downgrade() -> None:
    op.drop_index('ix_trip_animals_supplier_id', table_name='trip_animals')
    op.drop_index('ix_trip_animals_trip_id', table_name='trip_animals')
    op.drop_table('trip_animals')
    op.drop_index('ix_trips_user_id', table_name='trips')
    op.drop_index('ix_trips_region', table_name='trips')
    op.drop_index('ix_trips_date', table_name='trips')
    op.drop_table('trips')
    op.drop_index('ix_suppliers_user_id', table_name='suppliers')
    op.drop_index('ix_suppliers_name', table_name='suppliers')
    op.drop_table('suppliers')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
