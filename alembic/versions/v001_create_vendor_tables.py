"""Create user, store and venue tables

Revision ID: v001_create_vendor_tables
Revises:
Create Date: 2026-10-18

Creates the marketplace tables:
- tbl_users (created externally in production, needed for foreign keys)
- tbl_store_category, tbl_store, tbl_store_price
- tbl_venue, tbl_venue_price
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'v001_create_vendor_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'tbl_users',
        sa.Column('user_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_firstName', sa.String(100), nullable=True),
        sa.Column('user_lastName', sa.String(100), nullable=True),
        sa.Column('user_email', sa.String(255), nullable=True),
        sa.Column('user_role', sa.String(50), nullable=True),
        sa.Column('user_pfp', sa.String(512), nullable=True),
    )

    op.create_table(
        'tbl_store_category',
        sa.Column('store_category_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('store_category_type', sa.String(100), nullable=False),
    )

    op.create_table(
        'tbl_store',
        sa.Column('store_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('tbl_users.user_id'), nullable=False, index=True),
        sa.Column('store_name', sa.String(255), nullable=False),
        sa.Column('store_details', sa.Text(), nullable=True),
        sa.Column('store_contact', sa.String(50), nullable=True),
        sa.Column('store_email', sa.String(255), nullable=True),
        sa.Column('store_type', sa.String(100), nullable=True),
        sa.Column('store_description', sa.Text(), nullable=True),
        sa.Column('store_location', sa.String(255), nullable=True),
        sa.Column('store_status', sa.String(50), nullable=False, server_default=sa.text("'active'")),
        sa.Column('store_coverphoto', sa.String(512), nullable=True),
        sa.Column('store_profile_picture', sa.String(512), nullable=True),
        sa.Column(
            'store_category_id',
            sa.Integer(),
            sa.ForeignKey('tbl_store_category.store_category_id'),
            nullable=False,
        ),
    )

    op.create_table(
        'tbl_store_price',
        sa.Column('store_price_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'store_id',
            sa.Integer(),
            sa.ForeignKey('tbl_store.store_id', ondelete='CASCADE'),
            nullable=False,
            index=True,
        ),
        sa.Column('store_price_title', sa.String(255), nullable=True),
        sa.Column('store_price_min', sa.Numeric(12, 2), nullable=False),
        sa.Column('store_price_max', sa.Numeric(12, 2), nullable=False),
        sa.Column('store_price_description', sa.Text(), nullable=True),
    )

    op.create_table(
        'tbl_venue',
        sa.Column('venue_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('tbl_users.user_id'), nullable=False, index=True),
        sa.Column('venue_title', sa.String(255), nullable=False),
        sa.Column('venue_owner', sa.String(255), nullable=True),
        sa.Column('venue_location', sa.String(255), nullable=True),
        sa.Column('venue_contact', sa.String(50), nullable=True),
        sa.Column('venue_details', sa.Text(), nullable=True),
        sa.Column('venue_status', sa.String(50), nullable=False, server_default=sa.text("'available'")),
        sa.Column('venue_type', sa.String(50), nullable=False, server_default=sa.text("'internal'")),
        sa.Column('venue_profile_picture', sa.String(512), nullable=True),
        sa.Column('venue_cover_photo', sa.String(512), nullable=True),
    )

    op.create_table(
        'tbl_venue_price',
        sa.Column('venue_price_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'venue_id',
            sa.Integer(),
            sa.ForeignKey('tbl_venue.venue_id', ondelete='CASCADE'),
            nullable=False,
            index=True,
        ),
        sa.Column('venue_price_title', sa.String(255), nullable=True),
        sa.Column('venue_price_min', sa.Numeric(12, 2), nullable=False),
        sa.Column('venue_price_max', sa.Numeric(12, 2), nullable=False),
        sa.Column('venue_capacity', sa.Integer(), nullable=False),
        sa.Column('venue_price_description', sa.Text(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table('tbl_venue_price')
    op.drop_table('tbl_venue')
    op.drop_table('tbl_store_price')
    op.drop_table('tbl_store')
    op.drop_table('tbl_store_category')
    op.drop_table('tbl_users')
