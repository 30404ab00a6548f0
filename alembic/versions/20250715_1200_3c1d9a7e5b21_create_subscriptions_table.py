"""Create subscriptions table with constraints and indexes

Revision ID: 3c1d9a7e5b21
Revises:
Create Date: 2025-07-15 12:00:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1d9a7e5b21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create subscriptions table."""

    # =================================================================
    # TABLE: subscriptions
    # =================================================================
    op.create_table(
        'subscriptions',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('service_name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.UUID(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('price >= 0', name='check_price_non_negative'),
        sa.CheckConstraint(
            'end_date IS NULL OR end_date >= start_date',
            name='check_end_date_after_start'
        )
    )
    op.create_index(
        'idx_subscriptions_user_id',
        'subscriptions',
        ['user_id'],
        unique=False
    )
    op.create_index(
        'idx_subscriptions_service_name',
        'subscriptions',
        ['service_name'],
        unique=False
    )
    # Overlap predicate of the aggregate query
    op.create_index(
        'idx_subscriptions_dates',
        'subscriptions',
        ['start_date', 'end_date'],
        unique=False
    )
    op.create_index(
        'idx_subscriptions_user_dates',
        'subscriptions',
        ['user_id', 'start_date', 'end_date'],
        unique=False
    )


def downgrade() -> None:
    """Drop subscriptions table."""
    op.drop_index('idx_subscriptions_user_dates', table_name='subscriptions')
    op.drop_index('idx_subscriptions_dates', table_name='subscriptions')
    op.drop_index('idx_subscriptions_service_name', table_name='subscriptions')
    op.drop_index('idx_subscriptions_user_id', table_name='subscriptions')
    op.drop_table('subscriptions')
