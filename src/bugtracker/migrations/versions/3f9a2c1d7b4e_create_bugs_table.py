"""Create bugs table

Revision ID: 3f9a2c1d7b4e
Revises: 
Create Date: 2026-10-18 14:02:11.417250

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a2c1d7b4e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'bugs',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('reported_by', sa.String(length=200), nullable=False),
        sa.Column('status', sa.Enum('open', 'in-progress', 'resolved', name='bug_status'), nullable=False),
        sa.Column('priority', sa.Enum('low', 'medium', 'high', 'critical', name='bug_priority'), nullable=False),
        sa.Column('assigned_to', sa.String(length=200), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_bugs_created_at', 'bugs', ['created_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_bugs_created_at', table_name='bugs')
    op.drop_table('bugs')
