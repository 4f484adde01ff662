"""goal tracker schema

Revision ID: 3f9c1d2a7b64
Revises: 
Create Date: 2026-10-18 09:12:41.503118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c1d2a7b64'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'goals',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False, server_default='personal'),
        sa.Column('goal_type', sa.String(), nullable=False, server_default='boolean'),
        sa.Column('target_count', sa.Integer(), nullable=False),
        sa.Column('target_period', sa.String(), nullable=False),
        sa.Column('icon', sa.String(), nullable=True),
        sa.Column('color', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
    )

    # One log per goal per calendar day; logs go when their goal goes
    op.create_table(
        'goal_logs',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('goal_id', sa.String(length=32), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['goal_id'], ['goals.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('date', 'goal_id', name='uq_goal_log_date_goal'),
    )
    op.create_index(op.f('ix_goal_logs_date'), 'goal_logs', ['date'], unique=False)

    op.create_table(
        'reminder_settings',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('email', sa.String(), nullable=False, server_default=''),
        sa.Column('time', sa.String(), nullable=False, server_default='08:30'),
        sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('timezone', sa.String(), nullable=False, server_default='America/Los_Angeles'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('reminder_settings')
    op.drop_index(op.f('ix_goal_logs_date'), table_name='goal_logs')
    op.drop_table('goal_logs')
    op.drop_table('goals')
