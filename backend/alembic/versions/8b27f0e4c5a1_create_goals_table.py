"""create goals table

Revision ID: 8b27f0e4c5a1
Revises: 3e9a6c1d2b40
Create Date: 2026-10-05 19:30:02.540117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b27f0e4c5a1'
down_revision: Union[str, Sequence[str], None] = '3e9a6c1d2b40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    if 'goals' in inspector.get_table_names():
        return
    op.create_table(
        'goals',
        sa.Column('id', sa.String(length=36), primary_key=True, nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('metric_kind', sa.String(length=32), nullable=False, server_default='custom'),
        sa.Column('target_value', sa.Float(), nullable=False),
        sa.Column('current_value', sa.Float(), nullable=False, server_default='0'),
        sa.Column('unit', sa.String(length=32), nullable=True),
        sa.Column('deadline', sa.Date(), nullable=True),
        sa.Column('is_achieved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_goals_created_at', 'goals', ['created_at'])


def downgrade() -> None:
    op.execute('DROP INDEX IF EXISTS ix_goals_created_at')
    op.execute('DROP TABLE IF EXISTS goals')
