"""create workouts table

Revision ID: 3e9a6c1d2b40
Revises: 
Create Date: 2026-10-05 19:12:40.118274

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3e9a6c1d2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    if 'workouts' in inspector.get_table_names():
        return
    op.create_table(
        'workouts',
        sa.Column('id', sa.String(length=36), primary_key=True, nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('exercises', sa.JSON(), nullable=False),
        sa.Column('overall_effort', sa.Integer(), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_workouts_date', 'workouts', ['date'])


def downgrade() -> None:
    op.execute('DROP INDEX IF EXISTS ix_workouts_date')
    op.execute('DROP TABLE IF EXISTS workouts')
