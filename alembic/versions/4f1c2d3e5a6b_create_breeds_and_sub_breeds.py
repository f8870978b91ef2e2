"""create breeds and sub_breeds tables

Revision ID: 4f1c2d3e5a6b
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2d3e5a6b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'breeds',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_breeds'),
        sa.UniqueConstraint('name', name='uq_breeds_name'),
    )
    op.create_index('ix_breeds_created_at', 'breeds', ['created_at'], unique=False)

    op.create_table(
        'sub_breeds',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('breed_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ['breed_id'],
            ['breeds.id'],
            name='fk_sub_breeds_breed_id_breeds',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_sub_breeds'),
    )
    op.create_index('ix_sub_breeds_breed_id', 'sub_breeds', ['breed_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_sub_breeds_breed_id', table_name='sub_breeds')
    op.drop_table('sub_breeds')
    op.drop_index('ix_breeds_created_at', table_name='breeds')
    op.drop_table('breeds')
