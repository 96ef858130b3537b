"""create user table with LINE user id

Revision ID: 5c2a7d91e0b4
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2a7d91e0b4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user',
        sa.Column('id', sa.String(length=128), nullable=False),
        sa.Column('display_name', sa.String(length=64), nullable=True),
        sa.Column('line_user_id', sa.String(length=64), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade():
    op.drop_table('user')
