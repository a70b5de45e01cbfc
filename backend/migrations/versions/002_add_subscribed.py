"""Ajout de la colonne subscribed

Revision ID: 002_add_subscribed
Revises: 001_create_students
Create Date: 2024-09-20

Les lignes existantes reçoivent la valeur par défaut false.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = '002_add_subscribed'
down_revision: Union[str, None] = '001_create_students'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        'students',
        sa.Column('subscribed', sa.Boolean(), nullable=False, server_default=sa.false()),
    )


def downgrade() -> None:
    with op.batch_alter_table('students') as batch_op:
        batch_op.drop_column('subscribed')
