"""Add equipment, primary muscles and notes to exercises.

All nullable: existing rows read as equipment 'Other' with no muscles.

Revision ID: 002
Revises: 001
Create Date: 2026-02-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("exercises") as batch_op:
        batch_op.add_column(sa.Column("equipment_raw", sa.String(length=30), nullable=True))
        batch_op.add_column(sa.Column("primary_muscles_raw", sa.String(length=255), nullable=True))
        batch_op.add_column(sa.Column("notes", sa.Text(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("exercises") as batch_op:
        batch_op.drop_column("notes")
        batch_op.drop_column("primary_muscles_raw")
        batch_op.drop_column("equipment_raw")
