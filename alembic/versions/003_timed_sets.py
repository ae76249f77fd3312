"""Timed exercises: per-set duration and set type.

The 'timed' category needs no DDL since category_raw is a plain string.

Revision ID: 003
Revises: 002
Create Date: 2026-02-20

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("exercise_sets") as batch_op:
        batch_op.add_column(sa.Column("duration", sa.Integer(), nullable=True))
        batch_op.add_column(
            sa.Column("set_type", sa.String(length=9), nullable=False, server_default="normal")
        )


def downgrade() -> None:
    with op.batch_alter_table("exercise_sets") as batch_op:
        batch_op.drop_column("set_type")
        batch_op.drop_column("duration")
