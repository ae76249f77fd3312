"""Add RPE, RIR, rest time, tempo, grip and stance to exercise_sets

Revision ID: 004
Revises: 003
Create Date: 2026-03-14

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("exercise_sets") as batch_op:
        batch_op.add_column(sa.Column("rpe", sa.Integer(), nullable=True))
        batch_op.add_column(sa.Column("rir", sa.Integer(), nullable=True))
        batch_op.add_column(sa.Column("rest_time", sa.Integer(), nullable=True))
        batch_op.add_column(sa.Column("tempo", sa.String(length=20), nullable=True))
        batch_op.add_column(sa.Column("grip_type_raw", sa.String(length=20), nullable=True))
        batch_op.add_column(sa.Column("stance_type_raw", sa.String(length=20), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("exercise_sets") as batch_op:
        batch_op.drop_column("stance_type_raw")
        batch_op.drop_column("grip_type_raw")
        batch_op.drop_column("tempo")
        batch_op.drop_column("rest_time")
        batch_op.drop_column("rir")
        batch_op.drop_column("rpe")
