"""Exhibit schema: Theme, Item, Quiz, Recipient.

Revision ID: 001_exhibit
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_exhibit"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Theme",
        sa.Column("THEME_ID", sa.String(50), primary_key=True),
        sa.Column("THEME_NAME", sa.String(200), nullable=False),
        sa.Column("THEME_DESC", sa.Text, nullable=True),
    )

    op.create_table(
        "Item",
        sa.Column("THEME_ID", sa.String(50), sa.ForeignKey("Theme.THEME_ID"), primary_key=True),
        sa.Column("ITEM_SEQ", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("ITEM_NAME", sa.String(200), nullable=False),
        sa.Column("ITEM_DESC", sa.Text, nullable=True),
        sa.Column("SCRIPT_CHILD", sa.Text, nullable=True),
        sa.Column("SCRIPT_GENERAL", sa.Text, nullable=True),
        sa.Column("LATITUDE", sa.Float, nullable=True),
        sa.Column("LONGITUDE", sa.Float, nullable=True),
    )

    op.create_table(
        "Quiz",
        sa.Column("THEME_ID", sa.String(50), sa.ForeignKey("Theme.THEME_ID"), primary_key=True),
        sa.Column("QUIZ_NO", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("QUESTION", sa.Text, nullable=False),
        sa.Column("ANSWER", sa.Text, nullable=False),
        sa.Column("OPTIONS", sa.Text, nullable=True),
        sa.Column("QUIZ_DESC", sa.Text, nullable=True),
    )

    op.create_table(
        "Recipient",
        sa.Column("THEME_ID", sa.String(50), nullable=False),
        sa.Column("EMAIL", sa.String(320), nullable=False),
        sa.Column("RECV_DATE", sa.Date, nullable=False),
        sa.Column("RECV_TIME", sa.Time, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("Recipient")
    op.drop_table("Quiz")
    op.drop_table("Item")
    op.drop_table("Theme")
