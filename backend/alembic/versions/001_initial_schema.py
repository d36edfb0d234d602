"""Initial schema: accounts and messages.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("account_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.UniqueConstraint("username", name="uq_accounts_username"),
    )

    op.create_table(
        "messages",
        sa.Column("message_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "posted_by", sa.Integer,
            sa.ForeignKey("accounts.account_id", name="fk_messages_posted_by"),
            nullable=False,
        ),
        sa.Column("message_text", sa.String(255), nullable=False),
        sa.Column("time_posted_epoch", sa.BigInteger, nullable=True),
    )
    op.create_index("ix_messages_posted_by", "messages", ["posted_by"])


def downgrade() -> None:
    op.drop_index("ix_messages_posted_by", table_name="messages")
    op.drop_table("messages")
    op.drop_table("accounts")
