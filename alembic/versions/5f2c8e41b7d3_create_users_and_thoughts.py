"""create users and thoughts tables

Revision ID: 5f2c8e41b7d3
Revises:
Create Date: 2026-10-19 09:12:44.118203

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5f2c8e41b7d3"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("access_token", sa.String(length=512), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_access_token"), "users", ["access_token"], unique=True)

    op.create_table(
        "thoughts",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("hearts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("author_id", sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_thoughts_hearts"), "thoughts", ["hearts"], unique=False)
    op.create_index(op.f("ix_thoughts_created_at"), "thoughts", ["created_at"], unique=False)
    op.create_index(op.f("ix_thoughts_author_id"), "thoughts", ["author_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_thoughts_author_id"), table_name="thoughts")
    op.drop_index(op.f("ix_thoughts_created_at"), table_name="thoughts")
    op.drop_index(op.f("ix_thoughts_hearts"), table_name="thoughts")
    op.drop_table("thoughts")
    op.drop_index(op.f("ix_users_access_token"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
