"""Catalog schema: users, media_entries

Revision ID: 001
Revises:
Create Date: 2026-10-19

Tables created:
  - users          Accounts: unique lower-cased email, display name, password hash
  - media_entries  Owner-scoped movies / shows with optional poster path

The media type is stored as a VARCHAR with a CHECK constraint rather than a
native ENUM so the same migration runs on PostgreSQL and SQLite.
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("email = lower(email)", name="ck_users_email_lowercase"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "media_entries",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column(
            "type",
            sa.Enum(
                "Movie",
                "TV Show",
                name="mediatype",
                native_enum=False,
                create_constraint=True,
                length=20,
            ),
            nullable=False,
        ),
        sa.Column("director", sa.String(255), nullable=True),
        sa.Column("budget", sa.String(255), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("duration", sa.String(255), nullable=True),
        sa.Column("year", sa.String(255), nullable=True),
        sa.Column("image", sa.String(500), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=True,
        ),
    )
    op.create_index("ix_media_entries_user_id", "media_entries", ["user_id"])
    op.create_index(
        "ix_media_entries_user_created", "media_entries", ["user_id", "created_at"]
    )


def downgrade() -> None:
    op.drop_index("ix_media_entries_user_created", table_name="media_entries")
    op.drop_index("ix_media_entries_user_id", table_name="media_entries")
    op.drop_table("media_entries")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
