"""
Media catalog: SQLAlchemy ORM model for user accounts.

Users are created on registration and read on login; the application never
updates or deletes them. Emails are stored lower-cased.
"""
from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from mediacatalog.shared.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(sa.Integer(), primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        sa.String(255), unique=True, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(sa.String(150), nullable=False)
    password_hash: Mapped[str] = mapped_column(sa.String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        sa.CheckConstraint("email = lower(email)", name="ck_users_email_lowercase"),
    )

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"
