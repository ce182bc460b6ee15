"""
Account SQLAlchemy model.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.constants import MAX_EXTERNAL_ID_LENGTH, MAX_NAME_LENGTH
from core.db import Base


class AccountModel(Base):
    """
    Stored account row.

    Attributes:
        email: Contact email (unique)
        firebase_id: External identity reference, empty when unset
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), unique=True, index=True)
    firebase_id: Mapped[str] = mapped_column(String(MAX_EXTERNAL_ID_LENGTH), default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
