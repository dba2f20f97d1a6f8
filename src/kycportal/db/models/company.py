from __future__ import annotations

from advanced_alchemy.base import UUIDAuditBase
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column


class Company(UUIDAuditBase):
    __tablename__ = "company"
    name: Mapped[str] = mapped_column(String(length=255), index=True, nullable=False)
    registration_number: Mapped[str | None] = mapped_column(String(length=100), nullable=True, default=None)
    contact_email: Mapped[str | None] = mapped_column(String(length=255), nullable=True, default=None)
    contact_phone: Mapped[str | None] = mapped_column(String(length=50), nullable=True, default=None)
