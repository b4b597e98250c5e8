"""
Blog models
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .base import IdentifiedMixin, JSONDocument, TimestampedMixin, new_metadata


class BriareusBase(DeclarativeBase):
    metadata = new_metadata()


class Posts(IdentifiedMixin, TimestampedMixin, BriareusBase):
    __tablename__ = "posts"

    title: Mapped[str | None] = mapped_column(String(255))
    content: Mapped[str | None] = mapped_column(Text)
    tags: Mapped[list[str] | None] = mapped_column(JSONDocument)
