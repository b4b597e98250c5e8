"""
Stem player models (songs and their stems)
"""

from uuid import UUID

from sqlalchemy import ForeignKeyConstraint, Index, String, Uuid
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from .base import IdentifiedMixin, new_metadata


class ApolloBase(DeclarativeBase):
    metadata = new_metadata()


class Songs(IdentifiedMixin, ApolloBase):
    __tablename__ = "songs"

    name: Mapped[str | None] = mapped_column(String(255))
    file_path: Mapped[str | None] = mapped_column(String(512))

    stems: Mapped[list["Stems"]] = relationship(
        "Stems",
        back_populates="song",
        cascade="all, delete-orphan",
        order_by="Stems.position",
        collection_class=ordering_list("position"),
    )


class Stems(IdentifiedMixin, ApolloBase):
    __tablename__ = "stems"
    __table_args__ = (
        ForeignKeyConstraint(
            ["song_id"], ["songs.id"], ondelete="CASCADE", name="stems_song_id_fkey"
        ),
        Index("idx_stems_song", "song_id"),
    )

    song_id: Mapped[UUID | None] = mapped_column(Uuid)
    name: Mapped[str | None] = mapped_column(String(255))
    file_path: Mapped[str | None] = mapped_column(String(512))
    position: Mapped[int] = mapped_column(default=0)

    song: Mapped["Songs"] = relationship("Songs", back_populates="stems")
