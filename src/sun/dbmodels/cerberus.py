"""
Gallery models

Foreign-object references live in their own indexed table so that the reverse
lookup ("items referencing any of these external ids") is an index probe. The
ordered list on ``GalleryItems.foreign_object`` reads those rows through an
association proxy; ``foreign_object_set`` tells an item created without a list
(``None``) apart from one created with an empty list.
"""

from uuid import UUID

from sqlalchemy import ForeignKeyConstraint, Index, String, Text, Uuid
from sqlalchemy.ext.associationproxy import AssociationProxy, association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from .base import IdentifiedMixin, TimestampedMixin, new_metadata


class CerberusBase(DeclarativeBase):
    metadata = new_metadata()


class GalleryItemForeignObjects(CerberusBase):
    __tablename__ = "gallery_item_foreign_objects"
    __table_args__ = (
        ForeignKeyConstraint(
            ["gallery_item_id"],
            ["gallery_items.id"],
            ondelete="CASCADE",
            name="gallery_item_foreign_objects_gallery_item_id_fkey",
        ),
        Index("idx_gallery_item_foreign_objects_foreign_id", "foreign_id"),
    )

    gallery_item_id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    position: Mapped[int] = mapped_column(primary_key=True)
    foreign_id: Mapped[str] = mapped_column(String(255), nullable=False)

    gallery_item: Mapped["GalleryItems"] = relationship(
        "GalleryItems", back_populates="foreign_object_refs"
    )

    def __init__(self, foreign_id: str):
        self.foreign_id = foreign_id


class GalleryItems(IdentifiedMixin, TimestampedMixin, CerberusBase):
    __tablename__ = "gallery_items"

    title: Mapped[str | None] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text)
    image_path: Mapped[str | None] = mapped_column(String(512))

    # Always loaded with the item; the proxy below reads it outside lazy IO
    foreign_object_refs: Mapped[list["GalleryItemForeignObjects"]] = relationship(
        "GalleryItemForeignObjects",
        back_populates="gallery_item",
        cascade="all, delete-orphan",
        order_by="GalleryItemForeignObjects.position",
        collection_class=ordering_list("position"),
        lazy="selectin",
    )

    foreign_object_set: Mapped[bool] = mapped_column(default=False)

    foreign_object_ids: AssociationProxy[list[str]] = association_proxy(
        "foreign_object_refs", "foreign_id"
    )

    @property
    def foreign_object(self) -> list[str] | None:
        """Referenced external ids in order, ``None`` when never supplied."""
        if not self.foreign_object_set:
            return None
        return list(self.foreign_object_ids)

    @foreign_object.setter
    def foreign_object(self, ids: list[str] | None) -> None:
        self.foreign_object_ids = [] if ids is None else list(ids)
        self.foreign_object_set = ids is not None
