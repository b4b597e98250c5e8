"""
Mapper between gallery item models and GraphQL types
"""

from ...dbmodels import GalleryItems
from ...logging import get_logger
from ..types.gallery import GalleryItem, GalleryItemInput

logger = get_logger(__name__)


class GalleryItemMapper:
    def map(self, item: GalleryItems) -> GalleryItem:
        logger.debug("Mapping gallery item", title=item.title)
        foreign_object = item.foreign_object
        return GalleryItem(
            id=str(item.id),
            title=item.title,
            description=item.description,
            content=item.content,
            image_path=item.image_path,
            foreign_object=None if foreign_object is None else list(foreign_object),
            created_at=item.created_at,
            updated_at=item.updated_at,
        )

    def map_input(self, input: GalleryItemInput) -> GalleryItems:
        """Build an unsaved gallery item from the mutation input."""
        logger.debug("Mapping input for gallery item", title=input.title)
        item = GalleryItems()
        item.title = input.title
        item.description = input.description
        item.content = input.content
        item.image_path = input.image_path
        item.foreign_object = input.foreign_object
        return item
