"""
GraphQL-facing service for the gallery.
"""

from __future__ import annotations

from uuid import UUID

from ...database import Datasource
from ...errors import NotFoundError
from ...logging import get_logger
from ...services import CerberusService
from ..mappers import GalleryItemMapper
from ..types.gallery import GalleryItem, GalleryItemInput
from ..types.result import QueryResult, QuerySuccess, StandardError

logger = get_logger(__name__)


class GalleryGraphQLService:
    def __init__(
        self,
        datasource: Datasource,
        cerberus_service: CerberusService,
        gallery_item_mapper: GalleryItemMapper,
    ):
        self.datasource = datasource
        self.cerberus_service = cerberus_service
        self.gallery_item_mapper = gallery_item_mapper

    async def list(self) -> list[GalleryItem]:
        logger.info("Retrieving gallery items")
        async with self.datasource.transaction() as session:
            items = [
                self.gallery_item_mapper.map(item)
                for item in await self.cerberus_service.list(session)
            ]
        logger.info("Retrieved gallery items", count=len(items))
        return items

    async def locate(self, id: str) -> GalleryItem:
        logger.info("Retrieving gallery item by ID", item_id=id)
        item_id = UUID(id)
        async with self.datasource.transaction() as session:
            item = await self.cerberus_service.locate(session, item_id)
            if item is None:
                raise NotFoundError("Gallery item", id)
            mapped = self.gallery_item_mapper.map(item)
        logger.info("Retrieved gallery item", title=mapped.title, item_id=mapped.id)
        return mapped

    async def list_by_foreign_object(self, ids: list[str]) -> list[GalleryItem]:
        """Gallery items referencing any of ``ids``."""
        logger.info("Retrieving gallery items by foreign object ids", ids=ids)
        async with self.datasource.transaction() as session:
            items = [
                self.gallery_item_mapper.map(item)
                for item in await self.cerberus_service.list_by_foreign_objects(session, ids)
            ]
        logger.info("Retrieved gallery items matching foreign object ids", count=len(items))
        return items

    async def create(self, input: GalleryItemInput) -> QueryResult:
        logger.info("Creating gallery item", title=input.title)
        try:
            async with self.datasource.transaction() as session:
                item = self.gallery_item_mapper.map_input(input)
                saved = await self.cerberus_service.save(session, item)
                item_id = str(saved.id)
        except Exception as e:
            logger.error(
                "Failed to create gallery item", title=input.title, error=str(e), exc_info=True
            )
            return StandardError(message=f"Failed to create gallery item: {e}")

        logger.info("Successfully created gallery item", item_id=item_id)
        return QuerySuccess(message="Gallery item created successfully", id=item_id)
