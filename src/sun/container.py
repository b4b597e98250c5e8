"""
Explicit construction of the object graph

Every collaborator is passed in through a constructor; the finished container
is attached to the application and handed to resolvers via the GraphQL context.
"""

from dataclasses import dataclass

from .config import Settings
from .database import Datasources
from .graphql.mappers import BlogPostMapper, GalleryItemMapper, SongMapper, StemMapper
from .graphql.services import BlogGraphQLService, GalleryGraphQLService, StemPlayerGraphQLService
from .repositories import GalleryItemRepository, post_repository, song_repository
from .services import ApolloService, BriareusService, CerberusService


@dataclass
class Container:
    datasources: Datasources
    stem_player: StemPlayerGraphQLService
    blog: BlogGraphQLService
    gallery: GalleryGraphQLService


def build_services(datasources: Datasources, stem_path_prefix: str = "") -> Container:
    """Wire the three verticals on top of already-built datasources."""
    stem_player = StemPlayerGraphQLService(
        datasources.apollo,
        ApolloService(song_repository()),
        SongMapper(StemMapper(stem_path_prefix)),
    )
    blog = BlogGraphQLService(
        datasources.briareus,
        BriareusService(post_repository()),
        BlogPostMapper(),
    )
    gallery = GalleryGraphQLService(
        datasources.cerberus,
        CerberusService(GalleryItemRepository()),
        GalleryItemMapper(),
    )
    return Container(
        datasources=datasources,
        stem_player=stem_player,
        blog=blog,
        gallery=gallery,
    )


def build_container(settings: Settings) -> Container:
    return build_services(
        Datasources.from_settings(settings),
        stem_path_prefix=settings.stem_path_prefix,
    )
