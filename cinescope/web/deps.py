"""
Dépendances partagées de l'application web catalogue.

Les routes recuperent les services depuis le Container DI attache a
l'application (app.state.container).
"""

from fastapi import Depends, Request

from ..adapters.api.tmdb_gateway import TMDBCatalogGateway
from ..config import Settings
from ..container import Container
from ..core.entities.media import MediaKind
from ..services.bookmarks import BookmarkService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_settings(container: Container = Depends(get_container)) -> Settings:
    return container.config()


def get_gateway(container: Container = Depends(get_container)) -> TMDBCatalogGateway:
    return container.catalog_gateway()


def get_bookmarks(container: Container = Depends(get_container)) -> BookmarkService:
    return container.bookmark_service()


def get_image_base_url(settings: Settings = Depends(get_settings)) -> str:
    return settings.tmdb_image_base_url


def bookmarked_keys(service: BookmarkService) -> frozenset[tuple[int, MediaKind]]:
    """Cles (id, media_type) de tous les favoris, lues en une fois."""
    return frozenset(b.key for b in service.list_bookmarks())
