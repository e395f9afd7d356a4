"""
Route de la page d'accueil.

Affiche les films et series tendance de la semaine.
"""

import asyncio

from fastapi import APIRouter, Depends

from ...adapters.api.tmdb_gateway import TMDBCatalogGateway
from ...core.entities.media import MediaKind
from ...services.bookmarks import BookmarkService
from ...services.cards import build_cards
from ..deps import bookmarked_keys, get_bookmarks, get_gateway, get_image_base_url

router = APIRouter()


@router.get("/")
async def home(
    gateway: TMDBCatalogGateway = Depends(get_gateway),
    bookmarks: BookmarkService = Depends(get_bookmarks),
    image_base_url: str = Depends(get_image_base_url),
):
    """Page d'accueil : tendances films et series."""
    movies, series = await asyncio.gather(
        gateway.fetch_trending(MediaKind.MOVIE),
        gateway.fetch_trending(MediaKind.TV),
    )
    keys = await asyncio.to_thread(bookmarked_keys, bookmarks)
    return {
        "trending_movies": [c.to_dict() for c in build_cards(movies, keys, image_base_url)],
        "trending_tv": [c.to_dict() for c in build_cards(series, keys, image_base_url)],
    }
