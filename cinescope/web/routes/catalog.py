"""
Routes du catalogue: populaires, recherche et fiches detaillees.
"""

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Query

from ...adapters.api.tmdb_gateway import TMDBCatalogGateway
from ...core.entities.media import MediaKind
from ...services.bookmarks import BookmarkService
from ...services.cards import build_cards, build_detail
from ..deps import bookmarked_keys, get_bookmarks, get_gateway, get_image_base_url

router = APIRouter()


async def _popular(
    kind: MediaKind,
    page: int,
    gateway: TMDBCatalogGateway,
    bookmarks: BookmarkService,
    image_base_url: str,
) -> dict:
    titles = await gateway.fetch_popular(kind, page)
    cards = build_cards(titles, await asyncio.to_thread(bookmarked_keys, bookmarks), image_base_url)
    return {"page": page, "results": [c.to_dict() for c in cards]}


async def _detail(
    kind: MediaKind,
    title_id: int,
    gateway: TMDBCatalogGateway,
    bookmarks: BookmarkService,
    image_base_url: str,
) -> dict:
    title = await gateway.get_details(kind, title_id)
    if title is None:
        label = "Movie" if kind is MediaKind.MOVIE else "TV series"
        raise HTTPException(status_code=404, detail=f"{label} not found")

    similar = await gateway.fetch_similar(kind, title_id)
    keys = await asyncio.to_thread(bookmarked_keys, bookmarks)
    detail = build_detail(
        title,
        similar,
        bookmarked=(title.id, kind) in keys,
        image_base_url=image_base_url,
        bookmarked_keys=keys,
    )
    return detail.to_dict()


@router.get("/movies")
async def popular_movies(
    page: int = Query(default=1, ge=1),
    gateway: TMDBCatalogGateway = Depends(get_gateway),
    bookmarks: BookmarkService = Depends(get_bookmarks),
    image_base_url: str = Depends(get_image_base_url),
):
    """Films populaires, page par page."""
    return await _popular(MediaKind.MOVIE, page, gateway, bookmarks, image_base_url)


@router.get("/tv")
async def popular_series(
    page: int = Query(default=1, ge=1),
    gateway: TMDBCatalogGateway = Depends(get_gateway),
    bookmarks: BookmarkService = Depends(get_bookmarks),
    image_base_url: str = Depends(get_image_base_url),
):
    """Series populaires, page par page."""
    return await _popular(MediaKind.TV, page, gateway, bookmarks, image_base_url)


@router.get("/search")
async def search(
    q: str = "",
    gateway: TMDBCatalogGateway = Depends(get_gateway),
    bookmarks: BookmarkService = Depends(get_bookmarks),
    image_base_url: str = Depends(get_image_base_url),
):
    """Recherche films et series. Une requete vide ne retourne rien."""
    query = q.strip()
    if not query:
        return {"query": "", "results": []}
    titles = await gateway.search(query)
    cards = build_cards(titles, await asyncio.to_thread(bookmarked_keys, bookmarks), image_base_url)
    return {"query": query, "results": [c.to_dict() for c in cards]}


@router.get("/movies/{movie_id}")
async def movie_detail(
    movie_id: int,
    gateway: TMDBCatalogGateway = Depends(get_gateway),
    bookmarks: BookmarkService = Depends(get_bookmarks),
    image_base_url: str = Depends(get_image_base_url),
):
    """Fiche d'un film avec les films similaires."""
    return await _detail(MediaKind.MOVIE, movie_id, gateway, bookmarks, image_base_url)


@router.get("/tv/{series_id}")
async def series_detail(
    series_id: int,
    gateway: TMDBCatalogGateway = Depends(get_gateway),
    bookmarks: BookmarkService = Depends(get_bookmarks),
    image_base_url: str = Depends(get_image_base_url),
):
    """Fiche d'une serie avec les series similaires."""
    return await _detail(MediaKind.TV, series_id, gateway, bookmarks, image_base_url)
