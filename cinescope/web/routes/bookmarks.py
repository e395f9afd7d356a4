"""
Routes des favoris: liste groupee, ajout, suppression, bascule.
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...adapters.api.tmdb_gateway import TMDBCatalogGateway
from ...core.entities.media import Bookmark, MediaKind
from ...services.bookmarks import BookmarkService
from ...services.cards import build_cards
from ..deps import get_bookmarks, get_gateway, get_image_base_url

router = APIRouter(prefix="/bookmarks")


class BookmarkIn(BaseModel):
    """Favori envoye par le client."""

    id: int
    title: str
    media_type: MediaKind
    poster_path: Optional[str] = None
    release_date: str = ""
    overview: str = ""
    vote_average: Optional[float] = Field(default=None, ge=0, le=10)

    def to_entity(self) -> Bookmark:
        return Bookmark(**self.model_dump())


def _grouped(service: BookmarkService, image_base_url: str) -> dict:
    grouped = service.by_kind()
    keys = frozenset(b.key for items in grouped.values() for b in items)
    return {
        kind.value: [c.to_dict() for c in build_cards(items, keys, image_base_url)]
        for kind, items in grouped.items()
    }


@router.get("")
def list_bookmarks(
    service: BookmarkService = Depends(get_bookmarks),
    image_base_url: str = Depends(get_image_base_url),
):
    """Favoris groupes par type : {"movie": [...], "tv": [...]}."""
    return _grouped(service, image_base_url)


@router.post("")
def add_bookmark(
    payload: BookmarkIn,
    service: BookmarkService = Depends(get_bookmarks),
    image_base_url: str = Depends(get_image_base_url),
):
    """Ajoute un favori (sans effet s'il existe deja)."""
    service.add(payload.to_entity())
    return _grouped(service, image_base_url)


@router.delete("/{kind}/{title_id}")
def remove_bookmark(
    kind: MediaKind,
    title_id: int,
    service: BookmarkService = Depends(get_bookmarks),
    image_base_url: str = Depends(get_image_base_url),
):
    """Retire un favori (sans effet s'il est absent)."""
    service.remove(title_id, kind)
    return _grouped(service, image_base_url)


@router.post("/{kind}/{title_id}/toggle")
async def toggle_bookmark(
    kind: MediaKind,
    title_id: int,
    service: BookmarkService = Depends(get_bookmarks),
    gateway: TMDBCatalogGateway = Depends(get_gateway),
):
    """
    Bascule l'etat de favori d'un titre du catalogue.

    Le titre est recupere via le gateway pour enregistrer un instantane complet.
    """
    # Le stockage est bloquant : hors de la boucle d'evenements
    if await asyncio.to_thread(service.contains, title_id, kind):
        await asyncio.to_thread(service.remove, title_id, kind)
        return {"id": title_id, "media_type": kind.value, "bookmarked": False}

    title = await gateway.get_details(kind, title_id)
    if title is None:
        raise HTTPException(status_code=404, detail="Title not found")
    bookmarked = await asyncio.to_thread(service.toggle, title)
    return {"id": title_id, "media_type": kind.value, "bookmarked": bookmarked}
