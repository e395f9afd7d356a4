"""
Modeles de vue des cartes et fiches detaillees.

Compose un titre (ou un favori), l'etat de favori et l'affiche a afficher
en objets prets a serialiser pour le web ou la CLI.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from cinescope.core.entities.media import Bookmark, Title
from cinescope.services.placeholder import NO_IMAGE, render_placeholder

INLINE_SVG_PREFIX = "data:image/svg+xml"


def poster_source(item: Title | Bookmark, image_base_url: str) -> str:
    """
    Source d'image d'une carte.

    - URL absolue : utilisee telle quelle
    - SVG en ligne : regenere a partir du titre et de l'annee
    - Chemin TMDB relatif : prefixe par l'URL des images
    - Pas d'affiche : image neutre "No Image"
    """
    poster = item.poster_path
    if not poster:
        return NO_IMAGE
    if poster.startswith(("http://", "https://")):
        return poster
    if poster.startswith(INLINE_SVG_PREFIX):
        return render_placeholder(item.title, item.year)
    return f"{image_base_url}{poster}"


@dataclass(frozen=True)
class CardView:
    id: int
    media_type: str
    title: str
    year: str
    rating: Optional[str]
    overview: str
    image: str
    bookmarked: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DetailView:
    """Fiche detaillee : le titre complet, son affiche et les titres similaires."""

    title: dict[str, Any]
    image: str
    bookmarked: bool
    similar: list[CardView] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "image": self.image,
            "bookmarked": self.bookmarked,
            "similar": [card.to_dict() for card in self.similar],
        }


def format_rating(vote_average: Optional[float]) -> Optional[str]:
    """Note sur une decimale ("8.8"), None si absente ou nulle."""
    if not vote_average:
        return None
    return f"{vote_average:.1f}"


def build_card(item: Title | Bookmark, bookmarked: bool, image_base_url: str) -> CardView:
    return CardView(
        id=item.id,
        media_type=item.media_type.value,
        title=item.title,
        year=item.year,
        rating=format_rating(item.vote_average),
        overview=item.overview,
        image=poster_source(item, image_base_url),
        bookmarked=bookmarked,
    )


def build_detail(
    title: Title,
    similar: list[Title],
    bookmarked: bool,
    image_base_url: str,
    bookmarked_keys: frozenset[tuple[int, Any]] = frozenset(),
) -> DetailView:
    """
    Compose la fiche d'un titre.

    Args:
        title: Titre detaille
        similar: Titres similaires
        bookmarked: Etat de favori du titre
        image_base_url: URL de base des images TMDB
        bookmarked_keys: Cles (id, media_type) des favoris, pour les cartes similaires
    """
    return DetailView(
        title=title.to_dict(),
        image=poster_source(title, image_base_url),
        bookmarked=bookmarked,
        similar=build_cards(similar, bookmarked_keys, image_base_url),
    )


def build_cards(
    items: list[Title] | list[Bookmark],
    bookmarked_keys: frozenset[tuple[int, Any]],
    image_base_url: str,
) -> list[CardView]:
    """Cartes d'une liste de titres, l'etat de favori etant lu dans bookmarked_keys."""
    return [
        build_card(item, (item.id, item.media_type) in bookmarked_keys, image_base_url)
        for item in items
    ]
