"""
Media metadata entities.

Entities representing movies and TV series as returned by the TMDB catalog,
plus the bookmark snapshot persisted locally.

A Title is the tagged union Movie | Series, discriminated by media_type.
Both variants share the fields used to render a card (title, release_date,
vote_average, overview, poster_path) so callers never need to look at
TMDB's "title" vs "name" or "release_date" vs "first_air_date" keys.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Optional, Union


class MediaKind(str, Enum):
    """Type de media du catalogue.

    Valeurs:
        MOVIE: Film
        TV: Serie TV
    """

    MOVIE = "movie"
    TV = "tv"


@dataclass(frozen=True)
class _TitleBase(ABC):
    id: int
    title: str
    release_date: str = ""
    vote_average: Optional[float] = None
    overview: str = ""
    poster_path: Optional[str] = None
    genres: tuple[str, ...] = ()

    @property
    @abstractmethod
    def media_type(self) -> MediaKind:
        ...

    @property
    def year(self) -> str:
        """Annee extraite de la date (chaine vide si inconnue)."""
        return self.release_date.split("-")[0] if self.release_date else ""

    def with_poster(self, poster_path: Optional[str]) -> "Title":
        """Copie du titre avec une autre reference d'affiche."""
        return replace(self, poster_path=poster_path)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["genres"] = list(self.genres)
        data["media_type"] = self.media_type.value
        return data


@dataclass(frozen=True)
class Movie(_TitleBase):
    """
    Movie snapshot from TMDB.

    Attributes:
        id: TMDB movie id (unique among movies only)
        title: Display title
        release_date: ISO release date, possibly empty
        vote_average: Rating between 0.0 and 10.0, None if unrated
        overview: Plot summary
        poster_path: Absolute URL, inline image or TMDB relative path
        genres: Genre names (details only)
        runtime: Runtime in minutes (details only)
        budget: Budget in USD (details only)
        revenue: Revenue in USD (details only)
        tagline: Tagline (details only)
    """

    runtime: Optional[int] = None
    budget: Optional[int] = None
    revenue: Optional[int] = None
    tagline: str = ""

    @property
    def media_type(self) -> MediaKind:
        return MediaKind.MOVIE


@dataclass(frozen=True)
class Series(_TitleBase):
    """
    TV series snapshot from TMDB.

    Attributes:
        id: TMDB series id (unique among series only)
        title: Display name
        release_date: ISO first air date, possibly empty
        number_of_seasons: Season count (details only)
        number_of_episodes: Episode count (details only)
        networks: Network names (details only)
        status: Production status, e.g. "Ended" (details only)
    """

    number_of_seasons: Optional[int] = None
    number_of_episodes: Optional[int] = None
    networks: tuple[str, ...] = ()
    status: str = ""

    @property
    def media_type(self) -> MediaKind:
        return MediaKind.TV

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["networks"] = list(self.networks)
        return data


Title = Union[Movie, Series]


def _as_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _names(items: Any) -> tuple[str, ...]:
    """Extrait les noms d'une liste TMDB [{"id": .., "name": ..}, ...]."""
    if not items:
        return ()
    return tuple(item["name"] for item in items if isinstance(item, dict) and item.get("name"))


def parse_title(payload: dict[str, Any], default_kind: MediaKind) -> Title:
    """
    Construit un Movie ou une Series depuis un objet JSON TMDB.

    Le champ media_type du payload est prioritaire (endpoints trending et
    search/multi); sinon le type de l'endpoint appelant est utilise.

    Args:
        payload: Objet JSON TMDB (liste de resultats ou details)
        default_kind: Type a utiliser si le payload n'a pas de media_type

    Returns:
        Movie ou Series

    Raises:
        KeyError: Si le payload n'a pas d'id
    """
    kind = MediaKind(payload.get("media_type") or default_kind)
    common = {
        "id": int(payload["id"]),
        "vote_average": _as_float(payload.get("vote_average")),
        "overview": payload.get("overview") or "",
        "poster_path": payload.get("poster_path") or None,
        "genres": _names(payload.get("genres")),
    }

    if kind is MediaKind.MOVIE:
        return Movie(
            title=payload.get("title") or payload.get("original_title") or "",
            release_date=payload.get("release_date") or "",
            runtime=payload.get("runtime"),
            budget=payload.get("budget"),
            revenue=payload.get("revenue"),
            tagline=payload.get("tagline") or "",
            **common,
        )

    return Series(
        title=payload.get("name") or payload.get("original_name") or "",
        release_date=payload.get("first_air_date") or "",
        number_of_seasons=payload.get("number_of_seasons"),
        number_of_episodes=payload.get("number_of_episodes"),
        networks=_names(payload.get("networks")),
        status=payload.get("status") or "",
        **common,
    )


@dataclass(frozen=True)
class Bookmark:
    """
    Titre sauvegarde localement par l'utilisateur.

    Sous-ensemble des champs d'un Title, unique par (id, media_type).
    """

    id: int
    title: str
    media_type: MediaKind
    poster_path: Optional[str] = None
    release_date: str = ""
    overview: str = ""
    vote_average: Optional[float] = None

    @property
    def key(self) -> tuple[int, MediaKind]:
        return (self.id, self.media_type)

    @property
    def year(self) -> str:
        return self.release_date.split("-")[0] if self.release_date else ""

    @classmethod
    def from_title(cls, title: Title) -> "Bookmark":
        return cls(
            id=title.id,
            title=title.title,
            media_type=title.media_type,
            poster_path=title.poster_path,
            release_date=title.release_date,
            overview=title.overview,
            vote_average=title.vote_average,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bookmark":
        """
        Reconstruit un favori depuis sa forme JSON.

        Raises:
            KeyError, ValueError, TypeError: Si l'enregistrement est invalide
        """
        return cls(
            id=int(data["id"]),
            title=data.get("title") or data.get("name") or "",
            media_type=MediaKind(data["media_type"]),
            poster_path=data.get("poster_path"),
            release_date=data.get("release_date") or data.get("first_air_date") or "",
            overview=data.get("overview") or "",
            vote_average=_as_float(data.get("vote_average")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "poster_path": self.poster_path,
            "media_type": self.media_type.value,
            "release_date": self.release_date,
            "overview": self.overview,
            "vote_average": self.vote_average,
        }
