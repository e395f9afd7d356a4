"""
Entites du domaine.

- media : Movie, Series (union Title), Bookmark, MediaKind
- user : User
"""

from cinescope.core.entities.media import (
    Bookmark,
    MediaKind,
    Movie,
    Series,
    Title,
    parse_title,
)
from cinescope.core.entities.user import User

__all__ = [
    "Bookmark",
    "MediaKind",
    "Movie",
    "Series",
    "Title",
    "parse_title",
    "User",
]
