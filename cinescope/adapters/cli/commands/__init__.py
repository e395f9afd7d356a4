"""
Commandes CLI de CineScope.
"""

from cinescope.adapters.cli.commands.bookmark_commands import bookmarks_app
from cinescope.adapters.cli.commands.catalog_commands import (
    details,
    popular,
    poster,
    search,
    trending,
)

__all__ = [
    "bookmarks_app",
    "details",
    "popular",
    "poster",
    "search",
    "trending",
]
