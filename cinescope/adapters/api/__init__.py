"""
Client du catalogue externe.

Ce module fournit l'adaptateur TMDB (The Movie Database) et son catalogue
local de repli:
- TMDBCatalogGateway: trending, populaires, recherche, details, similaires
- GatewayState: disponibilite de l'API (desactivee apres un 401)
- FallbackCatalog / DEFAULT_FALLBACK: titres affiches sans API

Le gateway implemente ICatalogGateway defini dans core/ports/catalog.py.
"""

from cinescope.adapters.api.fallback import DEFAULT_FALLBACK, FallbackCatalog
from cinescope.adapters.api.tmdb_gateway import GatewayState, TMDBCatalogGateway

__all__ = [
    "DEFAULT_FALLBACK",
    "FallbackCatalog",
    "GatewayState",
    "TMDBCatalogGateway",
]
