"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

- ICatalogGateway : Acces au catalogue TMDB avec repli local
- IKeyValueStorage : Stockage cle-valeur (favoris)
- IUserRepository : Stockage des comptes utilisateurs
"""

from cinescope.core.ports.catalog import ICatalogGateway
from cinescope.core.ports.repositories import IUserRepository
from cinescope.core.ports.storage import IKeyValueStorage

__all__ = [
    "ICatalogGateway",
    "IKeyValueStorage",
    "IUserRepository",
]
