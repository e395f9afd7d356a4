"""
Interface port pour le catalogue de films et series.

Contrat de l'acces au catalogue externe (TMDB). Les implementations doivent
toujours retourner quelque chose d'affichable : les pannes de l'API sont
absorbees par des donnees de repli, jamais propagees a l'appelant.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cinescope.core.entities.media import MediaKind, Title


class ICatalogGateway(ABC):
    """
    Interface de recuperation du catalogue.

    Toutes les operations sont asynchrones et ne levent pas d'exception
    pour les erreurs reseau ou HTTP.
    """

    @abstractmethod
    async def fetch_trending(self, kind: MediaKind) -> list[Title]:
        """Titres tendance de la semaine pour un type de media."""
        ...

    @abstractmethod
    async def fetch_popular(self, kind: MediaKind, page: int = 1) -> list[Title]:
        """Titres populaires, page par page (1-indexee)."""
        ...

    @abstractmethod
    async def search(self, query: str) -> list[Title]:
        """Recherche plein texte sur les films et les series."""
        ...

    @abstractmethod
    async def get_details(self, kind: MediaKind, title_id: int) -> Optional[Title]:
        """Details d'un titre, ou None si introuvable."""
        ...

    @abstractmethod
    async def fetch_similar(self, kind: MediaKind, title_id: int) -> list[Title]:
        """Titres similaires (liste vide si indisponible)."""
        ...
