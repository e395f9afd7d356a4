"""
Gateway TMDB pour le catalogue de films et series.

Implemente ICatalogGateway pour TMDB (The Movie Database) avec repli local :
l'interface a toujours quelque chose a afficher, meme sans cle API ou avec
une cle expiree.

Politique commune a toutes les operations:
- Cle absente ou API desactivee : pas d'appel reseau, donnees de repli
- Succes avec resultats : les affiches manquantes sont completees par
  celles du catalogue de repli (meme id, meme type)
- Succes sans resultat : donnees de repli (trending/popular/search)
- 401 : l'API est desactivee pour toute la vie du gateway, donnees de repli
- Autre erreur : donnees de repli pour cet appel uniquement

Usage:
    gateway = TMDBCatalogGateway(api_key="your_key", fallback=DEFAULT_FALLBACK)
    movies = await gateway.fetch_trending(MediaKind.MOVIE)
    details = await gateway.get_details(MediaKind.MOVIE, 550)
    await gateway.close()
"""

from dataclasses import dataclass
from typing import Any, Optional

import httpx
from loguru import logger

from cinescope.adapters.api.fallback import DEFAULT_FALLBACK, FallbackCatalog
from cinescope.core.entities.media import MediaKind, Title, parse_title
from cinescope.core.ports.catalog import ICatalogGateway


@dataclass
class GatewayState:
    """
    Etat de disponibilite de l'API, propre a une instance de gateway.

    Le passage a api_disabled=True est definitif : seule une nouvelle
    instance remet l'API en service.
    """

    api_disabled: bool = False

    def disable(self) -> None:
        self.api_disabled = True


class TMDBCatalogGateway(ICatalogGateway):
    """
    Client du catalogue TMDB avec repli local.

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        TMDB_IMAGE_BASE_URL: URL de base pour les images (posters)

    Example:
        async with TMDBCatalogGateway(api_key="xxx", fallback=DEFAULT_FALLBACK) as gateway:
            results = await gateway.search("Matrix")
            for title in results:
                print(f"{title.title} ({title.year}) - {title.media_type.value}")
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

    def __init__(
        self,
        api_key: Optional[str],
        fallback: FallbackCatalog = DEFAULT_FALLBACK,
        state: Optional[GatewayState] = None,
        base_url: str = TMDB_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le gateway.

        Args:
            api_key: Cle API TMDB v3, None pour travailler uniquement en local
            fallback: Catalogue de repli
            state: Etat de disponibilite (nouveau par defaut)
            base_url: URL de base de l'API
            timeout: Timeout des requetes HTTP en secondes
        """
        self._api_key = api_key or None
        self._fallback = fallback
        self._state = state if state is not None else GatewayState()
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

        if self._api_key is None:
            logger.warning("Aucune cle API TMDB configuree, utilisation des donnees locales")

    @property
    def state(self) -> GatewayState:
        return self._state

    @property
    def fallback(self) -> FallbackCatalog:
        return self._fallback

    @property
    def live_enabled(self) -> bool:
        """True si les appels reseau sont autorises."""
        return self._api_key is not None and not self._state.api_disabled

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        La cle est passee en parametre de requete api_key.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                params={"api_key": self._api_key},
                timeout=self._timeout,
            )
        return self._client

    async def _get(self, path: str, **params: Any) -> dict[str, Any]:
        """
        GET sur l'API TMDB.

        Raises:
            httpx.HTTPStatusError: Pour les reponses 4xx/5xx
            httpx.HTTPError: Pour les erreurs de transport
            ValueError: Si la reponse n'est pas un objet JSON
        """
        logger.debug("Appel TMDB", path=path, params=params)
        response = await self._get_client().get(path, params=params)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Reponse TMDB inattendue pour {path}")
        return data

    def _handle_error(self, error: Exception, context: str) -> bool:
        """
        Classe une erreur d'appel TMDB.

        Un 401 desactive definitivement l'API pour ce gateway.

        Returns:
            True si l'erreur est un refus d'authentification
        """
        if isinstance(error, httpx.HTTPStatusError) and error.response.status_code == 401:
            self._state.disable()
            logger.warning(f"TMDB a retourne 401 pour {context}, passage aux donnees locales")
            return True
        logger.error(f"Erreur TMDB pendant {context}: {error!r}")
        return False

    def _parse_results(
        self, data: dict[str, Any], kind: MediaKind, context: str
    ) -> list[Title]:
        titles = []
        for item in data.get("results") or []:
            try:
                titles.append(parse_title(item, kind))
            except (KeyError, TypeError, ValueError) as e:
                logger.debug(f"Resultat TMDB ignore pour {context}: {e!r}")
        return titles

    def merge_with_fallback(self, results: list[Title]) -> list[Title]:
        """
        Complete les affiches manquantes avec celles du catalogue de repli.

        Un resultat sans poster_path recoit l'affiche du titre de repli de
        meme (id, type); tous ses autres champs sont conserves. Les resultats
        avec affiche sont retournes tels quels.
        """
        merged = []
        for item in results:
            if not item.poster_path:
                local = self._fallback.find(item.media_type, item.id)
                if local is not None:
                    item = item.with_poster(local.poster_path)
            merged.append(item)
        return merged

    async def _fetch_list(
        self, kind: MediaKind, path: str, context: str, **params: Any
    ) -> list[Title]:
        """Trending et popular : meme politique, seul l'endpoint change."""
        if not self.live_enabled:
            return self._fallback.for_kind(kind)
        try:
            data = await self._get(path, **params)
        except (httpx.HTTPError, ValueError) as e:
            self._handle_error(e, context)
            return self._fallback.for_kind(kind)

        results = self._parse_results(data, kind, context)
        if not results:
            return self._fallback.for_kind(kind)
        return self.merge_with_fallback(results)

    async def fetch_trending(self, kind: MediaKind) -> list[Title]:
        """
        Titres tendance de la semaine.

        Args:
            kind: MediaKind.MOVIE ou MediaKind.TV

        Returns:
            Liste de titres (jamais vide avec le catalogue par defaut)
        """
        return await self._fetch_list(
            kind, f"/trending/{kind.value}/week", f"fetch_trending({kind.value})"
        )

    async def fetch_popular(self, kind: MediaKind, page: int = 1) -> list[Title]:
        """
        Titres populaires pour une page.

        Args:
            kind: MediaKind.MOVIE ou MediaKind.TV
            page: Numero de page TMDB (1-indexe)
        """
        return await self._fetch_list(
            kind, f"/{kind.value}/popular", f"fetch_popular({kind.value}, {page})", page=page
        )

    async def search(self, query: str) -> list[Title]:
        """
        Recherche multi (films et series) par texte.

        Sans API, ou si l'API ne trouve rien, filtre le catalogue de repli
        (sous-chaine insensible a la casse sur le titre).
        """
        if not self.live_enabled:
            return self._fallback.search(query)
        try:
            data = await self._get("/search/multi", query=query)
        except (httpx.HTTPError, ValueError) as e:
            self._handle_error(e, f"search({query!r})")
            return self._fallback.search(query)

        raw = data.get("results") or []
        if not raw:
            return self._fallback.search(query)

        # search/multi retourne aussi des personnes
        media = [
            item for item in raw
            if isinstance(item, dict) and item.get("media_type") in ("movie", "tv")
        ]
        results = self._parse_results({"results": media}, MediaKind.MOVIE, "search")
        return self.merge_with_fallback(results)

    async def get_details(self, kind: MediaKind, title_id: int) -> Optional[Title]:
        """
        Details complets d'un film ou d'une serie.

        Returns:
            Movie ou Series, ou None si absent de l'API et du catalogue de repli
        """
        if not self.live_enabled:
            return self._fallback.find(kind, title_id)
        context = f"get_details({kind.value}, {title_id})"
        try:
            data = await self._get(f"/{kind.value}/{title_id}")
            # Les details n'ont pas de media_type : le type demande fait foi
            return parse_title({**data, "media_type": kind.value}, kind)
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            self._handle_error(e, context)
            return self._fallback.find(kind, title_id)

    async def fetch_similar(self, kind: MediaKind, title_id: int) -> list[Title]:
        """
        Titres similaires. Pas de repli local : liste vide si indisponible.
        """
        if not self.live_enabled:
            return []
        context = f"fetch_similar({kind.value}, {title_id})"
        try:
            data = await self._get(f"/{kind.value}/{title_id}/similar")
        except (httpx.HTTPError, ValueError) as e:
            self._handle_error(e, context)
            return []
        return self._parse_results(data, kind, context)

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "TMDBCatalogGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
