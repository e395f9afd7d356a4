"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et les
applications web (catalogue et authentification).
"""

from dependency_injector import containers, providers

from .adapters.api.fallback import DEFAULT_FALLBACK
from .adapters.api.tmdb_gateway import GatewayState, TMDBCatalogGateway
from .adapters.storage.disk_storage import DiskCacheStorage
from .config import Settings
from .infrastructure.persistence.database import init_db
from .services.bookmarks import BookmarkService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        gateway = container.catalog_gateway()
        bookmarks = container.bookmark_service()

        container.database.init()  # Uniquement pour le backend d'authentification
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Catalogue : l'etat de disponibilite vit aussi longtemps que le gateway
    fallback_catalog = providers.Object(DEFAULT_FALLBACK)
    gateway_state = providers.Singleton(GatewayState)

    catalog_gateway = providers.Singleton(
        TMDBCatalogGateway,
        api_key=config.provided.tmdb_api_key,
        fallback=fallback_catalog,
        state=gateway_state,
        base_url=config.provided.tmdb_base_url,
        timeout=config.provided.tmdb_timeout,
    )

    # Favoris - Singleton pour partager le verrou entre les requetes
    bookmark_storage = providers.Singleton(
        DiskCacheStorage,
        directory=config.provided.bookmarks_dir,
    )
    bookmark_service = providers.Singleton(
        BookmarkService,
        storage=bookmark_storage,
    )

