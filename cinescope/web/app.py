"""
Application FastAPI du catalogue CineScope.

Initialise l'application web avec le Container DI et monte les routes.
Les reponses sont des modeles de vue JSON (cartes, fiches, favoris).
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from ..container import Container
from .routes.bookmarks import router as bookmarks_router
from .routes.catalog import router as catalog_router
from .routes.home import router as home_router
from .routes.posters import router as posters_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ferme le client HTTP du catalogue et le stockage des favoris à l'arrêt."""
    container: Container = app.state.container
    logger.info(
        "Demarrage du catalogue",
        tmdb_enabled=container.config().tmdb_enabled,
    )
    yield
    await container.catalog_gateway().close()
    container.bookmark_storage().close()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application catalogue.

    Args:
        container: Container DI a utiliser (un nouveau par defaut)
    """
    app = FastAPI(title="CineScope", lifespan=lifespan)
    app.state.container = container if container is not None else Container()

    app.include_router(home_router)
    app.include_router(catalog_router)
    app.include_router(bookmarks_router)
    app.include_router(posters_router)
    return app


app = create_app()
