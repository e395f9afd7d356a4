"""
Point d'entrée CLI de CineScope.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    bookmarks_app,
    details,
    popular,
    poster,
    search,
    trending,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="cinescope",
    help="Découverte de films et séries",
)
container = Container()

# Commandes du catalogue
app.command()(trending)
app.command()(popular)
app.command()(search)
app.command()(details)
app.command()(poster)

# Monter bookmarks_app comme sous-commande
app.add_typer(bookmarks_app, name="bookmarks")


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée (données locales)'}")
    typer.echo(f"URL TMDB : {config.tmdb_base_url}")
    typer.echo(f"Images : {config.tmdb_image_base_url}")
    typer.echo(f"Favoris : {config.bookmarks_dir}")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineScope v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web du catalogue."""
    import uvicorn

    typer.echo(f"Démarrage du catalogue sur {host}:{port}")
    uvicorn.run("cinescope.web.app:app", host=host, port=port, reload=reload)


@app.command(name="serve-auth")
def serve_auth(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 5000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le backend d'authentification."""
    import uvicorn

    typer.echo(f"Démarrage du backend d'authentification sur {host}:{port}")
    uvicorn.run("cinescope.web.auth_app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)

    logger.info("Démarrage de CineScope", version=__version__)

    app()


if __name__ == "__main__":
    main()
