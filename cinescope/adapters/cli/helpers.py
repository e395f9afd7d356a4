"""
Utilitaires partages pour les commandes CLI de CineScope.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container en premier argument
- open_bookmarks : context manager fournissant le service de favoris (stockage ferme a la sortie)
- titles_table : tableau Rich d'une liste de titres
"""

from collections.abc import Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Optional

from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from cinescope.container import Container
from cinescope.core.entities.media import Bookmark, Title
from cinescope.services.bookmarks import BookmarkService
from cinescope.services.cards import format_rating

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("cinescope")
    try:
        yield
    finally:
        loguru_logger.enable("cinescope")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le client HTTP du catalogue est ferme a la fin de la commande.

    Usage:
        @with_container()
        async def my_command(container, ...):
            gateway = container.catalog_gateway()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.catalog_gateway().close()
        return wrapper
    return decorator


@contextmanager
def open_bookmarks(container: Optional[Container] = None) -> Iterator[BookmarkService]:
    """
    Fournit le service de favoris et ferme son stockage a la sortie.

    Usage:
        with open_bookmarks() as bookmarks:
            bookmarks.list_bookmarks()
    """
    container = container if container is not None else Container()
    try:
        yield container.bookmark_service()
    finally:
        container.bookmark_storage().close()

def titles_table(title: str, items: list[Title] | list[Bookmark]) -> Table:
    """Tableau Rich : id, type, titre, annee, note."""
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Type")
    table.add_column("Titre", style="bold")
    table.add_column("Annee")
    table.add_column("Note", justify="right", style="yellow")
    for item in items:
        table.add_row(
            str(item.id),
            item.media_type.value,
            item.title,
            item.year or "-",
            format_rating(item.vote_average) or "-",
        )
    return table
