"""
Commandes CLI de gestion des favoris (list, add, remove, clear).
"""

import asyncio
from typing import Annotated, Optional

import typer

from cinescope.adapters.cli.helpers import (
    console,
    open_bookmarks,
    suppress_loguru,
    titles_table,
    with_container,
)
from cinescope.core.entities.media import Bookmark, MediaKind

bookmarks_app = typer.Typer(
    name="bookmarks",
    help="Gestion des favoris",
    rich_markup_mode="rich",
)


@bookmarks_app.command("list")
def list_bookmarks() -> None:
    """Liste les favoris, films puis series."""
    with open_bookmarks() as bookmarks:
        grouped = bookmarks.by_kind()
    if not any(grouped.values()):
        console.print("[yellow]Aucun favori[/yellow]")
        return
    for kind, label in ((MediaKind.MOVIE, "Films"), (MediaKind.TV, "Series")):
        if grouped[kind]:
            console.print(titles_table(f"{label} ({len(grouped[kind])})", grouped[kind]))


@bookmarks_app.command("add")
def add_bookmark(
    kind: Annotated[MediaKind, typer.Argument(help="movie ou tv")],
    title_id: Annotated[int, typer.Argument(help="ID TMDB")],
) -> None:
    """Ajoute un titre du catalogue aux favoris."""
    added = asyncio.run(_add_async(kind, title_id))
    if added is None:
        console.print(f"[red]Titre introuvable : {kind.value} {title_id}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]Ajoute aux favoris :[/green] {added}")


@with_container()
async def _add_async(container, kind: MediaKind, title_id: int) -> Optional[str]:
    """Retourne le titre ajoute, None s'il est introuvable."""
    with suppress_loguru():
        title = await container.catalog_gateway().get_details(kind, title_id)
    if title is None:
        return None
    with open_bookmarks(container) as bookmarks:
        bookmarks.add(Bookmark.from_title(title))
    return title.title


@bookmarks_app.command("remove")
def remove_bookmark(
    kind: Annotated[MediaKind, typer.Argument(help="movie ou tv")],
    title_id: Annotated[int, typer.Argument(help="ID TMDB")],
) -> None:
    """Retire un titre des favoris."""
    with open_bookmarks() as bookmarks:
        bookmarks.remove(title_id, kind)
    console.print(f"Retire des favoris : {kind.value} {title_id}")


@bookmarks_app.command("clear")
def clear_bookmarks(
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Ne pas demander de confirmation")
    ] = False,
) -> None:
    """Supprime tous les favoris."""
    if not yes and not typer.confirm("Supprimer tous les favoris ?"):
        raise typer.Abort()
    with open_bookmarks() as bookmarks:
        cleared = bookmarks.clear()
    if not cleared:
        console.print("[red]Impossible de supprimer les favoris[/red]")
        raise typer.Exit(code=1)
    console.print("Favoris supprimes")
