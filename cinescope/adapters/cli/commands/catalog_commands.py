"""
Commandes CLI du catalogue (tendances, populaires, recherche, fiche, affiche).
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer

from cinescope.adapters.cli.helpers import (
    console,
    open_bookmarks,
    suppress_loguru,
    titles_table,
    with_container,
)
from cinescope.core.entities.media import MediaKind, Movie, Series, Title
from cinescope.services.cards import format_rating
from cinescope.services.placeholder import render_placeholder, render_placeholder_svg

KindArgument = Annotated[MediaKind, typer.Argument(help="movie ou tv")]


def trending(kind: KindArgument = MediaKind.MOVIE) -> None:
    """Affiche les titres tendance de la semaine."""
    asyncio.run(_trending_async(kind))


@with_container()
async def _trending_async(container, kind: MediaKind) -> None:
    gateway = container.catalog_gateway()
    with suppress_loguru():
        titles = await gateway.fetch_trending(kind)
    console.print(titles_table(f"Tendances ({kind.value})", titles))


def popular(
    kind: KindArgument = MediaKind.MOVIE,
    page: Annotated[int, typer.Option("--page", "-p", min=1, help="Page TMDB")] = 1,
) -> None:
    """Affiche les titres populaires."""
    asyncio.run(_popular_async(kind, page))


@with_container()
async def _popular_async(container, kind: MediaKind, page: int) -> None:
    gateway = container.catalog_gateway()
    with suppress_loguru():
        titles = await gateway.fetch_popular(kind, page)
    console.print(titles_table(f"Populaires ({kind.value}, page {page})", titles))


def search(query: Annotated[str, typer.Argument(help="Texte recherche")]) -> None:
    """Recherche des films et series."""
    asyncio.run(_search_async(query))


@with_container()
async def _search_async(container, query: str) -> None:
    gateway = container.catalog_gateway()
    with suppress_loguru():
        titles = await gateway.search(query)
    if not titles:
        console.print(f"[yellow]Aucun resultat pour '{query}'[/yellow]")
        return
    console.print(titles_table(f"Recherche : {query}", titles))


def details(
    kind: KindArgument,
    title_id: Annotated[int, typer.Argument(help="ID TMDB")],
) -> None:
    """Affiche la fiche d'un titre et ses titres similaires."""
    found = asyncio.run(_details_async(kind, title_id))
    if not found:
        console.print(f"[red]Titre introuvable : {kind.value} {title_id}[/red]")
        raise typer.Exit(code=1)


@with_container()
async def _details_async(container, kind: MediaKind, title_id: int) -> bool:
    gateway = container.catalog_gateway()
    with suppress_loguru():
        title = await gateway.get_details(kind, title_id)
        if title is None:
            return False
        similar = await gateway.fetch_similar(kind, title_id)
    with open_bookmarks(container) as bookmarks:
        bookmarked = bookmarks.contains(title.id, title.media_type)
    _print_details(title, bookmarked)
    if similar:
        console.print(titles_table("Similaires", similar))
    return True


def _print_details(title: Title, bookmarked: bool) -> None:
    console.print(f"[bold]{title.title}[/bold] ({title.year or '?'})")
    console.print(f"Note : {format_rating(title.vote_average) or '-'}")
    if title.genres:
        console.print(f"Genres : {', '.join(title.genres)}")
    if isinstance(title, Movie) and title.runtime:
        console.print(f"Duree : {title.runtime} min")
    if isinstance(title, Series):
        if title.number_of_seasons:
            console.print(
                f"Saisons : {title.number_of_seasons} ({title.number_of_episodes or '?'} episodes)"
            )
        if title.networks:
            console.print(f"Chaines : {', '.join(title.networks)}")
        if title.status:
            console.print(f"Statut : {title.status}")
    if bookmarked:
        console.print("[green]Dans les favoris[/green]")
    if title.overview:
        console.print(title.overview)


def poster(
    title: Annotated[str, typer.Argument(help="Titre a afficher")],
    year: Annotated[str, typer.Option("--year", "-y", help="Annee")] = "",
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Fichier SVG a ecrire")
    ] = None,
) -> None:
    """Genere une affiche de remplacement (URI data ou fichier SVG)."""
    if output is None:
        typer.echo(render_placeholder(title, year))
        return
    output.write_text(render_placeholder_svg(title, year), encoding="utf-8")
    console.print(f"Affiche ecrite : {output}")
