"""
Tests unitaires pour les commandes CLI.

Les commandes tournent sur un vrai Container configure par variables
d'environnement : pas de cle TMDB (donnees locales) et favoris dans un
repertoire temporaire.

Tests couvrant:
- version, info
- trending, popular, search, details, poster
- bookmarks list/add/remove/clear
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from cinescope.adapters.cli.commands.catalog_commands import _print_details
from cinescope.core.entities.media import MediaKind, Series
from cinescope.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Environnement isole : pas de cle API, favoris temporaires."""
    monkeypatch.setenv("CINESCOPE_TMDB_API_KEY", "")
    monkeypatch.setenv("CINESCOPE_BOOKMARKS_DIR", str(tmp_path / "bookmarks"))
    return tmp_path


class TestInfoCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "CineScope v0.1.0" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "désactivée" in result.output


class TestCatalogCommands:
    """Tests pour les commandes du catalogue."""

    def test_trending_movies(self):
        result = runner.invoke(app, ["trending", "movie"])
        assert result.exit_code == 0
        assert "Fight Club" in result.output

    def test_popular_series(self):
        result = runner.invoke(app, ["popular", "tv", "--page", "2"])
        assert result.exit_code == 0
        assert "Breaking Bad" in result.output

    def test_search(self):
        result = runner.invoke(app, ["search", "office"])
        assert result.exit_code == 0
        assert "The Office" in result.output

    def test_search_no_result(self):
        result = runner.invoke(app, ["search", "zzzz"])
        assert result.exit_code == 0
        assert "Aucun resultat" in result.output

    def test_details(self):
        result = runner.invoke(app, ["details", "movie", "603"])
        assert result.exit_code == 0
        assert "The Matrix" in result.output
        assert "1999" in result.output

    def test_details_not_found(self):
        result = runner.invoke(app, ["details", "tv", "999999"])
        assert result.exit_code == 1
        assert "introuvable" in result.output

    def test_invalid_kind(self):
        result = runner.invoke(app, ["trending", "person"])
        assert result.exit_code != 0


class TestPosterCommand:
    def test_prints_data_uri(self):
        result = runner.invoke(app, ["poster", "Inception", "--year", "2010"])
        assert result.exit_code == 0
        assert result.output.startswith("data:image/svg+xml;base64,")

    def test_writes_svg_file(self, cli_env: Path):
        output = cli_env / "poster.svg"
        result = runner.invoke(app, ["poster", "A & B", "-o", str(output)])
        assert result.exit_code == 0
        content = output.read_text(encoding="utf-8")
        assert content.startswith("<svg")
        assert "A &amp; B" in content


class TestBookmarkCommands:
    """Tests pour bookmarks list/add/remove."""

    def test_list_empty(self):
        result = runner.invoke(app, ["bookmarks", "list"])
        assert result.exit_code == 0
        assert "Aucun favori" in result.output

    def test_add_list_remove(self):
        added = runner.invoke(app, ["bookmarks", "add", "movie", "603"])
        assert added.exit_code == 0
        assert "The Matrix" in added.output

        listed = runner.invoke(app, ["bookmarks", "list"])
        assert "The Matrix" in listed.output

        removed = runner.invoke(app, ["bookmarks", "remove", "movie", "603"])
        assert removed.exit_code == 0
        assert "Aucun favori" in runner.invoke(app, ["bookmarks", "list"]).output

    def test_add_unknown_title(self):
        result = runner.invoke(app, ["bookmarks", "add", "tv", "999999"])
        assert result.exit_code == 1

    def test_add_closes_gateway(self):
        with patch("cinescope.adapters.cli.helpers.Container") as mock_cls:
            container = MagicMock()
            mock_cls.return_value = container
            gateway = AsyncMock()
            gateway.get_details.return_value = None
            container.catalog_gateway.return_value = gateway

            result = runner.invoke(app, ["bookmarks", "add", "movie", "1"])

        assert result.exit_code == 1
        gateway.close.assert_awaited_once()

    def test_list_closes_storage(self):
        with patch("cinescope.adapters.cli.helpers.Container") as mock_cls:
            container = MagicMock()
            mock_cls.return_value = container
            container.bookmark_service.return_value.by_kind.return_value = {
                MediaKind.MOVIE: [],
                MediaKind.TV: [],
            }

            result = runner.invoke(app, ["bookmarks", "list"])

        assert result.exit_code == 0
        container.bookmark_storage.return_value.close.assert_called_once()

    def test_clear(self):
        runner.invoke(app, ["bookmarks", "add", "tv", "2316"])

        result = runner.invoke(app, ["bookmarks", "clear", "--yes"])

        assert result.exit_code == 0
        assert "Aucun favori" in runner.invoke(app, ["bookmarks", "list"]).output

    def test_clear_aborted_without_confirmation(self):
        runner.invoke(app, ["bookmarks", "add", "tv", "2316"])

        result = runner.invoke(app, ["bookmarks", "clear"], input="n\n")

        assert result.exit_code == 1
        assert "The Office" in runner.invoke(app, ["bookmarks", "list"]).output


class TestPrintDetails:
    def test_series_fields(self, capsys):
        series = Series(
            id=1396, title="Breaking Bad", release_date="2008-01-20",
            number_of_seasons=5, number_of_episodes=62, networks=("AMC",), status="Ended",
        )
        _print_details(series, bookmarked=True)
        out = capsys.readouterr().out
        assert "Saisons : 5 (62 episodes)" in out
        assert "AMC" in out
        assert "Dans les favoris" in out
