"""
Fixtures pytest partagees pour les tests CineScope.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Stockage de favoris en memoire et sur disque
- Catalogue de repli reduit
"""

from pathlib import Path
from typing import Iterator

import pytest

from cinescope.adapters.api.fallback import FallbackCatalog
from cinescope.adapters.storage.disk_storage import DiskCacheStorage
from cinescope.config import Settings
from cinescope.core.entities.media import Movie, Series
from cinescope.services.bookmarks import BookmarkService
from tests.fixtures.storage import MemoryStorage


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test sans cle TMDB, avec chemins temporaires.
    """
    return Settings(
        tmdb_api_key=None,
        bookmarks_dir=tmp_path / "bookmarks",
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def bookmark_service(memory_storage: MemoryStorage) -> BookmarkService:
    return BookmarkService(storage=memory_storage)


@pytest.fixture
def disk_storage(tmp_path: Path) -> Iterator[DiskCacheStorage]:
    storage = DiskCacheStorage(directory=tmp_path / "bookmarks")
    yield storage
    storage.close()


@pytest.fixture
def small_fallback() -> FallbackCatalog:
    """Catalogue de repli minimal : un film avec affiche, une serie."""
    return FallbackCatalog(
        movies=(
            Movie(id=550, title="Fight Club", release_date="1999-10-15",
                  vote_average=8.8, poster_path="data:image/svg+xml;base64,RkM="),
        ),
        series=(
            Series(id=2316, title="The Office", release_date="2005-03-24",
                   vote_average=9.0, poster_path="data:image/svg+xml;base64,VE8="),
        ),
    )
