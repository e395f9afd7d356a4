"""
Tests pour DiskCacheStorage.
"""

from pathlib import Path

import pytest

from cinescope.adapters.storage.disk_storage import DiskCacheStorage
from cinescope.core.entities.media import Bookmark, MediaKind
from cinescope.services.bookmarks import BookmarkService


class TestDiskCacheStorage:
    def test_missing_key_returns_none(self, disk_storage: DiskCacheStorage):
        assert disk_storage.get_item("absent") is None

    def test_set_then_get(self, disk_storage: DiskCacheStorage):
        disk_storage.set_item("k", "[1, 2]")
        assert disk_storage.get_item("k") == "[1, 2]"

    def test_set_replaces_value(self, disk_storage: DiskCacheStorage):
        disk_storage.set_item("k", "a")
        disk_storage.set_item("k", "b")
        assert disk_storage.get_item("k") == "b"

    def test_remove_item(self, disk_storage: DiskCacheStorage):
        disk_storage.set_item("k", "a")
        disk_storage.remove_item("k")
        disk_storage.remove_item("k")
        assert disk_storage.get_item("k") is None

    def test_non_text_value_raises(self, disk_storage: DiskCacheStorage):
        disk_storage._cache.set("k", 42)
        with pytest.raises(TypeError):
            disk_storage.get_item("k")

    def test_persists_across_instances(self, tmp_path: Path):
        """Les favoris survivent a la reouverture du stockage."""
        directory = tmp_path / "bookmarks"
        first = DiskCacheStorage(directory=directory)
        BookmarkService(storage=first).add(
            Bookmark(id=603, title="The Matrix", media_type=MediaKind.MOVIE)
        )
        first.close()

        second = DiskCacheStorage(directory=directory)
        try:
            assert BookmarkService(storage=second).contains(603, MediaKind.MOVIE)
        finally:
            second.close()
