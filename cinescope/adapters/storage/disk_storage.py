"""
Stockage cle-valeur persistant via diskcache.

Les valeurs sont conservees sur disque entre les redemarrages, sans
expiration. Chaque ecriture remplace la valeur entiere de la cle.
"""

from pathlib import Path
from typing import Optional

from diskcache import Cache

from cinescope.core.ports.storage import IKeyValueStorage


class DiskCacheStorage(IKeyValueStorage):
    """
    Implementation de IKeyValueStorage sur un repertoire diskcache.

    Example:
        storage = DiskCacheStorage(directory=".cache/bookmarks")
        storage.set_item("bookmarks", "[]")
        raw = storage.get_item("bookmarks")
    """

    def __init__(self, directory: str | Path = ".cache/bookmarks") -> None:
        """
        Initialise le stockage.

        Args:
            directory: Repertoire du stockage (cree si inexistant)
        """
        self._cache = Cache(str(directory))

    def get_item(self, key: str) -> Optional[str]:
        value = self._cache.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError(f"Valeur non textuelle pour la cle {key!r}")
        return value

    def set_item(self, key: str, value: str) -> None:
        self._cache.set(key, value)

    def remove_item(self, key: str) -> None:
        self._cache.delete(key)

    def close(self) -> None:
        """Ferme la connexion au stockage (a appeler a la fin)."""
        self._cache.close()
