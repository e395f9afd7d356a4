"""
Service de gestion des favoris.

Les favoris sont stockes sous une seule cle, en JSON, dans un stockage
cle-valeur (IKeyValueStorage). Toute la collection est relue et reecrite a
chaque operation.

Les favoris sont une commodite : une erreur de stockage est journalisee et
traitee comme une collection vide ou une operation sans effet, elle n'est
jamais propagee a l'appelant.
"""

import json
import threading

from loguru import logger

from cinescope.core.entities.media import Bookmark, MediaKind, Title
from cinescope.core.ports.storage import IKeyValueStorage

BOOKMARKS_KEY = "entertainment_app_bookmarks"


class BookmarkService:
    """
    Favoris locaux, uniques par (id, media_type), dans l'ordre d'ajout.

    Les lectures-modifications-ecritures (add, remove, toggle) sont
    serialisees par un verrou : plusieurs threads peuvent partager une
    instance sans creer de doublons.

    Example:
        service = BookmarkService(storage=DiskCacheStorage(".cache/bookmarks"))
        service.add(Bookmark(id=550, title="Fight Club", media_type=MediaKind.MOVIE))
        service.contains(550, MediaKind.MOVIE)  # True
    """

    def __init__(self, storage: IKeyValueStorage, key: str = BOOKMARKS_KEY) -> None:
        """
        Initialise le service.

        Args:
            storage: Stockage cle-valeur sous-jacent
            key: Cle de la collection dans le stockage
        """
        self._storage = storage
        self._key = key
        self._lock = threading.RLock()

    def _read(self) -> list[Bookmark]:
        """Lit la collection. Leve les erreurs de stockage et de format."""
        raw = self._storage.get_item(self._key)
        if not raw:
            return []
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError("La collection de favoris n'est pas une liste")
        return [Bookmark.from_dict(item) for item in data]

    def _write(self, bookmarks: list[Bookmark]) -> None:
        self._storage.set_item(self._key, json.dumps([b.to_dict() for b in bookmarks]))

    def _save(self, operation: str, bookmarks: list[Bookmark]) -> bool:
        """Ecrit la collection. Retourne False (apres journalisation) en cas d'erreur."""
        try:
            self._write(bookmarks)
        except Exception as e:
            logger.error(f"Erreur d'ecriture des favoris ({operation}): {e!r}")
            return False
        return True

    def list_bookmarks(self) -> list[Bookmark]:
        """
        Retourne les favoris dans l'ordre d'ajout.

        Returns:
            Liste des favoris, vide si le stockage est vide ou illisible
        """
        try:
            return self._read()
        except Exception as e:
            logger.error(f"Erreur de lecture des favoris: {e!r}")
            return []

    def contains(self, title_id: int, media_type: MediaKind) -> bool:
        """Indique si le titre (id, media_type) est en favori."""
        key = (title_id, MediaKind(media_type))
        return any(b.key == key for b in self.list_bookmarks())

    def add(self, bookmark: Bookmark) -> list[Bookmark]:
        """
        Ajoute un favori s'il n'existe pas deja (sans effet sinon).

        Une collection illisible est traitee comme vide : l'ajout la remplace.

        Returns:
            La collection apres l'operation, vide en cas d'erreur d'ecriture
        """
        with self._lock:
            bookmarks = self.list_bookmarks()
            if any(b.key == bookmark.key for b in bookmarks):
                return bookmarks
            bookmarks.append(bookmark)
            if not self._save("add", bookmarks):
                return []
            logger.debug("Favori ajoute", id=bookmark.id, media_type=bookmark.media_type.value)
            return bookmarks

    def remove(self, title_id: int, media_type: MediaKind) -> list[Bookmark]:
        """
        Retire le favori (id, media_type) s'il existe (sans effet sinon).

        Returns:
            La collection apres l'operation, vide en cas d'erreur d'ecriture
        """
        key = (title_id, MediaKind(media_type))
        with self._lock:
            remaining = [b for b in self.list_bookmarks() if b.key != key]
            if not self._save("remove", remaining):
                return []
            return remaining

    def toggle(self, title: Title | Bookmark) -> bool:
        """
        Ajoute ou retire un titre des favoris (bouton "Bookmark").

        Returns:
            True si le titre est en favori apres l'operation
        """
        media_type = title.media_type
        with self._lock:
            if self.contains(title.id, media_type):
                self.remove(title.id, media_type)
                return False
            bookmark = title if isinstance(title, Bookmark) else Bookmark.from_title(title)
            self.add(bookmark)
            return self.contains(title.id, media_type)

    def by_kind(self) -> dict[MediaKind, list[Bookmark]]:
        """Favoris regroupes par type (films puis series), ordre d'ajout conserve."""
        grouped: dict[MediaKind, list[Bookmark]] = {kind: [] for kind in MediaKind}
        for bookmark in self.list_bookmarks():
            grouped[bookmark.media_type].append(bookmark)
        return grouped

    def clear(self) -> bool:
        """
        Supprime toute la collection, y compris une valeur illisible.

        Returns:
            True si la suppression a reussi
        """
        with self._lock:
            try:
                self._storage.remove_item(self._key)
            except Exception as e:
                logger.error(f"Erreur de suppression des favoris: {e!r}")
                return False
        logger.info("Favoris supprimes")
        return True
