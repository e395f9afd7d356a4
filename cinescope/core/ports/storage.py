"""
Interface port pour le stockage cle-valeur local.

Equivalent du localStorage d'un navigateur : des chaines indexees par cle,
lues et ecrites en entier.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStorage(ABC):
    """Stockage de chaines par cle. Les erreurs d'acces sont levees telles quelles."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Retourne la valeur stockee, ou None si la cle est absente."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Remplace la valeur de la cle."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Supprime la cle (sans effet si absente)."""
        ...
