"""
Interfaces repository pour la persistance des comptes utilisateurs.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cinescope.core.entities.user import User


class IUserRepository(ABC):
    """Contrat de persistance des utilisateurs."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """
        Recupere un utilisateur par son email.

        Retourne :
            L'utilisateur ou None si aucun compte n'utilise cet email
        """
        ...

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Enregistre un nouvel utilisateur.

        Retourne :
            L'utilisateur avec son ID et ses horodatages

        Raises :
            DuplicateEmailError : Si l'email est deja utilise
        """
        ...
