"""
Implementation SQLModel du repository User.

Implemente l'interface IUserRepository pour la persistance des comptes
via SQLModel.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from cinescope.core.entities.user import User
from cinescope.core.exceptions import DuplicateEmailError
from cinescope.core.ports.repositories import IUserRepository
from cinescope.infrastructure.persistence.models import UserModel


class SQLModelUserRepository(IUserRepository):
    """
    Repository SQLModel pour les utilisateurs.

    Implemente IUserRepository avec conversion bidirectionnelle
    entre l'entite User (domaine) et UserModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def get_by_email(self, email: str) -> Optional[User]:
        """Recupere un utilisateur par son email (correspondance exacte)."""
        statement = select(UserModel).where(UserModel.email == email)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def save(self, user: User) -> User:
        """
        Insere un nouvel utilisateur.

        La contrainte d'unicite sur l'email couvre le cas de deux
        inscriptions simultanees avec le meme email.
        """
        model = UserModel(name=user.name, email=user.email, password=user.password)
        self._session.add(model)
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            raise DuplicateEmailError(user.email) from e
        self._session.refresh(model)
        return self._to_entity(model)
