"""
Service d'authentification (inscription et connexion).

Les mots de passe sont stockes et compares tels quels, sans hachage.
C'est le comportement historique du backend, conserve a l'identique.
"""

from loguru import logger

from cinescope.core.entities.user import User
from cinescope.core.exceptions import (
    DuplicateEmailError,
    UserNotFoundError,
    WrongPasswordError,
)
from cinescope.core.ports.repositories import IUserRepository


class AuthService:
    """
    Inscription et connexion contre un IUserRepository.

    Example:
        service = AuthService(user_repo=SQLModelUserRepository(session))
        user = service.signup("Ayushi", "ayushi@test.com", "123456")
        user = service.login("ayushi@test.com", "123456")
    """

    def __init__(self, user_repo: IUserRepository) -> None:
        self._user_repo = user_repo

    def signup(self, name: str, email: str, password: str) -> User:
        """
        Cree un compte.

        Raises:
            DuplicateEmailError: Si l'email est deja enregistre
        """
        if self._user_repo.get_by_email(email) is not None:
            logger.info("Inscription refusee, email deja utilise", email=email)
            raise DuplicateEmailError(email)

        user = self._user_repo.save(User(name=name, email=email, password=password))
        logger.info("Nouvel utilisateur", email=email)
        return user

    def login(self, email: str, password: str) -> User:
        """
        Verifie les identifiants.

        Raises:
            UserNotFoundError: Si aucun compte n'a cet email
            WrongPasswordError: Si le mot de passe differe
        """
        user = self._user_repo.get_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        if user.password != password:
            logger.info("Connexion refusee, mot de passe errone", email=email)
            raise WrongPasswordError(email)
        return user
