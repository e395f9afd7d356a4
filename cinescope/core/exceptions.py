"""
Exceptions du domaine.

Erreurs metier du backend d'authentification. Chaque cas a sa propre
classe pour que la couche web puisse choisir le code HTTP et le message.
"""


class AuthError(Exception):
    """Erreur de base de l'authentification."""

    message = "Authentication failed"

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"{self.message}: {email}")


class DuplicateEmailError(AuthError):
    """L'email est deja associe a un compte."""

    message = "Email already registered"


class UserNotFoundError(AuthError):
    """Aucun compte ne correspond a l'email."""

    message = "Wrong email"


class WrongPasswordError(AuthError):
    """Le mot de passe ne correspond pas a celui du compte."""

    message = "Wrong password"
