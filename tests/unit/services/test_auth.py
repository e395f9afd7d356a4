"""
Tests pour AuthService avec un repository mocke.
"""

from unittest.mock import MagicMock

import pytest

from cinescope.core.entities.user import User
from cinescope.core.exceptions import (
    DuplicateEmailError,
    UserNotFoundError,
    WrongPasswordError,
)
from cinescope.core.ports.repositories import IUserRepository
from cinescope.services.auth import AuthService


@pytest.fixture
def mock_user_repo() -> MagicMock:
    repo = MagicMock(spec=IUserRepository)
    repo.get_by_email.return_value = None
    repo.save.side_effect = lambda user: User(
        id=1, name=user.name, email=user.email, password=user.password
    )
    return repo


@pytest.fixture
def service(mock_user_repo: MagicMock) -> AuthService:
    return AuthService(user_repo=mock_user_repo)


class TestSignup:
    def test_signup_saves_user(self, service: AuthService, mock_user_repo: MagicMock):
        user = service.signup("Ayushi", "ayushi@test.com", "123456")
        assert user.id == 1
        assert user.public_view() == {"name": "Ayushi", "email": "ayushi@test.com"}
        mock_user_repo.save.assert_called_once()

    def test_duplicate_email(self, service: AuthService, mock_user_repo: MagicMock):
        mock_user_repo.get_by_email.return_value = User(
            name="Ayushi", email="ayushi@test.com", password="x"
        )
        with pytest.raises(DuplicateEmailError) as exc_info:
            service.signup("Other", "ayushi@test.com", "123456")
        assert exc_info.value.message == "Email already registered"
        mock_user_repo.save.assert_not_called()


class TestLogin:
    def test_login_success(self, service: AuthService, mock_user_repo: MagicMock):
        mock_user_repo.get_by_email.return_value = User(
            name="Ayushi", email="ayushi@test.com", password="123456"
        )
        assert service.login("ayushi@test.com", "123456").name == "Ayushi"

    def test_unknown_email(self, service: AuthService):
        with pytest.raises(UserNotFoundError) as exc_info:
            service.login("nobody@test.com", "123456")
        assert exc_info.value.message == "Wrong email"

    def test_wrong_password(self, service: AuthService, mock_user_repo: MagicMock):
        mock_user_repo.get_by_email.return_value = User(
            name="Ayushi", email="ayushi@test.com", password="123456"
        )
        with pytest.raises(WrongPasswordError) as exc_info:
            service.login("ayushi@test.com", "bad")
        assert exc_info.value.message == "Wrong password"

    def test_password_is_case_sensitive(self, service: AuthService, mock_user_repo: MagicMock):
        mock_user_repo.get_by_email.return_value = User(
            name="A", email="a@test.com", password="Secret"
        )
        with pytest.raises(WrongPasswordError):
            service.login("a@test.com", "secret")
