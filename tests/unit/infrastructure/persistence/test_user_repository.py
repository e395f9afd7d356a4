"""
Tests pour SQLModelUserRepository sur une base SQLite en memoire.
"""

from typing import Iterator

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from cinescope.core.entities.user import User
from cinescope.core.exceptions import DuplicateEmailError
from cinescope.infrastructure.persistence.models import UserModel
from cinescope.infrastructure.persistence.repositories import SQLModelUserRepository


@pytest.fixture
def session() -> Iterator[Session]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def repo(session: Session) -> SQLModelUserRepository:
    return SQLModelUserRepository(session)


class TestUserModel:
    def test_timestamps_default(self):
        model = UserModel(name="A", email="a@test.com", password="x")
        assert model.id is None
        assert model.created_at is not None
        assert model.updated_at is not None


class TestSQLModelUserRepository:
    def test_save_assigns_id(self, repo: SQLModelUserRepository):
        user = repo.save(User(name="Ayushi", email="ayushi@test.com", password="123456"))
        assert user.id is not None
        assert user.created_at is not None

    def test_get_by_email(self, repo: SQLModelUserRepository):
        repo.save(User(name="Ayushi", email="ayushi@test.com", password="123456"))
        user = repo.get_by_email("ayushi@test.com")
        assert user is not None
        assert user.name == "Ayushi"
        assert user.password == "123456"

    def test_get_by_email_exact_match(self, repo: SQLModelUserRepository):
        repo.save(User(name="Ayushi", email="ayushi@test.com", password="123456"))
        assert repo.get_by_email("AYUSHI@test.com") is None

    def test_get_unknown_email(self, repo: SQLModelUserRepository):
        assert repo.get_by_email("nobody@test.com") is None

    def test_duplicate_email_raises(self, repo: SQLModelUserRepository):
        repo.save(User(name="A", email="dup@test.com", password="1"))
        with pytest.raises(DuplicateEmailError):
            repo.save(User(name="B", email="dup@test.com", password="2"))

    def test_session_usable_after_duplicate(self, repo: SQLModelUserRepository):
        repo.save(User(name="A", email="dup@test.com", password="1"))
        with pytest.raises(DuplicateEmailError):
            repo.save(User(name="B", email="dup@test.com", password="2"))
        assert repo.get_by_email("dup@test.com").name == "A"
