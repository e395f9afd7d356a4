"""
Module de persistance SQLite pour CineScope.

Ce module fournit l'infrastructure de stockage des comptes utilisateurs
via SQLModel (SQLAlchemy):

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables

Usage:
    from cinescope.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    session = next(get_session())
"""

from cinescope.infrastructure.persistence.database import (
    get_engine,
    get_session,
    init_db,
)
from cinescope.infrastructure.persistence.models import UserModel

__all__ = [
    "get_engine",
    "get_session",
    "init_db",
    "UserModel",
]
