"""
Implementations SQLModel des repositories.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from cinescope.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)

__all__ = ["SQLModelUserRepository"]
