"""
User account entity.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass
class User:
    """
    Compte utilisateur du backend d'authentification.

    Attributes:
        id: Internal database ID
        name: Display name
        email: Unique login email
        password: Password as given at signup (no transformation)
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    name: str
    email: str
    password: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def public_view(self) -> dict[str, Any]:
        """Champs exposes au client (jamais le mot de passe)."""
        return {"name": self.name, "email": self.email}
