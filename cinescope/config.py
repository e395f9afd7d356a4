"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINESCOPE_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle - sans clé, le catalogue utilise les données locales.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de cinescope/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINESCOPE_.
    Exemple : CINESCOPE_TMDB_API_KEY=xxxx

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINESCOPE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API TMDB (clé OPTIONNELLE - données locales si absente)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_image_base_url: str = Field(default="https://image.tmdb.org/t/p/w500")
    tmdb_timeout: float = Field(default=30.0, gt=0)

    # Favoris (stockage cle-valeur local)
    bookmarks_dir: Path = Field(default=Path(".cache/bookmarks"))

    # Base de données des utilisateurs
    database_url: str = Field(default="sqlite:///cinescope.db")

    # Backend d'authentification
    auth_cors_origins: list[str] = Field(default=["*"])

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinescope.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("bookmarks_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("tmdb_api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Une clé vide équivaut à une clé absente."""
        if v is None or not str(v).strip():
            return None
        return str(v).strip()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return self.tmdb_api_key is not None
