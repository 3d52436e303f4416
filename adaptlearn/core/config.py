# Fichier: adaptlearn/core/config.py
from pydantic_settings import BaseSettings
from typing import Optional, List
from pydantic import ValidationError, field_validator
import sys


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./adaptlearn_local.db"
    ENVIRONMENT: str = "development"

    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:8000",
        "http://127.0.0.1:5173",
    ]

    # --- Stockage du document ---
    # Tout l'état (utilisateurs, catalogue, progression) vit sous une seule clé.
    STORAGE_KEY: str = "learning-platform-data"

    # --- Recommandations ---
    RECOMMENDATION_SERVICE_URL: Optional[str] = None
    RECOMMENDATION_SERVICE_TIMEOUT_SECONDS: float = 5.0
    MAX_RECOMMENDATIONS: int = 5
    RECOMMENDATION_CONFIDENCE: float = 0.8
    LEARNING_PATH_DAYS_PER_COURSE: int = 7

    class Config:
        env_file = ".env"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def _normalize_database_url(cls, value: str) -> str:
        """Upgrade legacy ``postgres://`` URLs to the ``postgresql://`` scheme.

        Managed Postgres providers still hand out ``postgres://`` URLs, which
        SQLAlchemy stopped accepting. Other backends (SQLite included) are
        returned untouched.
        """

        if not isinstance(value, str):
            return value

        if value.startswith("postgres://"):
            return "postgresql://" + value[len("postgres://") :]

        return value

    @field_validator("RECOMMENDATION_SERVICE_URL", mode="before")
    @classmethod
    def _blank_service_url_is_none(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str):
            value = value.strip().rstrip("/")
            return value or None
        return value


def _log_settings_validation_error(exc: ValidationError) -> None:
    """Pretty-print missing or invalid environment variables.

    The exception bubbles up during module import, which makes it hard to
    spot the faulty variable, so the structured payload is printed before the
    error is re-raised.
    """

    header = "Configuration error while loading environment variables:"
    print(header, file=sys.stderr)

    details = exc.errors()
    if details:
        for error in details:
            location = ".".join(str(part) for part in error.get("loc", ()))
            message = error.get("msg", "Unknown validation error")
            type_name = error.get("type")
            hint_parts = [message]
            if type_name:
                hint_parts.append(f"(type={type_name})")
            hint = " ".join(hint_parts)
            print(f"  - {location}: {hint}", file=sys.stderr)
    else:
        print(exc, file=sys.stderr)


try:
    settings = Settings()
except ValidationError as exc:  # pragma: no cover - exercised at runtime
    _log_settings_validation_error(exc)
    raise
