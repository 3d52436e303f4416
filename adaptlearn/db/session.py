"""Database engine and session utilities.

The platform only persists one JSON document, so a synchronous engine is
enough. A SQLite fallback keeps local development working when the configured
database cannot be reached.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from adaptlearn.core.config import settings

logger = logging.getLogger(__name__)


def _connection_arguments(database_url: str) -> dict[str, Any]:
    """Return driver specific ``connect_args`` for *database_url*."""

    try:
        parsed_url = make_url(database_url)
    except Exception:
        return {}

    if parsed_url.drivername.startswith("sqlite"):
        # FastAPI runs sync handlers in a threadpool.
        return {"check_same_thread": False}
    return {}


def _should_enable_sqlite_fallback() -> bool:
    environment = (getattr(settings, "ENVIRONMENT", "development") or "").lower()
    if os.getenv("DISABLE_SQLITE_FALLBACK") == "1":
        return False
    return environment in {"development", "local"}


SQLITE_FALLBACK_URL = "sqlite:///./adaptlearn_local.db"

# These globals are populated by ``configure_database``.
engine: Engine
SessionLocal: sessionmaker


def _verify_database_connection(target: Engine) -> None:
    """Open one connection and run ``SELECT 1`` against *target*."""

    with target.connect() as connection:
        connection.execute(text("SELECT 1"))


def configure_database(database_url: str | None = None, *, allow_fallback: bool = True) -> None:
    """Initialise the engine and session factory.

    ``database_url`` defaults to the environment configuration. When the
    connection attempt fails locally we fall back to a SQLite file so the API
    can boot without a running database server.
    """

    global engine, SessionLocal

    target_url = str(database_url or settings.DATABASE_URL)
    logger.info("Configuration de la base de données: %s", make_url(target_url).render_as_string(hide_password=True))

    candidate_engine = create_engine(
        target_url,
        pool_pre_ping=True,
        connect_args=_connection_arguments(target_url),
    )

    try:
        _verify_database_connection(candidate_engine)
    except (OperationalError, OSError) as exc:
        if allow_fallback and _should_enable_sqlite_fallback():
            logger.warning(
                "Impossible de joindre la base de données (%s). Bascule automatique vers SQLite.",
                exc,
            )
            candidate_engine.dispose()
            configure_database(SQLITE_FALLBACK_URL, allow_fallback=False)
            return

        logger.error("Connexion à la base de données échouée: %s", exc)
        raise

    engine = candidate_engine
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Initialise the engine at import time so the rest of the application can use
# it immediately.
configure_database()
