import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Imports de l'application
from adaptlearn.core.config import settings
from adaptlearn.db.base import Base
from adaptlearn.db import session as db_session
from adaptlearn.api.v1.api import api_router

# --- Configuration du logging ---
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# --- Initialisation de l'application FastAPI ---
app = FastAPI(
    title="Adaptive Learning API V1",
    openapi_url="/api/v1/openapi.json",
)


def _sanitize_origin(origin: str | None) -> str | None:
    if not origin:
        return None
    value = origin.strip()
    if not value:
        return None
    if not value.startswith("http"):
        value = f"https://{value}"
    return value.rstrip("/")


def _build_cors_origins() -> list[str]:
    origins = {_sanitize_origin(o) for o in settings.BACKEND_CORS_ORIGINS}
    allow_origins = sorted({origin for origin in origins if origin})
    logger.info("CORS origins configurés: %s", allow_origins)
    return allow_origins


# --- Configuration des Middlewares ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=_build_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["Content-Type"],
)

app.include_router(api_router, prefix="/api/v1")


# --- Événement de Démarrage ---
@app.on_event("startup")
def startup():
    logger.info("Vérification et création des tables de la base de données...")
    Base.metadata.create_all(bind=db_session.engine)
    logger.info("✅ Les tables de la base de données sont prêtes.")


# --- Route Racine ---
@app.get("/")
def read_root():
    return {"message": "Welcome to the Adaptive Learning API V1!"}
