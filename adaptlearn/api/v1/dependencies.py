import logging
from functools import lru_cache
from typing import Generator

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from adaptlearn.db import session as db_session
from adaptlearn.schemas.user_schema import User
from adaptlearn.services.data_service import DataService
from adaptlearn.services.recommendation_service import (
    RecommendationService,
    build_recommendation_service,
)
from adaptlearn.storage.document_store import DocumentStore, SqlDocumentStore

log = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    db = db_session.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_document_store(db: Session = Depends(get_db)) -> DocumentStore:
    return SqlDocumentStore(db)


def get_data_service(store: DocumentStore = Depends(get_document_store)) -> DataService:
    return DataService(store)


@lru_cache(maxsize=1)
def get_recommendation_service() -> RecommendationService:
    """One engine and HTTP session per process, shared by every request."""
    return build_recommendation_service()


def get_current_user(data_service: DataService = Depends(get_data_service)) -> User:
    user = data_service.get_current_user()
    if user is None:
        log.warning("Validation échouée: aucun utilisateur connecté.")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="not_authenticated")
    return user
