"""Typed access to the platform document (users, catalogue, progress)."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from adaptlearn.db.initial_data import get_default_courses
from adaptlearn.schemas.course_schema import Course
from adaptlearn.schemas.progress_schema import Progress
from adaptlearn.schemas.user_schema import User
from adaptlearn.storage.document_store import DocumentStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

_USERS = TypeAdapter(List[User])
_COURSES = TypeAdapter(List[Course])
_PROGRESS = TypeAdapter(List[Progress])


def _validate_section(document: dict[str, Any], name: str, adapter: TypeAdapter[T]) -> Optional[T]:
    """Return the parsed section, or ``None`` when absent or invalid."""
    raw = document.get(name)
    if raw is None:
        return None
    try:
        return adapter.validate_python(raw)
    except ValidationError as exc:
        logger.warning("Section '%s' du document invalide, ignorée: %s", name, exc.error_count())
        return None


def _raw_section(document: dict[str, Any], name: str) -> List[Any]:
    """Return the stored entries untouched, so writers never drop what they cannot parse."""
    raw = document.get(name)
    if isinstance(raw, list):
        return list(raw)
    if raw is not None:
        logger.warning("Section '%s' du document n'est pas une liste, remplacée", name)
    return []


def _upsert(entries: List[Any], document: dict[str, Any], matches) -> List[Any]:
    for index, existing in enumerate(entries):
        if isinstance(existing, dict) and matches(existing):
            entries[index] = document
            return entries
    entries.append(document)
    return entries


class DataService:
    """Read-modify-write helpers over a :class:`DocumentStore`.

    Every write reloads the whole document, updates one section and saves the
    document back.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    # -----------------------------
    # Users
    # -----------------------------

    def save_user(self, user: User) -> None:
        data = self.store.load()
        data["users"] = _upsert(
            _raw_section(data, "users"),
            user.to_document(),
            lambda entry: entry.get("id") == user.id,
        )
        self.store.save(data)

    def get_user(self, user_id: str) -> Optional[User]:
        users = _validate_section(self.store.load(), "users", _USERS) or []
        return next((user for user in users if user.id == user_id), None)

    def get_current_user(self) -> Optional[User]:
        raw = self.store.load().get("currentUser")
        if not raw:
            return None
        try:
            return User.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Utilisateur courant invalide, ignoré: %s", exc.error_count())
            return None

    def set_current_user(self, user: User) -> None:
        data = self.store.load()
        data["currentUser"] = user.to_document()
        self.store.save(data)

    def clear_current_user(self) -> None:
        data = self.store.load()
        data.pop("currentUser", None)
        self.store.save(data)

    # -----------------------------
    # Courses
    # -----------------------------

    def get_courses(self) -> List[Course]:
        courses = _validate_section(self.store.load(), "courses", _COURSES)
        if courses is None:
            return get_default_courses()
        return courses

    def get_course(self, course_id: str) -> Optional[Course]:
        return next((course for course in self.get_courses() if course.id == course_id), None)

    # -----------------------------
    # Progress
    # -----------------------------

    def save_progress(self, progress: Progress) -> None:
        data = self.store.load()
        data["progress"] = _upsert(
            _raw_section(data, "progress"),
            progress.to_document(),
            lambda entry: (entry.get("courseId"), entry.get("moduleId")) == progress.key,
        )
        self.store.save(data)

    def get_progress(self) -> List[Progress]:
        return _validate_section(self.store.load(), "progress", _PROGRESS) or []

    def get_user_progress(self, user_id: str) -> List[Progress]:
        """Progress of ``user_id``.

        The document tracks a single learner: records are returned only when
        ``user_id`` is the current user.
        """
        current = self.get_current_user()
        if current is None or current.id != user_id:
            return []
        return self.get_progress()
