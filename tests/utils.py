"""Utility helpers for test factories."""

from __future__ import annotations

from datetime import datetime, timezone

from adaptlearn.schemas.course_schema import Course, Module
from adaptlearn.schemas.progress_schema import Progress
from adaptlearn.schemas.user_schema import LoginRequest, User
from adaptlearn.services.auth_service import AuthService
from adaptlearn.services.data_service import DataService

FIXED_NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def create_user(**kwargs) -> User:
    defaults = {
        "id": "user-1",
        "name": "Ada",
        "email": "ada@example.com",
        "learning_style": "visual",
        "skill_level": "beginner",
        "interests": ["javascript", "programming"],
    }
    defaults.update(kwargs)
    return User(**defaults)


def login_user(data_service: DataService, **kwargs) -> User:
    """Log a learner in so that progress reads are scoped to them."""
    defaults = {
        "name": "Ada",
        "email": "ada@example.com",
        "learning_style": "visual",
        "skill_level": "beginner",
        "interests": ["javascript", "programming"],
    }
    defaults.update(kwargs)
    return AuthService(data_service).login(LoginRequest(**defaults))


def create_course(
    course_id: str = "course",
    *,
    difficulty: str = "beginner",
    tags: list[str] | None = None,
    module_count: int = 2,
    category: str = "Programming",
) -> Course:
    modules = [
        Module(
            id=f"{course_id}-{index}",
            title=f"Module {index}",
            content=f"Content {index}",
            type="text",
            duration=10,
        )
        for index in range(1, module_count + 1)
    ]
    return Course(
        id=course_id,
        title=course_id.title(),
        description="",
        category=category,
        difficulty=difficulty,
        duration=10 * module_count,
        modules=modules,
        tags=tags if tags is not None else ["programming"],
    )


def create_progress(course_id: str, module_id: str, **kwargs) -> Progress:
    defaults = {"completed_at": FIXED_NOW, "time_spent": 0}
    defaults.update(kwargs)
    return Progress(course_id=course_id, module_id=module_id, **defaults)
