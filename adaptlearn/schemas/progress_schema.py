"""Schémas Pydantic de la progression."""
from datetime import datetime
from typing import Optional

from adaptlearn.schemas.base_schema import CamelModel


class Progress(CamelModel):
    """Completion of one module; unique per (course_id, module_id)."""

    course_id: str
    module_id: str
    completed_at: datetime
    score: Optional[float] = None
    time_spent: int = 0

    @property
    def key(self) -> tuple[str, str]:
        return self.course_id, self.module_id


class CompleteModuleRequest(CamelModel):
    score: Optional[float] = None


class CourseProgressResponse(CamelModel):
    course_id: str
    percentage: float
