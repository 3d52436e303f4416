"""Schémas Pydantic des recommandations et parcours d'apprentissage."""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from adaptlearn.schemas.base_schema import CamelModel
from adaptlearn.schemas.course_schema import Course
from adaptlearn.schemas.progress_schema import Progress
from adaptlearn.schemas.user_schema import LearningStyle, SkillLevel, User


class Recommendation(CamelModel):
    course_id: str
    reason: str
    confidence: float
    adapted_content: Optional[str] = None


class LearningPath(CamelModel):
    id: str
    user_id: str
    courses: List[Course] = Field(default_factory=list)
    current_course: Optional[str] = None
    estimated_completion: datetime


class RecommendationRequest(CamelModel):
    """Payload of the recommendation contract (local or remote)."""

    user: User
    courses: List[Course] = Field(default_factory=list)


class AdaptContentRequest(CamelModel):
    content: str
    learning_style: LearningStyle
    skill_level: SkillLevel


class AdaptContentResponse(CamelModel):
    adapted_content: str


class LearningSnapshot(CamelModel):
    """Everything the dashboard needs in one payload."""

    courses: List[Course] = Field(default_factory=list)
    progress: List[Progress] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)
    learning_path: Optional[LearningPath] = None
    recommended_courses: List[Course] = Field(default_factory=list)

    # Statistiques dérivées du suivi de progression
    enrolled_count: int = 0
    average_progress: int = 0
    completed_count: int = 0
    hours_learned: int = 0
