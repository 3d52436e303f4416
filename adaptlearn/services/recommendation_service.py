"""Rule-based recommendations, content adaptation and learning paths.

Nothing here performs inference: recommendations are an exact skill-level
filter followed by a tag/interest substring match, and adaptation wraps the
module text in fixed banners.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional

from adaptlearn.core.config import settings
from adaptlearn.schemas.course_schema import Course
from adaptlearn.schemas.learning_schema import LearningPath, Recommendation
from adaptlearn.schemas.user_schema import LearningStyle, SkillLevel, User
from adaptlearn.services.recommendation_client import (
    RecommendationServiceError,
    RemoteRecommendationClient,
)

logger = logging.getLogger(__name__)

# (header, footer) par style d'apprentissage; ``reading`` n'a pas de bannière.
STYLE_BANNERS = {
    LearningStyle.VISUAL: (
        "📊 Visual Learning Mode",
        "💡 Tip: Look for diagrams and visual examples to enhance your understanding.",
    ),
    LearningStyle.AUDITORY: (
        "🎧 Auditory Learning Mode",
        "💡 Tip: Consider reading this content aloud or finding audio resources.",
    ),
    LearningStyle.KINESTHETIC: (
        "🤲 Hands-on Learning Mode",
        "💡 Tip: Try to practice these concepts with real examples or exercises.",
    ),
}

# ``intermediate`` n'a pas de bannière.
SKILL_BANNERS = {
    SkillLevel.BEGINNER: (
        "🌱 Beginner-Friendly Content",
        "📚 Remember: Take your time and don't hesitate to review concepts multiple times.",
    ),
    SkillLevel.ADVANCED: (
        "🚀 Advanced Content",
        "⚡ Challenge: Consider how you might apply these concepts to complex real-world scenarios.",
    ),
}


def _wrap(content: str, banner: Optional[tuple[str, str]]) -> str:
    if banner is None:
        return content
    header, footer = banner
    return f"{header}\n\n{content}\n\n{footer}"


def adapt_content(content: str, learning_style: LearningStyle, skill_level: SkillLevel) -> str:
    """Wrap ``content`` with the style banner, then with the skill banner."""
    adapted = _wrap(content, STYLE_BANNERS.get(learning_style))
    return _wrap(adapted, SKILL_BANNERS.get(skill_level))


def matches_interests(course: Course, interests: Iterable[str]) -> bool:
    """True when a course tag appears inside one of the interests.

    The match is one-directional: tag ``"ai"`` matches interest
    ``"AI and machine learning"``, tag ``"machine-learning"`` does not match
    interest ``"machine"``.
    """
    lowered = [interest.lower() for interest in interests]
    return any(tag.lower() in interest for tag in course.tags for interest in lowered)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RecommendationEngine:
    """Deterministic, local recommendation rules."""

    def __init__(
        self,
        max_recommendations: int | None = None,
        confidence: float | None = None,
        days_per_course: int | None = None,
        clock: Callable[[], datetime] = _now,
    ):
        self.max_recommendations = (
            settings.MAX_RECOMMENDATIONS if max_recommendations is None else max_recommendations
        )
        self.confidence = settings.RECOMMENDATION_CONFIDENCE if confidence is None else confidence
        self.days_per_course = (
            settings.LEARNING_PATH_DAYS_PER_COURSE if days_per_course is None else days_per_course
        )
        self.clock = clock

    def recommend(self, user: User, courses: List[Course]) -> List[Recommendation]:
        matching = [
            course
            for course in courses
            if course.difficulty == user.skill_level and matches_interests(course, user.interests)
        ]
        return [
            Recommendation(
                course_id=course.id,
                reason=f"Matches your {user.skill_level.value} level and interests in {course.category}",
                confidence=self.confidence,
            )
            for course in matching[: self.max_recommendations]
        ]

    def adapt(self, content: str, user: User) -> str:
        return adapt_content(content, user.learning_style, user.skill_level)

    def assemble_learning_path(
        self, user: User, courses: List[Course], recommendations: List[Recommendation]
    ) -> LearningPath:
        """Build the path from already computed ``recommendations``."""
        recommended_ids = {rec.course_id for rec in recommendations}
        path_courses = [course for course in courses if course.id in recommended_ids]
        now = self.clock()

        return LearningPath(
            id=f"path-{user.id}-{int(now.timestamp() * 1000)}",
            user_id=user.id,
            courses=path_courses,
            current_course=path_courses[0].id if path_courses else None,
            estimated_completion=now + timedelta(days=self.days_per_course * len(path_courses)),
        )

    def build_learning_path(self, user: User, courses: List[Course]) -> LearningPath:
        return self.assemble_learning_path(user, courses, self.recommend(user, courses))


class RecommendationService:
    """Entry point used by the API: remote service first, local rules otherwise.

    A failure of the remote service is never surfaced; the local engine
    answers instead.
    """

    def __init__(
        self,
        engine: RecommendationEngine | None = None,
        client: RemoteRecommendationClient | None = None,
    ):
        self.engine = engine or RecommendationEngine()
        self.client = client

    def generate_recommendations(self, user: User, courses: List[Course]) -> List[Recommendation]:
        if self.client is not None:
            try:
                return self.client.fetch_recommendations(user, courses)
            except RecommendationServiceError as exc:
                logger.warning("Service de recommandation indisponible, calcul local: %s", exc)
        return self.engine.recommend(user, courses)

    def adapt_content(self, content: str, learning_style: LearningStyle, skill_level: SkillLevel) -> str:
        """Adapt ``content``; a remote failure returns it unmodified."""
        if self.client is None:
            return adapt_content(content, learning_style, skill_level)
        try:
            return self.client.adapt_content(content, learning_style, skill_level)
        except RecommendationServiceError as exc:
            logger.warning("Adaptation distante indisponible, contenu original renvoyé: %s", exc)
            return content

    def generate_learning_path(self, user: User, courses: List[Course]) -> LearningPath:
        recommendations = self.generate_recommendations(user, courses)
        return self.engine.assemble_learning_path(user, courses, recommendations)


def build_recommendation_service() -> RecommendationService:
    """Wire the service from settings (remote client only when configured)."""
    client = None
    if settings.RECOMMENDATION_SERVICE_URL:
        client = RemoteRecommendationClient(
            settings.RECOMMENDATION_SERVICE_URL,
            timeout=settings.RECOMMENDATION_SERVICE_TIMEOUT_SECONDS,
        )
    return RecommendationService(RecommendationEngine(), client)
