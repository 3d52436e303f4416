"""Assemble the learner dashboard: catalogue, progress and stats, recommendations, path."""

import logging
from typing import List, Optional

from adaptlearn.schemas.course_schema import Course
from adaptlearn.schemas.learning_schema import LearningSnapshot, Recommendation
from adaptlearn.schemas.user_schema import User
from adaptlearn.services.data_service import DataService
from adaptlearn.services.progress_service import ProgressService
from adaptlearn.services.recommendation_service import RecommendationService

logger = logging.getLogger(__name__)


def recommended_courses(courses: List[Course], recommendations: List[Recommendation]) -> List[Course]:
    """Catalogue entries that were recommended, in catalogue order."""
    recommended_ids = {rec.course_id for rec in recommendations}
    return [course for course in courses if course.id in recommended_ids]


class LearningService:
    def __init__(self, data_service: DataService, recommendation_service: RecommendationService):
        self.data_service = data_service
        self.recommendation_service = recommendation_service

    def progress_tracker(self, user: Optional[User], courses: Optional[List[Course]] = None) -> ProgressService:
        return ProgressService(self.data_service, user=user, courses=courses)

    def load(self, user: Optional[User]) -> LearningSnapshot:
        """Load everything for ``user``; only the catalogue without a user.

        A failure while assembling is logged and the partially filled
        snapshot is returned.
        """
        snapshot = LearningSnapshot()
        try:
            snapshot.courses = self.data_service.get_courses()
            if user is None:
                return snapshot

            tracker = self.progress_tracker(user, snapshot.courses)
            snapshot.progress = list(tracker.progress)
            snapshot.enrolled_count = len(tracker.enrolled_courses())
            snapshot.average_progress = tracker.average_progress()
            snapshot.completed_count = tracker.completed_courses_count()
            snapshot.hours_learned = tracker.hours_learned()

            snapshot.recommendations = self.recommendation_service.generate_recommendations(
                user, snapshot.courses
            )
            snapshot.recommended_courses = recommended_courses(snapshot.courses, snapshot.recommendations)
            snapshot.learning_path = self.recommendation_service.generate_learning_path(
                user, snapshot.courses
            )
        except Exception:
            logger.exception("Failed to load learning data")
        return snapshot
