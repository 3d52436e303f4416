import logging
import math
from datetime import datetime, timezone
from typing import Callable, List, Optional

from adaptlearn.schemas.course_schema import Course
from adaptlearn.schemas.progress_schema import Progress
from adaptlearn.schemas.user_schema import User
from adaptlearn.services.data_service import DataService

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ProgressService:
    """Suivi de progression d'un apprenant sur le catalogue chargé.

    ``courses`` is the in-memory catalogue: completing a module flips its
    ``completed`` flag there, the catalogue itself is never persisted.
    Without a ``user`` every write is a no-op and nothing counts as enrolled.
    """

    def __init__(
        self,
        data_service: DataService,
        user: Optional[User] = None,
        courses: Optional[List[Course]] = None,
        clock: Callable[[], datetime] = _now,
    ):
        self.data_service = data_service
        self.user = user
        self.courses = courses if courses is not None else data_service.get_courses()
        self.progress: List[Progress] = data_service.get_user_progress(user.id) if user else []
        self.clock = clock

    def _find_course(self, course_id: str) -> Optional[Course]:
        return next((course for course in self.courses if course.id == course_id), None)

    def _store(self, progress: Progress) -> None:
        self.data_service.save_progress(progress)
        self.progress = [entry for entry in self.progress if entry.key != progress.key]
        self.progress.append(progress)

    # -----------------------------
    # Écritures
    # -----------------------------

    def record_completion(self, course_id: str, module_id: str, score: Optional[float] = None) -> None:
        """Upsert the (course, module) record and mark the module completed."""
        if self.user is None:
            logger.debug("Complétion ignorée: aucun utilisateur connecté.")
            return

        self._store(
            Progress(
                course_id=course_id,
                module_id=module_id,
                completed_at=self.clock(),
                score=score,
                time_spent=0,
            )
        )

        course = self._find_course(course_id)
        module = course.find_module(module_id) if course else None
        if module is not None:
            module.completed = True

        logger.info("Utilisateur %s: module %s/%s terminé.", self.user.id, course_id, module_id)

    def enroll_in_course(self, course_id: str) -> None:
        """Enrol by recording the course's first module."""
        if self.user is None:
            return

        course = self._find_course(course_id)
        if course is None or not course.modules:
            return

        self._store(
            Progress(
                course_id=course_id,
                module_id=course.modules[0].id,
                completed_at=self.clock(),
                time_spent=0,
            )
        )
        logger.info("Utilisateur %s inscrit au cours %s.", self.user.id, course_id)

    # -----------------------------
    # Lectures
    # -----------------------------

    def course_progress(self, course_id: str) -> float:
        """Percentage of the course's modules with a progress record, unrounded.

        Not capped: records for module ids missing from the catalogue can push
        it above 100.
        """
        course = self._find_course(course_id)
        if course is None or not course.modules:
            return 0

        completed = sum(1 for entry in self.progress if entry.course_id == course_id)
        return completed / len(course.modules) * 100

    def enrolled_courses(self) -> List[Course]:
        """Courses with at least one progress record, in catalogue order."""
        if self.user is None:
            return []

        enrolled_ids = {entry.course_id for entry in self.progress}
        return [course for course in self.courses if course.id in enrolled_ids]

    # -----------------------------
    # Statistiques du tableau de bord
    # -----------------------------

    def average_progress(self) -> int:
        """Mean progress over enrolled courses, rounded half up; 0 when none."""
        enrolled = self.enrolled_courses()
        if not enrolled:
            return 0
        total = sum(self.course_progress(course.id) for course in enrolled)
        return math.floor(total / len(enrolled) + 0.5)

    def completed_courses_count(self) -> int:
        """Enrolled courses at exactly 100%."""
        return sum(1 for course in self.enrolled_courses() if self.course_progress(course.id) == 100)

    def hours_learned(self) -> int:
        """Whole hours of catalogue duration across enrolled courses."""
        return math.floor(sum(course.duration / 60 for course in self.enrolled_courses()))
