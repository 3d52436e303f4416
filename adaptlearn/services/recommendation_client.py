"""HTTP client for an external recommendation service.

The remote service speaks the same contract as the local engine:

* ``POST /recommendations`` with ``{"user": ..., "courses": [...]}`` returns
  a list of recommendations;
* ``POST /adapt-content`` with ``{"content", "learningStyle", "skillLevel"}``
  returns ``{"adaptedContent": ...}``.
"""

from __future__ import annotations

import logging
from typing import List

import requests
from pydantic import TypeAdapter, ValidationError

from adaptlearn.schemas.course_schema import Course
from adaptlearn.schemas.learning_schema import (
    AdaptContentRequest,
    AdaptContentResponse,
    Recommendation,
    RecommendationRequest,
)
from adaptlearn.schemas.user_schema import LearningStyle, SkillLevel, User

logger = logging.getLogger(__name__)

_RECOMMENDATIONS = TypeAdapter(List[Recommendation])


class RecommendationServiceError(Exception):
    """Raised when the remote service cannot produce a valid answer."""


class RemoteRecommendationClient:
    def __init__(self, base_url: str, timeout: float = 5.0, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _post(self, path: str, payload: dict) -> object:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            raise RecommendationServiceError(f"{url}: {exc}") from exc

    def fetch_recommendations(self, user: User, courses: List[Course]) -> List[Recommendation]:
        request = RecommendationRequest(user=user, courses=courses)
        data = self._post("/recommendations", request.to_document())
        try:
            recommendations = _RECOMMENDATIONS.validate_python(data)
        except ValidationError as exc:
            raise RecommendationServiceError(f"invalid recommendations payload: {exc.error_count()} error(s)") from exc
        logger.info("%s recommandation(s) reçue(s) du service distant.", len(recommendations))
        return recommendations

    def adapt_content(self, content: str, learning_style: LearningStyle, skill_level: SkillLevel) -> str:
        request = AdaptContentRequest(content=content, learning_style=learning_style, skill_level=skill_level)
        data = self._post("/adapt-content", request.to_document())
        try:
            return AdaptContentResponse.model_validate(data).adapted_content
        except ValidationError as exc:
            raise RecommendationServiceError(f"invalid adaptation payload: {exc.error_count()} error(s)") from exc
