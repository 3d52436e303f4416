"""Recommendations, learning paths and content adaptation endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from adaptlearn.api.v1.dependencies import (
    get_current_user,
    get_data_service,
    get_recommendation_service,
)
from adaptlearn.schemas.learning_schema import (
    AdaptContentRequest,
    AdaptContentResponse,
    LearningPath,
    LearningSnapshot,
    Recommendation,
    RecommendationRequest,
)
from adaptlearn.schemas.user_schema import User
from adaptlearn.services.data_service import DataService
from adaptlearn.services.learning_service import LearningService
from adaptlearn.services.recommendation_service import RecommendationService

router = APIRouter()


@router.post(
    "/recommendations",
    response_model=List[Recommendation],
    summary="Recommandations pour un profil et un catalogue donnés",
)
def compute_recommendations(
    payload: RecommendationRequest,
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
) -> List[Recommendation]:
    return recommendation_service.generate_recommendations(payload.user, payload.courses)


@router.get(
    "/recommendations",
    response_model=List[Recommendation],
    summary="Recommandations de l'utilisateur connecté",
)
def get_recommendations(
    data_service: DataService = Depends(get_data_service),
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
    current_user: User = Depends(get_current_user),
) -> List[Recommendation]:
    return recommendation_service.generate_recommendations(current_user, data_service.get_courses())


@router.get("/path", response_model=LearningPath, summary="Parcours d'apprentissage")
def get_learning_path(
    data_service: DataService = Depends(get_data_service),
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
    current_user: User = Depends(get_current_user),
) -> LearningPath:
    return recommendation_service.generate_learning_path(current_user, data_service.get_courses())


@router.post("/adapt", response_model=AdaptContentResponse, summary="Adapter un contenu au profil")
def adapt_content(
    payload: AdaptContentRequest,
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
) -> AdaptContentResponse:
    adapted = recommendation_service.adapt_content(
        payload.content, payload.learning_style, payload.skill_level
    )
    return AdaptContentResponse(adapted_content=adapted)


@router.get("/dashboard", response_model=LearningSnapshot, summary="Tableau de bord complet")
def get_dashboard(
    data_service: DataService = Depends(get_data_service),
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
    current_user: User = Depends(get_current_user),
) -> LearningSnapshot:
    return LearningService(data_service, recommendation_service).load(current_user)
