"""Endpoints de progression de l'apprenant connecté."""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from adaptlearn.api.v1.dependencies import get_current_user, get_data_service
from adaptlearn.schemas.course_schema import Course
from adaptlearn.schemas.progress_schema import CompleteModuleRequest, CourseProgressResponse, Progress
from adaptlearn.schemas.user_schema import User
from adaptlearn.services.data_service import DataService
from adaptlearn.services.progress_service import ProgressService

router = APIRouter()


@router.get("", response_model=List[Progress], summary="Progression de l'utilisateur")
def list_progress(
    data_service: DataService = Depends(get_data_service),
    current_user: User = Depends(get_current_user),
) -> List[Progress]:
    return data_service.get_user_progress(current_user.id)


@router.get("/enrolled", response_model=List[Course], summary="Cours suivis")
def list_enrolled_courses(
    data_service: DataService = Depends(get_data_service),
    current_user: User = Depends(get_current_user),
) -> List[Course]:
    return ProgressService(data_service, user=current_user).enrolled_courses()


@router.get(
    "/courses/{course_id}",
    response_model=CourseProgressResponse,
    summary="Pourcentage d'avancement d'un cours",
)
def get_course_progress(
    course_id: str,
    data_service: DataService = Depends(get_data_service),
    current_user: User = Depends(get_current_user),
) -> CourseProgressResponse:
    service = ProgressService(data_service, user=current_user)
    return CourseProgressResponse(course_id=course_id, percentage=service.course_progress(course_id))


@router.post(
    "/courses/{course_id}/enroll",
    response_model=CourseProgressResponse,
    summary="S'inscrire à un cours",
)
def enroll_in_course(
    course_id: str,
    data_service: DataService = Depends(get_data_service),
    current_user: User = Depends(get_current_user),
) -> CourseProgressResponse:
    service = ProgressService(data_service, user=current_user)
    service.enroll_in_course(course_id)
    return CourseProgressResponse(course_id=course_id, percentage=service.course_progress(course_id))


@router.post(
    "/courses/{course_id}/modules/{module_id}/complete",
    response_model=CourseProgressResponse,
    summary="Marquer un module comme terminé",
)
def complete_module(
    course_id: str,
    module_id: str,
    payload: Optional[CompleteModuleRequest] = Body(default=None),
    data_service: DataService = Depends(get_data_service),
    current_user: User = Depends(get_current_user),
) -> CourseProgressResponse:
    service = ProgressService(data_service, user=current_user)
    service.record_completion(course_id, module_id, score=payload.score if payload else None)
    return CourseProgressResponse(course_id=course_id, percentage=service.course_progress(course_id))
