from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from adaptlearn.api.v1.dependencies import get_data_service
from adaptlearn.schemas.course_schema import Course
from adaptlearn.services.data_service import DataService

router = APIRouter()


@router.get("", response_model=List[Course], summary="Lister le catalogue")
def list_courses(data_service: DataService = Depends(get_data_service)) -> List[Course]:
    return data_service.get_courses()


@router.get("/{course_id}", response_model=Course, summary="Détail d'un cours")
def read_course(course_id: str, data_service: DataService = Depends(get_data_service)) -> Course:
    course = data_service.get_course(course_id)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cours introuvable")
    return course
