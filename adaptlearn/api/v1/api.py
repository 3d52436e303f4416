# Fichier: adaptlearn/api/v1/api.py
from fastapi import APIRouter
from .endpoints import (
    auth_router,
    course_router,
    progress_router,
    learning_router,
)

api_router = APIRouter()

api_router.include_router(auth_router.router, prefix="/auth", tags=["Auth"])
api_router.include_router(course_router.router, prefix="/courses", tags=["Courses"])
api_router.include_router(progress_router.router, prefix="/progress", tags=["Progress"])
api_router.include_router(learning_router.router, prefix="/learning", tags=["Learning"])
