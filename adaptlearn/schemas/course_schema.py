"""Schémas Pydantic du catalogue de cours."""
import enum
from typing import List

from pydantic import Field

from adaptlearn.schemas.base_schema import CamelModel
from adaptlearn.schemas.user_schema import SkillLevel


class ModuleType(str, enum.Enum):
    VIDEO = "video"
    TEXT = "text"
    INTERACTIVE = "interactive"
    QUIZ = "quiz"


class Module(CamelModel):
    """Atomic unit of course content."""

    id: str
    title: str
    content: str = ""
    type: ModuleType
    duration: int = 0
    completed: bool = False


class Course(CamelModel):
    id: str
    title: str
    description: str = ""
    category: str
    difficulty: SkillLevel
    duration: int = 0  # en minutes
    modules: List[Module] = Field(default_factory=list)
    prerequisites: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    def find_module(self, module_id: str) -> Module | None:
        return next((module for module in self.modules if module.id == module_id), None)
