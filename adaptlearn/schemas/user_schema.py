# Fichier: adaptlearn/schemas/user_schema.py
import enum
from typing import List, Optional

from pydantic import EmailStr, Field

from adaptlearn.schemas.base_schema import CamelModel
from adaptlearn.schemas.progress_schema import Progress


class LearningStyle(str, enum.Enum):
    VISUAL = "visual"
    AUDITORY = "auditory"
    KINESTHETIC = "kinesthetic"
    READING = "reading"


class SkillLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# --- Schéma de Base ---
# Préférences d'apprentissage partagées par les autres schémas.
class UserBase(CamelModel):
    name: str
    email: EmailStr
    learning_style: LearningStyle
    skill_level: SkillLevel
    interests: List[str] = Field(default_factory=list)


# --- Schéma de connexion ---
# La connexion est locale: le formulaire crée un nouvel utilisateur.
class LoginRequest(UserBase):
    pass


# --- Schéma pour la Mise à Jour du profil ---
class UserUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    learning_style: Optional[LearningStyle] = None
    skill_level: Optional[SkillLevel] = None
    interests: Optional[List[str]] = None


# --- Utilisateur tel qu'il est stocké ---
# ``progress`` est une copie dénormalisée, la source de vérité reste
# la section ``progress`` du document.
class User(UserBase):
    id: str
    progress: List[Progress] = Field(default_factory=list)
