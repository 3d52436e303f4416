"""Connexion locale et profil de l'apprenant."""
from fastapi import APIRouter, Depends, HTTPException, status

from adaptlearn.api.v1.dependencies import get_current_user, get_data_service
from adaptlearn.schemas.user_schema import LoginRequest, User, UserUpdate
from adaptlearn.services.auth_service import AuthService
from adaptlearn.services.data_service import DataService

router = APIRouter()


@router.post("/login", response_model=User, summary="Se connecter (crée le profil local)")
def login(
    payload: LoginRequest,
    data_service: DataService = Depends(get_data_service),
) -> User:
    return AuthService(data_service).login(payload)


@router.post("/logout", response_model=dict, summary="Se déconnecter")
def logout(data_service: DataService = Depends(get_data_service)) -> dict:
    AuthService(data_service).logout()
    return {"status": "success"}


@router.get("/me", response_model=User, summary="Utilisateur courant")
def read_current_user(current_user: User = Depends(get_current_user)) -> User:
    return current_user


@router.patch("/me", response_model=User, summary="Mettre à jour le profil")
def update_current_user(
    updates: UserUpdate,
    data_service: DataService = Depends(get_data_service),
) -> User:
    user = AuthService(data_service).update_user(updates)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="not_authenticated")
    return user
