"""Déclare l'ensemble des modèles SQLAlchemy pour la création du schéma."""

from adaptlearn.db.base_class import Base

# Stockage clé/valeur du document applicatif
from adaptlearn.models.storage_model import StorageEntry

__all__ = (
    "Base",
    "StorageEntry",
)
