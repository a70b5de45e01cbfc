"""
Schémas Pydantic pour les élèves.
Décodage explicite des formulaires et des corps JSON avant toute création d'entité.
Les valeurs sont enregistrées telles que saisies : pas de strip ni de normalisation.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Longueurs des colonnes de la table students
NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 50


class StudentBase(BaseModel):
    name: str = Field(max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH)
    phone: Optional[str] = Field(default=None, max_length=PHONE_MAX_LENGTH)
    subscribed: bool = False

    @field_validator("name", "email")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v

    @field_validator("phone")
    @classmethod
    def blank_phone_to_none(cls, v: Optional[str]) -> Optional[str]:
        # Un champ de formulaire laissé vide arrive sous forme de chaîne vide
        if v is None or not v.strip():
            return None
        return v


class StudentCreate(StudentBase):
    """Schéma d'ajout d'un élève (POST /students)."""


class StudentUpdate(StudentBase):
    """Schéma de modification d'un élève : tous les champs sauf l'id sont écrasés."""


class StudentEdit(StudentUpdate):
    """Formulaire de modification : l'id voyage dans le corps, pas dans l'URL."""
    id: uuid.UUID


class StudentResponse(BaseModel):
    """Schéma de réponse pour un élève."""
    id: uuid.UUID
    name: str
    email: str
    phone: Optional[str]
    subscribed: bool

    model_config = {"from_attributes": True}
