"""
Router JSON pour les élèves.
Liste        (GET    /api/v1/students)
Consultation (GET    /api/v1/students/{id})
Création     (POST   /api/v1/students)
Mise à jour  (PUT    /api/v1/students/{id})
Suppression  (DELETE /api/v1/students/{id})
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from studentportal.config import settings
from studentportal.database import get_db
from studentportal.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from studentportal.services import student_service

router = APIRouter(prefix="/api/v1/students", tags=["Élèves"])

NOT_FOUND_DETAIL = "Élève introuvable."


@router.get("", response_model=List[StudentResponse], summary="Lister tous les élèves")
def list_students(db: Session = Depends(get_db)):
    """Retourne tous les élèves, sans filtre ni pagination."""
    return student_service.list_students(db)


@router.get("/{student_id}", response_model=StudentResponse, summary="Consulter un élève")
def get_student(student_id: uuid.UUID, db: Session = Depends(get_db)):
    student = student_service.get_student(db, student_id)
    if student is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    return student


@router.post("", response_model=StudentResponse, status_code=201, summary="Créer un élève")
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    return student_service.create_student(db, data)


@router.put(
    "/{student_id}",
    response_model=StudentResponse,
    responses={204: {"description": "Élève introuvable, aucune modification"}},
    summary="Modifier un élève",
)
def update_student(student_id: uuid.UUID, data: StudentUpdate, db: Session = Depends(get_db)):
    """
    Écrase tous les champs d'un élève.
    Id inconnu : 204 sans modification, ou 404 si STRICT_NOT_FOUND est activé.
    """
    student = student_service.update_student(db, student_id, data)
    if student is None:
        if settings.STRICT_NOT_FOUND:
            raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
        return Response(status_code=204)
    return student


@router.delete("/{student_id}", status_code=204, summary="Supprimer un élève")
def delete_student(student_id: uuid.UUID, db: Session = Depends(get_db)):
    """Supprime définitivement un élève. Id inconnu : no-op, ou 404 si STRICT_NOT_FOUND."""
    deleted = student_service.delete_student(db, student_id)
    if not deleted and settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    return Response(status_code=204)
