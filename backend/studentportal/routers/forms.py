"""
Router des formulaires élèves (actions Add / List / Edit / Delete).

Les champs de formulaire arrivent non typés : ils sont décodés explicitement
via les schémas Pydantic, une erreur de validation donne une réponse 422.
Edit et Delete redirigent (303) vers la liste une fois traités.
"""

import uuid
from typing import List, Optional, Type

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from studentportal.config import settings
from studentportal.database import get_db
from studentportal.schemas.student import StudentCreate, StudentEdit, StudentResponse
from studentportal.services import student_service

router = APIRouter(prefix="/students", tags=["Formulaires élèves"])


def _decode_form(schema: Type[BaseModel], **fields: Optional[str]) -> BaseModel:
    """Construit le schéma à partir des champs soumis. Les champs absents sont omis."""
    submitted = {key: value for key, value in fields.items() if value is not None}
    try:
        return schema.model_validate(submitted)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())


def _redirect_to_list(request: Request) -> RedirectResponse:
    return RedirectResponse(url=request.url_for("list_students_page"), status_code=303)


@router.post("/add", response_model=StudentResponse, status_code=201, summary="Ajouter un élève")
def add_student(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    subscribed: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    """Ajoute un élève et renvoie l'élève créé en confirmation."""
    data = _decode_form(StudentCreate, name=name, email=email, phone=phone, subscribed=subscribed)
    return student_service.create_student(db, data)


@router.get("/list", response_model=List[StudentResponse], name="list_students_page", summary="Liste des élèves")
def list_students(db: Session = Depends(get_db)):
    return student_service.list_students(db)


@router.get("/edit/{student_id}", response_model=StudentResponse, summary="Élève à modifier")
def edit_student_form(student_id: uuid.UUID, db: Session = Depends(get_db)):
    student = student_service.get_student(db, student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return student


@router.post("/edit", status_code=303, summary="Enregistrer la modification d'un élève")
def edit_student(
    request: Request,
    id: Optional[str] = Form(None),
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    subscribed: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    data = _decode_form(StudentEdit, id=id, name=name, email=email, phone=phone, subscribed=subscribed)
    student = student_service.update_student(db, data.id, data)
    if student is None and settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return _redirect_to_list(request)


@router.post("/delete", status_code=303, summary="Supprimer un élève")
def delete_student(
    request: Request,
    id: uuid.UUID = Form(...),
    db: Session = Depends(get_db),
):
    """Seul le champ id est lu, les autres champs soumis sont ignorés."""
    deleted = student_service.delete_student(db, id)
    if not deleted and settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return _redirect_to_list(request)
