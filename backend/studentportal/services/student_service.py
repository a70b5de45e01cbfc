"""
Service métier pour la gestion des élèves : ajout, liste, modification, suppression.

Chaque opération fait un aller-retour vers la base et un seul commit.
Aucun cache en mémoire. Les erreurs SQLAlchemy ne sont pas interceptées ici.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from studentportal.models.student import Student
from studentportal.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


def create_student(db: Session, data: StudentCreate) -> Student:
    """Crée un élève. L'id est généré à l'insertion. Aucun contrôle de doublon sur l'email."""
    student = Student(
        name=data.name,
        email=data.email,
        phone=data.phone,
        subscribed=data.subscribed,
    )
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info("Élève créé : %s", student.id)
    return student


def list_students(db: Session) -> list[Student]:
    """Retourne tous les élèves, dans l'ordre naturel de la base."""
    return list(db.execute(select(Student)).scalars().all())


def get_student(db: Session, student_id: uuid.UUID) -> Optional[Student]:
    """Retourne un élève par son ID, ou None si inexistant."""
    return db.get(Student, student_id)


def update_student(db: Session, student_id: uuid.UUID, data: StudentUpdate) -> Optional[Student]:
    """
    Écrase tous les champs modifiables d'un élève (l'id ne change jamais).
    Retourne None sans rien écrire si l'élève est introuvable.
    """
    student = db.get(Student, student_id)
    if student is None:
        logger.info("Modification ignorée : élève %s introuvable", student_id)
        return None

    student.name = data.name
    student.email = data.email
    student.phone = data.phone
    student.subscribed = data.subscribed

    db.commit()
    db.refresh(student)
    logger.info("Élève modifié : %s", student_id)
    return student


def delete_student(db: Session, student_id: uuid.UUID) -> bool:
    """Supprime définitivement un élève. Retourne True si supprimé, False si introuvable."""
    student = db.get(Student, student_id)
    if student is None:
        logger.info("Suppression ignorée : élève %s introuvable", student_id)
        return False

    db.delete(student)
    db.commit()
    logger.info("Élève supprimé : %s", student_id)
    return True
