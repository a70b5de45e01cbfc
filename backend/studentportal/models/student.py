"""
Modèle SQLAlchemy pour la table students.
La colonne subscribed est ajoutée par la migration 002.
"""

import uuid
from sqlalchemy import Boolean, Column, String, Uuid, false

from studentportal.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    subscribed = Column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f"<Student {self.id} {self.name!r}>"
