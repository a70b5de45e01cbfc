"""
Configuration de la connexion à la base de données.
Utilise SQLAlchemy (PostgreSQL en production, SQLite en local).
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from studentportal.config import settings

# SQLite refuse par défaut de partager une connexion entre threads,
# or FastAPI exécute les endpoints synchrones dans un pool de threads.
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dépendance FastAPI — fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Crée les tables directement depuis les modèles (développement SQLite)."""
    Base.metadata.create_all(bind=engine)
