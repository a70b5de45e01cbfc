"""
Configuration partagée pour tous les tests.
Override la dépendance get_db : session mockée pour les tests d'API,
base SQLite en mémoire pour les tests de service et de formulaires.
"""

import os

# Avant tout import de studentportal : aucune base fichier pendant les tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from unittest.mock import MagicMock

from studentportal.config import settings
from studentportal.database import Base, get_db
from studentportal.main import app


@pytest.fixture
def client():
    """Client HTTP de test avec la BDD mockée."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Session sur une base SQLite en mémoire, tables créées depuis les modèles."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def sqlite_client(db_session):
    """Client HTTP de test branché sur la base SQLite en mémoire."""
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def strict_not_found(monkeypatch):
    """Active le signalement 404 des ids inconnus pour la durée du test."""
    monkeypatch.setattr(settings, "STRICT_NOT_FOUND", True)
