"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données (SQLite par défaut en local, PostgreSQL en production)
    DATABASE_URL: str = "sqlite:///./students.db"

    # Crée les tables depuis les modèles au démarrage (SQLite uniquement).
    # En production, passer par les migrations Alembic.
    AUTO_CREATE_TABLES: bool = True

    # Modification / suppression d'un id inconnu : no-op silencieux par défaut,
    # 404 si activé.
    STRICT_NOT_FOUND: bool = False

    # Journalisation
    LOG_LEVEL: str = "INFO"

    # Environnement
    ENV: str = "development"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
