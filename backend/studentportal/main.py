"""
Point d'entrée principal de l'API Student Portal.
Démarrage : uvicorn studentportal.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import studentportal.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata
from studentportal.config import settings
from studentportal.database import create_tables
from studentportal.logging_config import generate_request_id, request_id_var, setup_logging
from studentportal.routers import forms, students
from studentportal.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : journalisation puis tables SQLite si demandé."""
    setup_logging()
    if settings.AUTO_CREATE_TABLES and settings.DATABASE_URL.startswith("sqlite"):
        logger.info("SQLite détecté — création directe des tables.")
        create_tables()
    yield


app = FastAPI(
    title="Student Portal API",
    description="API de gestion des élèves : ajout, liste, modification, suppression",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS — autorise tous les ports localhost en développement (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", REQUEST_ID_HEADER],
    expose_headers=[REQUEST_ID_HEADER],
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Attribue un identifiant à chaque requête (repris de l'en-tête s'il est fourni)."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
    request.state.request_id = request_id
    token = request_id_var.set(request_id)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


app.include_router(students.router)
app.include_router(forms.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées (erreurs de base de données comprises)
    et renvoie une page d'erreur générique portant l'identifiant de requête.
    """
    # Ce handler s'exécute hors du middleware : le contexte de la requête est déjà réinitialisé.
    request_id = getattr(request.state, "request_id", None) or generate_request_id()
    logger.error("Exception non gérée (requête %s) : %s", request_id, exc, exc_info=True)
    body = ErrorResponse(detail="Une erreur interne est survenue.", request_id=request_id)
    return JSONResponse(
        status_code=500,
        content=body.model_dump(),
        headers={REQUEST_ID_HEADER: request_id},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Student Portal API", "version": "0.1.0"}
