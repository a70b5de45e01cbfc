"""
Configuration de la journalisation.
Chaque ligne de log porte l'identifiant de la requête HTTP en cours.
"""

import logging
import uuid
from contextvars import ContextVar

from studentportal.config import settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


class RequestIdFilter(logging.Filter):
    """Injecte l'identifiant de requête courant dans chaque enregistrement."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class RequestIdHandler(logging.StreamHandler):
    """Handler de sortie standard de l'application."""


def setup_logging() -> None:
    """
    Configure le logger racine (niveau LOG_LEVEL, sortie standard).
    Les handlers déjà installés (uvicorn --log-config, pytest) sont conservés.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    if any(isinstance(h, RequestIdHandler) for h in root_logger.handlers):
        return

    handler = RequestIdHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    root_logger.addHandler(handler)


def generate_request_id() -> str:
    return uuid.uuid4().hex
