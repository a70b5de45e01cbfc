"""
Schéma de réponse d'erreur générique (500).
"""

from typing import Optional

from pydantic import BaseModel, computed_field


class ErrorResponse(BaseModel):
    detail: str
    request_id: Optional[str] = None

    @computed_field
    @property
    def show_request_id(self) -> bool:
        """Indique si l'identifiant de requête doit être affiché à l'utilisateur."""
        return bool(self.request_id)
