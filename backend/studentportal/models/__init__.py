# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant create_all() et l'autogénération Alembic.

from studentportal.models.student import Student  # noqa: F401
