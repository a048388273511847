from __future__ import annotations

from app.catalog.handlers import EntityConfig, entity_blueprint
from app.catalog.modules.genres.models import Genre

GENRES = EntityConfig(
    key="genres",
    model=Genre,
    name_attr="name",
    label="Genre",
    list_title="Gestion des Genres",
    print_title="Liste des Genres",
    found_title="Genre(s) trouvé(s)",
)

bp = entity_blueprint(GENRES)
