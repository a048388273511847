from __future__ import annotations

from app.catalog.handlers import EntityConfig, entity_blueprint
from app.catalog.modules.persons.models import Person

PERSONS = EntityConfig(
    key="persons",
    model=Person,
    name_attr="full_name",
    label="Person",
    list_title="Gestion des Musiciens",
    print_title="Liste des Personnes",
    found_title="Personne(s) trouvée(s)",
    name_heading="Full name",
)

bp = entity_blueprint(PERSONS)
