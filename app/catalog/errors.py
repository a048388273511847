from __future__ import annotations


class CatalogError(RuntimeError):
    pass


class NotFound(CatalogError):
    """A store operation addressed an id that does not exist."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class PersistenceError(CatalogError):
    """The store was unreachable or rejected the statement."""


class RenderError(CatalogError):
    def __init__(self, template_name: str):
        super().__init__(f"Template error in {template_name}")
        self.template_name = template_name


class DecodeError(CatalogError):
    """Flash cookie present but unparseable. Never leaves flash.take()."""
