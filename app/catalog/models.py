from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# Ensure module models are imported so Base.metadata includes their tables.
# (Kept at bottom to avoid circular imports.)
from app.catalog.modules.persons.models import Person  # noqa: E402,F401
from app.catalog.modules.genres.models import Genre  # noqa: E402,F401
