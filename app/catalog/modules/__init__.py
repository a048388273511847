"""
Entity modules live under this package.

Each module owns its model and an EntityConfig; the routes themselves come
from app.catalog.handlers so both entities behave the same way.
"""
