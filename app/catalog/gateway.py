from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.catalog.errors import NotFound, PersistenceError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityGateway(Generic[T]):
    """
    CRUD over any mapped class shaped as "integer id + one text name column".

    Each call is a single statement; callers commit through commit() so a
    failed commit is reported the same way as a failed statement.
    """

    def __init__(self, s: "Session", model: type[T], name_attr: str):
        self.s = s
        self.model = model
        self.name_attr = name_attr

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    @property
    def name_column(self) -> Any:
        return getattr(self.model, self.name_attr)

    def _run(self, op: Callable[[], Any]) -> Any:
        try:
            return op()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.exception("%s store operation failed", self.entity_name)
            raise PersistenceError(f"{self.entity_name}: {e}") from e

    def _ordered(self, stmt):
        # id breaks ties between equal names so the order is deterministic.
        return stmt.order_by(self.name_column.asc(), self.model.id.asc())  # type: ignore[attr-defined]

    def list_all(self) -> list[T]:
        stmt = self._ordered(select(self.model))
        return self._run(lambda: list(self.s.scalars(stmt).all()))

    def find_by_substring(self, needle: str) -> list[T]:
        # autoescape: % and _ in the needle match literally.
        stmt = self._ordered(
            select(self.model).where(self.name_column.contains(needle, autoescape=True))
        )
        return self._run(lambda: list(self.s.scalars(stmt).all()))

    def get(self, entity_id: int) -> T:
        obj = self._run(lambda: self.s.get(self.model, entity_id))
        if obj is None:
            raise NotFound(self.entity_name, entity_id)
        return obj

    def create(self, name: str) -> T:
        obj = self.model(**{self.name_attr: name})

        def _insert() -> T:
            self.s.add(obj)
            self.s.flush()
            return obj

        return self._run(_insert)

    def update(self, entity_id: int, name: str) -> T:
        obj = self.get(entity_id)

        def _write() -> T:
            setattr(obj, self.name_attr, name)
            self.s.flush()
            return obj

        return self._run(_write)

    def delete(self, entity_id: int) -> None:
        obj = self.get(entity_id)

        def _remove() -> None:
            self.s.delete(obj)
            self.s.flush()

        self._run(_remove)

    def commit(self) -> None:
        self._run(self.s.commit)
