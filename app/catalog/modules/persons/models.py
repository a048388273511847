from __future__ import annotations

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.catalog.models import Base


class Person(Base):
    __tablename__ = "persons"
    __table_args__ = (
        Index("idx_persons_full_name", "full_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Not unique: two musicians may share a name.
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Person id={self.id} full_name={self.full_name!r}>"
