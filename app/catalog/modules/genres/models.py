from __future__ import annotations

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.catalog.models import Base


class Genre(Base):
    __tablename__ = "genres"
    __table_args__ = (
        Index("idx_genres_name", "name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Genre id={self.id} name={self.name!r}>"
