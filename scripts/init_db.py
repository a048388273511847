"""
Create the catalog tables and optionally seed a few sample rows.

Usage:
  python scripts/init_db.py            # tables only
  python scripts/init_db.py --seed     # tables + sample persons/genres
"""
from __future__ import annotations

import argparse
import os
import sys
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session, sessionmaker

# Ensure repo root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.catalog.models import Base, Genre, Person  # noqa: E402

SAMPLE_PERSONS = ("Django Reinhardt", "Nina Simone", "Miles Davis")
SAMPLE_GENRES = ("Jazz manouche", "Blues", "Bebop")


@contextmanager
def _session_scope(database_url: str):
    engine = create_engine(database_url, future=True, pool_pre_ping=True)
    Base.metadata.create_all(bind=engine)
    sm = sessionmaker(bind=engine, class_=Session, autoflush=False, autocommit=False, expire_on_commit=False, future=True)
    s: Session = sm()
    try:
        yield s
        s.commit()
    except Exception:
        s.rollback()
        raise
    finally:
        s.close()
        engine.dispose()


def _database_url(database_url: str | None) -> str:
    return (database_url or os.environ.get("DATABASE_URL") or "sqlite:///catalog.db").strip()


def create_tables(*, database_url: str | None = None) -> None:
    with _session_scope(_database_url(database_url)):
        pass
    print("Tables created (create_all).")


def seed_samples(*, database_url: str | None = None) -> int:
    """
    Insert sample rows that are not already present (matched by name).
    Returns the number of rows inserted.
    """
    inserted = 0
    with _session_scope(_database_url(database_url)) as s:
        existing_persons = set(s.scalars(select(Person.full_name)).all())
        for full_name in SAMPLE_PERSONS:
            if full_name not in existing_persons:
                s.add(Person(full_name=full_name))
                inserted += 1
        existing_genres = set(s.scalars(select(Genre.name)).all())
        for name in SAMPLE_GENRES:
            if name not in existing_genres:
                s.add(Genre(name=name))
                inserted += 1
    print(f"Seeded {inserted} sample row(s).")
    return inserted


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create catalog tables.")
    parser.add_argument("--seed", action="store_true", help="insert sample persons and genres")
    args = parser.parse_args(argv)

    create_tables()
    if args.seed:
        seed_samples()


if __name__ == "__main__":
    main()
