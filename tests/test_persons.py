"""Tests for the Persons pages."""
import pytest

from app.catalog import create_app
from app.catalog.db import create_schema, session_scope
from app.catalog.modules.persons.models import Person


@pytest.fixture()
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")
    for k in ("LOG_LEVEL", "FLASH_COOKIE_NAME"):
        monkeypatch.delenv(k, raising=False)

    app = create_app()
    create_schema(app)
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


def _names(app):
    with session_scope(app) as s:
        return [p.full_name for p in s.query(Person).order_by(Person.id).all()]


def test_persons_list_empty(client):
    r = client.get("/persons")
    assert r.status_code == 200
    assert b"Gestion des Musiciens" in r.data
    assert b"Aucun enregistrement" in r.data


def test_person_create_shows_flash_once(app, client):
    r = client.post("/persons/add", data={"full_name": "Ada Lovelace"}, follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/persons")

    r = client.get("/persons")
    assert r.status_code == 200
    assert b"Ada Lovelace" in r.data
    assert b"Person successfully added" in r.data
    assert b"flash-success" in r.data

    # Reload: record still there, notice gone.
    r = client.get("/persons")
    assert b"Ada Lovelace" in r.data
    assert b"Person successfully added" not in r.data

    assert _names(app) == ["Ada Lovelace"]


def test_person_create_accepts_name_field(app, client):
    r = client.post("/persons/add", data={"name": "Nina Simone"}, follow_redirects=True)
    assert r.status_code == 200
    assert _names(app) == ["Nina Simone"]


def test_person_create_requires_name(app, client):
    r = client.post("/persons/add", data={"full_name": "   "}, follow_redirects=True)
    assert r.status_code == 200
    assert b"Person name is required." in r.data
    assert b"flash-danger" in r.data
    assert _names(app) == []


def test_person_update(app, client):
    client.post("/persons/add", data={"full_name": "Miles Dvis"})
    with session_scope(app) as s:
        pid = s.query(Person).one().id

    r = client.post(f"/persons/{pid}", data={"full_name": "Miles Davis"}, follow_redirects=True)
    assert r.status_code == 200
    assert b"Person successfully updated" in r.data
    assert _names(app) == ["Miles Davis"]


def test_person_update_missing_id_is_not_found(app, client):
    client.post("/persons/add", data={"full_name": "Ada Lovelace"})
    r = client.post("/persons/999", data={"full_name": "Nobody"})
    assert r.status_code == 404
    assert _names(app) == ["Ada Lovelace"]


def test_person_delete(app, client):
    client.post("/persons/add", data={"full_name": "Ada Lovelace"})
    client.post("/persons/add", data={"full_name": "Charles Babbage"})
    with session_scope(app) as s:
        pid = s.query(Person).filter(Person.full_name == "Ada Lovelace").one().id

    r = client.post(f"/persons/delete/{pid}", follow_redirects=True)
    assert r.status_code == 200
    assert b"Person successfully deleted" in r.data
    assert _names(app) == ["Charles Babbage"]


def test_persons_print_has_no_flash(client):
    client.post("/persons/add", data={"full_name": "Ada Lovelace"})
    r = client.get("/persons/print")
    assert r.status_code == 200
    assert b"Liste des Personnes" in r.data
    assert b"Ada Lovelace" in r.data
    assert b"successfully added" not in r.data

    # The print view did not consume the notice.
    r = client.get("/persons")
    assert b"Person successfully added" in r.data


def test_persons_find(client):
    for name in ("Ada Lovelace", "Alan Turing", "Grace Hopper"):
        client.post("/persons/add", data={"full_name": name})
    client.get("/persons")  # consume flash

    r = client.post("/persons/find", data={"name": "Lovelace"})
    assert r.status_code == 200
    assert "Personne(s) trouvée(s)".encode() in r.data
    assert b"Ada Lovelace" in r.data
    assert b"Alan Turing" not in r.data
    assert b"Grace Hopper" not in r.data


def test_persons_find_blank_matches_all(client):
    for name in ("Ada Lovelace", "Alan Turing"):
        client.post("/persons/add", data={"full_name": name})

    r = client.post("/persons/find", data={"name": ""})
    assert r.status_code == 200
    assert b"Ada Lovelace" in r.data
    assert b"Alan Turing" in r.data
