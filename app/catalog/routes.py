from flask import Blueprint

from app.catalog.rendering import get_renderer

bp = Blueprint("routes", __name__)


@bp.get("/")
def index():
    return get_renderer().render("public/start.html", {"title": "Start"})


@bp.get("/about")
def about():
    return get_renderer().render("public/about.html", {"title": "A propos de ..."})


@bp.get("/health")
def health():
    """Health check endpoint. Returns JSON."""
    return {"ok": True}


@bp.get("/healthz")
def healthz():
    """
    Fast health check for container probes. No DB access, minimal overhead.
    """
    return "ok", 200
