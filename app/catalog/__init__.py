import logging
import uuid

from flask import Flask, g, request
from dotenv import load_dotenv

from app.catalog.config import is_production, load_config
from app.catalog.db import init_db, teardown_db_session
from app.catalog.models import Base  # noqa: F401  (registers tables before module imports)
from app.catalog.errors import NotFound, PersistenceError, RenderError
from app.catalog.flash import FlashNotifier
from app.catalog.rendering import ViewRenderer, get_renderer
from app.catalog.routes import bp as routes_bp
from app.catalog.modules.persons.admin import bp as persons_bp
from app.catalog.modules.genres.admin import bp as genres_bp


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.from_mapping(load_config())
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Production guardrails (fail fast with clear logs)
    if is_production(app.config.get("ENV")):
        if not app.config.get("DATABASE_URL") or str(app.config["DATABASE_URL"]).strip() == "":
            raise RuntimeError("DATABASE_URL is required in production.")
        if not app.config.get("SECRET_KEY") or str(app.config["SECRET_KEY"]) in ("", "change-me"):
            raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")

    init_db(app)

    def _dispose_engine_on_fork() -> None:
        import os
        if hasattr(os, "register_at_fork"):
            def _after_fork_child():
                engine = app.extensions.get("sqlalchemy_engine")
                if engine:
                    engine.dispose()
                    app.logger.info("Disposed DB engine after fork (pid=%s)", os.getpid())

            os.register_at_fork(after_in_child=_after_fork_child)

    _dispose_engine_on_fork()

    app.extensions["view_renderer"] = ViewRenderer(app)
    app.extensions["flash_notifier"] = FlashNotifier.from_app(app)

    app.register_blueprint(routes_bp)
    app.register_blueprint(persons_bp)
    app.register_blueprint(genres_bp)

    @app.before_request
    def _assign_request_id():
        if not getattr(g, "request_id", None):
            g.request_id = uuid.uuid4().hex

    app.teardown_appcontext(teardown_db_session)

    def _not_found_page():
        body = get_renderer().render("errors/404.html", {"title": "Not found", "uri": request.path})
        return body, 404

    @app.errorhandler(404)
    def _err_404(e):  # type: ignore[no-redef]
        return _not_found_page()

    @app.errorhandler(NotFound)
    def _err_entity_not_found(e: NotFound):  # type: ignore[no-redef]
        app.logger.warning("%s (request_id=%s)", e, getattr(g, "request_id", None))
        return _not_found_page()

    @app.errorhandler(PersistenceError)
    def _err_persistence(e: PersistenceError):  # type: ignore[no-redef]
        app.logger.error("Store failure (request_id=%s): %s", getattr(g, "request_id", None), e)
        return get_renderer().render("errors/500.html", {"title": "Server error"}), 500

    @app.errorhandler(RenderError)
    def _err_render(e: RenderError):  # type: ignore[no-redef]
        # Templates may be what is broken, so answer in plain text.
        app.logger.error("%s (request_id=%s)", e, getattr(g, "request_id", None))
        return str(e), 500, {"Content-Type": "text/plain; charset=utf-8"}

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        rid = getattr(g, "request_id", None)
        app.logger.exception("Unhandled 500 (request_id=%s)", rid)
        return get_renderer().render("errors/500.html", {"title": "Server error"}), 500

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
