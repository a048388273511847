from __future__ import annotations

import logging
from typing import Any

from flask import Flask, current_app
from jinja2 import TemplateError

from app.catalog.errors import RenderError

logger = logging.getLogger(__name__)


class ViewRenderer:
    """Renders named templates from the app's Jinja environment. Stateless after startup."""

    def __init__(self, app: Flask):
        self.app = app

    def render(self, template_name: str, context: dict[str, Any] | None = None) -> str:
        ctx = dict(context or {})
        try:
            # Same context processors as flask.render_template (request, g, url_for...).
            self.app.update_template_context(ctx)
            template = self.app.jinja_env.get_or_select_template(template_name)
            return template.render(ctx)
        except TemplateError as e:
            logger.error("Template %s failed to render: %s", template_name, e)
            raise RenderError(template_name) from e


def get_renderer() -> ViewRenderer:
    return current_app.extensions["view_renderer"]
