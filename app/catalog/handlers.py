"""
Shared list/create/update/delete/print/find handlers.

Persons and genres have the same shape (id + one name column), so each
module describes itself with an EntityConfig and gets its blueprint from
entity_blueprint().
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from flask import Blueprint, redirect, request, url_for

from app.catalog.db import db_session
from app.catalog.flash import FlashMessage, danger, get_notifier, success
from app.catalog.gateway import EntityGateway
from app.catalog.rendering import get_renderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityConfig:
    key: str  # URL prefix and blueprint name, e.g. "persons"
    model: type
    name_attr: str  # mapped column holding the name
    label: str  # used in flash texts, e.g. "Person"
    list_title: str
    print_title: str
    found_title: str
    list_template: str = "entities/list.html"
    print_template: str = "entities/print.html"
    name_heading: str = "Name"

    @property
    def form_fields(self) -> tuple[str, ...]:
        # The edit forms post the column name; "name" is accepted everywhere.
        if self.name_attr == "name":
            return ("name",)
        return (self.name_attr, "name")


def _gateway(config: EntityConfig) -> EntityGateway:
    return EntityGateway(db_session(), config.model, config.name_attr)


def _form_name(config: EntityConfig) -> str:
    for field in config.form_fields:
        value = request.form.get(field)
        if value is not None:
            return value.strip()
    return ""


def _render_list(config: EntityConfig, template: str, title: str, records: list, flash: FlashMessage | None = None) -> str:
    ctx: dict[str, Any] = {
        "title": title,
        "entity": config,
        "records": records,
        config.key: records,
    }
    if flash is not None:
        ctx["flash"] = flash.to_dict()
    return get_renderer().render(template, ctx)


def _redirect_with_flash(config: EntityConfig, data: FlashMessage):
    response = redirect(url_for(f"{config.key}.list_view"))
    get_notifier().set(response, data)
    return response


def entity_blueprint(config: EntityConfig) -> Blueprint:
    bp = Blueprint(config.key, __name__)

    # ---------- List ----------
    @bp.get(f"/{config.key}")
    def list_view():
        flash = get_notifier().take(request)
        records = _gateway(config).list_all()
        return _render_list(config, config.list_template, config.list_title, records, flash)

    # ---------- Print ----------
    @bp.get(f"/{config.key}/print")
    def print_view():
        records = _gateway(config).list_all()
        return _render_list(config, config.print_template, config.print_title, records)

    # ---------- Find ----------
    @bp.post(f"/{config.key}/find")
    def find_view():
        needle = request.form.get("name") or ""
        logger.debug("%s find name=%r", config.key, needle)
        records = _gateway(config).find_by_substring(needle)
        return _render_list(config, config.list_template, config.found_title, records)

    # ---------- Create ----------
    @bp.post(f"/{config.key}/add")
    def create_view():
        name = _form_name(config)
        if not name:
            return _redirect_with_flash(config, danger(f"{config.label} name is required."))

        gw = _gateway(config)
        obj = gw.create(name)
        gw.commit()
        logger.info("%s created id=%s", config.label, obj.id)
        return _redirect_with_flash(config, success(f"{config.label} successfully added"))

    # ---------- Update ----------
    @bp.post(f"/{config.key}/<int:entity_id>")
    def update_view(entity_id: int):
        name = _form_name(config)
        if not name:
            return _redirect_with_flash(config, danger(f"{config.label} name is required."))

        gw = _gateway(config)
        gw.update(entity_id, name)
        gw.commit()
        logger.info("%s updated id=%s", config.label, entity_id)
        return _redirect_with_flash(config, success(f"{config.label} successfully updated"))

    # ---------- Delete ----------
    @bp.post(f"/{config.key}/delete/<int:entity_id>")
    def delete_view(entity_id: int):
        gw = _gateway(config)
        gw.delete(entity_id)
        gw.commit()
        logger.info("%s deleted id=%s", config.label, entity_id)
        return _redirect_with_flash(config, success(f"{config.label} successfully deleted"))

    return bp
