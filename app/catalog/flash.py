"""
One-shot flash notices carried in a signed cookie.

A mutation handler builds a FlashMessage, attaches it to its redirect
response with FlashNotifier.set(), and the next GET reads it back with
FlashNotifier.take(). Reading schedules deletion of the cookie on that
GET's response, so a reload never shows the same notice twice.

Nothing is kept server-side; the cookie is signed with SECRET_KEY so a
client cannot forge notices, but it is not encrypted.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from flask import Flask, Request, Response, after_this_request, current_app
from itsdangerous import BadData, URLSafeSerializer

from app.catalog.errors import DecodeError

logger = logging.getLogger(__name__)

_SALT = "catalog.flash"


@dataclass(frozen=True)
class FlashMessage:
    kind: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": self.message}

    @classmethod
    def from_dict(cls, data: Any) -> "FlashMessage":
        if not isinstance(data, dict):
            raise DecodeError("flash payload is not an object")
        kind = data.get("kind")
        message = data.get("message")
        if not isinstance(kind, str) or not isinstance(message, str):
            raise DecodeError("flash payload is missing kind/message")
        return cls(kind=kind, message=message)


def success(message: str) -> FlashMessage:
    return FlashMessage(kind="success", message=message)


def danger(message: str) -> FlashMessage:
    return FlashMessage(kind="danger", message=message)


class FlashNotifier:
    def __init__(
        self,
        secret_key: str,
        *,
        cookie_name: str = "_flash",
        secure: bool = False,
        samesite: str = "Lax",
    ):
        self.cookie_name = cookie_name
        self.secure = secure
        self.samesite = samesite
        self._serializer = URLSafeSerializer(secret_key, salt=_SALT)

    @classmethod
    def from_app(cls, app: Flask) -> "FlashNotifier":
        return cls(
            app.config["SECRET_KEY"],
            cookie_name=app.config.get("FLASH_COOKIE_NAME") or "_flash",
            secure=bool(app.config.get("FLASH_COOKIE_SECURE")),
            samesite=app.config.get("FLASH_COOKIE_SAMESITE") or "Lax",
        )

    def encode(self, data: FlashMessage) -> str:
        return self._serializer.dumps(data.to_dict())

    def decode(self, value: str) -> FlashMessage:
        try:
            payload = self._serializer.loads(value)
        except BadData as e:
            raise DecodeError(str(e)) from e
        return FlashMessage.from_dict(payload)

    def set(self, response: Response, data: FlashMessage) -> Response:
        """Attach `data` to `response`, replacing any flash cookie already set on it."""
        prefix = f"{self.cookie_name}="
        others = [h for h in response.headers.getlist("Set-Cookie") if not h.startswith(prefix)]
        response.headers.setlist("Set-Cookie", others)
        response.set_cookie(
            self.cookie_name,
            self.encode(data),
            path="/",
            httponly=True,
            secure=self.secure,
            samesite=self.samesite,
        )
        return response

    def take(self, req: Request) -> FlashMessage | None:
        """
        Read the flash cookie once.

        The cookie is cleared on the current response whether or not it
        decodes; an unreadable cookie counts as no notice.
        """
        raw = req.cookies.get(self.cookie_name)
        if raw is None:
            return None

        @after_this_request
        def _clear_flash_cookie(response: Response) -> Response:
            response.delete_cookie(
                self.cookie_name,
                path="/",
                httponly=True,
                secure=self.secure,
                samesite=self.samesite,
            )
            return response

        try:
            return self.decode(raw)
        except DecodeError as e:
            logger.debug("Ignoring unreadable flash cookie: %s", e)
            return None


def get_notifier() -> FlashNotifier:
    return current_app.extensions["flash_notifier"]
