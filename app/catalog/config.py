import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    secret_key: str
    env: str
    database_url: str
    log_level: str
    flash_cookie_name: str
    host: str
    port: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    return Settings(
        secret_key=_getenv("SECRET_KEY", "change-me"),
        env=_getenv("ENV", "development"),
        database_url=_getenv("DATABASE_URL", "sqlite:///catalog.db"),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
        flash_cookie_name=_getenv("FLASH_COOKIE_NAME", "_flash"),
        host=_getenv("HOST", "127.0.0.1"),
        port=_getenv("PORT", "8080"),
    )


def is_production(env: str | None) -> bool:
    return (env or "").strip().lower() in ("prod", "production")


def load_config() -> dict:
    s = load_settings()
    return {
        "SECRET_KEY": s.secret_key,
        "ENV": s.env,
        "DATABASE_URL": s.database_url,
        "LOG_LEVEL": s.log_level,
        "HOST": s.host,
        "PORT": s.port,
        # flash cookie
        "FLASH_COOKIE_NAME": s.flash_cookie_name,
        "FLASH_COOKIE_SECURE": is_production(s.env),  # Require HTTPS in production
        "FLASH_COOKIE_SAMESITE": "Lax",
    }
