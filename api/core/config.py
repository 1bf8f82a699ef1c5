"""
Environment-driven settings.

Values come from the process environment, optionally seeded from a local
`.env` file. Variables already set in the environment win over the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_CORS_ORIGIN = "http://localhost:3000"
DEFAULT_PORT = 8080


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class DatabaseSettings:
    host: str
    port: int
    user: str
    password: str
    name: str


def env_file_path() -> str:
    """
    `ENV_FILE` if set, otherwise the nearest `.env` at or above the working directory.
    """
    explicit = os.environ.get("ENV_FILE", "").strip()
    if explicit:
        return explicit
    return find_dotenv(usecwd=True)


def load_env_file(path: str | None = None) -> bool:
    """
    Seed os.environ from a `.env` file. Returns False when no file was found.
    """
    path = path or env_file_path()
    if not path or not os.path.isfile(path):
        return False
    load_dotenv(dotenv_path=path, override=False)
    return True


def require_env_file() -> str:
    path = env_file_path()
    if not load_env_file(path):
        raise ConfigError(f"Error loading .env file ({path or 'none found'}).")
    return path


def _required(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise ConfigError(f"{name} is not set.")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_settings() -> DatabaseSettings:
    raw_port = _required("DB_PORT")
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise ConfigError(f"DB_PORT must be an integer, got {raw_port!r}.") from exc

    return DatabaseSettings(
        host=_required("DB_HOST"),
        port=port,
        user=_required("DB_USER"),
        # Empty passwords are legal for trust-auth local databases.
        password=os.environ.get("DB_PASSWORD", ""),
        name=_required("DB_NAME"),
    )


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def cors_origin() -> str:
    return os.environ.get("CORS_ORIGIN", DEFAULT_CORS_ORIGIN).strip() or DEFAULT_CORS_ORIGIN


def listen_port() -> int:
    return _env_int("PORT", DEFAULT_PORT)
