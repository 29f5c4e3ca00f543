"""Settings loaded from environment variables (+ optional .env).

One Settings object for server and client. Variables use the ``TASKBOARD_``
prefix; ``PORT`` and ``DATABASE_URL`` are also read unprefixed because
hosting platforms set them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD_"

STORE_BACKENDS = ("sqlite", "mongo", "memory")


def _env(*names: str, default: str = "") -> str:
    """First non-blank value among ``names``, stripped."""
    for name in names:
        value = os.getenv(name, "").strip()
        if value:
            return value
    return default


def _setting(suffix: str, default: str = "") -> str:
    return _env(ENV_PREFIX + suffix, default=default)


def _parse_port(raw: str, default: int) -> int:
    return int(raw) if raw.isdigit() else default


def _split_origins(raw: str) -> list[str]:
    return [origin for origin in raw.replace(",", " ").split() if origin]


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- HTTP server ----
    host: str
    port: int
    allowed_origins: list[str]

    # ---- Persistence ----
    store: str
    db_path: Path
    mongo_url: str
    mongo_db: str

    # ---- Logging ----
    log_level: str
    log_dir: Path | None

    # ---- Client ----
    api_url: str

    @staticmethod
    def from_env() -> "Settings":
        port = _parse_port(_env(ENV_PREFIX + "PORT", "PORT"), 5050)

        store = _setting("STORE", "sqlite").lower()
        if store not in STORE_BACKENDS:
            raise ValueError(
                f"{ENV_PREFIX}STORE must be one of {', '.join(STORE_BACKENDS)}, got {store!r}"
            )

        data_dir = Path(_setting("DATA_DIR", ".local/taskboard")).expanduser()
        db_path = _setting("DB_PATH")
        log_dir = _setting("LOG_DIR")

        return Settings(
            host=_setting("HOST", "0.0.0.0"),
            port=port,
            allowed_origins=_split_origins(_setting("ALLOWED_ORIGINS", "http://localhost:5173")),
            store=store,
            db_path=Path(db_path).expanduser() if db_path else data_dir / "tasks.sqlite3",
            mongo_url=_env(
                ENV_PREFIX + "MONGO_URL", "DATABASE_URL", default="mongodb://localhost:27017"
            ),
            mongo_db=_setting("MONGO_DB", "taskboard"),
            log_level=_setting("LOG_LEVEL", "INFO").upper(),
            log_dir=Path(log_dir).expanduser() if log_dir else None,
            api_url=_setting("API_URL", f"http://localhost:{port}").rstrip("/"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
