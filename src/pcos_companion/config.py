"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass, field

ENV_PREFIX = "PCOS_COMPANION_"


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(ENV_PREFIX + name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Server and logging settings."""

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    seed_content: bool = True


def get_settings() -> Settings:
    """Build settings from PCOS_COMPANION_* environment variables."""
    origins = _env("CORS_ORIGINS", "*")
    return Settings(
        host=_env("HOST", "127.0.0.1"),
        port=int(_env("PORT", "8000")),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        seed_content=_env_bool("SEED_CONTENT", True),
    )
