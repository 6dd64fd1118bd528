import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    LOG_LEVEL: str = os.getenv("SCHEMARULES_LOG_LEVEL", "WARNING")
    STRICT_RULES: bool = _env_flag("SCHEMARULES_STRICT_RULES")
    CHECK_SCHEMA: bool = _env_flag("SCHEMARULES_CHECK_SCHEMA")


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler for applications embedding the library."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(levelname)s | %(name)s | %(message)s",
    )
