"""Settings read from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/contactbook/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    env: str = ""
    default_region: str | None = None
    log_level: int = logging.INFO


def _load_dotenv(dotenv_path: Path | None) -> None:
    # Real env vars win over .env values.
    if dotenv_path is not None:
        candidates = (Path(dotenv_path),)
    else:
        candidates = (_REPO_ROOT / ".env", Path.cwd() / ".env")
    for path in candidates:
        if path.exists():
            load_dotenv(path)
            break


def load_settings(dotenv_path: str | Path | None = None) -> Settings:
    """Build Settings from ENV, CONTACTBOOK_DEFAULT_REGION and CONTACTBOOK_LOG_LEVEL.

    dotenv_path replaces the default .env lookup (repo root, then cwd).
    """
    _load_dotenv(dotenv_path)
    region = os.environ.get("CONTACTBOOK_DEFAULT_REGION", "").strip().upper() or None
    level_name = os.environ.get("CONTACTBOOK_LOG_LEVEL", "").strip().upper() or "INFO"
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name!r}")
    return Settings(
        env=os.environ.get("ENV", "").strip(),
        default_region=region,
        log_level=level,
    )
