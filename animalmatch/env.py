import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .logger import LOG_LEVELS
from .matching.scoring import FIRST_MATCH_BONUS
from .storage import DEFAULT_CATALOG_PATH


def load_env(env_path: Optional[Path] = None) -> None:
    """Load .env from the working directory if present.
    Values already set in the environment win over the file.
    """
    if env_path is None:
        env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


@dataclass
class Settings:
    catalog_path: Path = DEFAULT_CATALOG_PATH
    bonus: int = FIRST_MATCH_BONUS
    log_level: str = "WARNING"
    log_dir: Optional[Path] = None


def _int_from_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}")


def _log_level_from_env(key: str, default: str) -> str:
    level = os.getenv(key, default).strip().upper() or default
    if level not in LOG_LEVELS:
        raise ValueError(f"{key} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def load_settings() -> Settings:
    """Read ANIMALMATCH_* variables into a Settings object."""
    catalog = os.getenv("ANIMALMATCH_CATALOG")
    log_dir = os.getenv("ANIMALMATCH_LOG_DIR")
    return Settings(
        catalog_path=Path(catalog) if catalog else DEFAULT_CATALOG_PATH,
        bonus=_int_from_env("ANIMALMATCH_BONUS", FIRST_MATCH_BONUS),
        log_level=_log_level_from_env("ANIMALMATCH_LOG_LEVEL", "WARNING"),
        log_dir=Path(log_dir) if log_dir else None,
    )
