from pathlib import Path
from typing import List

from .normalize import normalize_candidate

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "animals.txt"


class CatalogUnavailable(Exception):
    """Raised when the candidate catalog cannot be read."""
    pass


def parse_catalog(text: str) -> List[str]:
    """Split a newline-delimited catalog into lower-cased, non-empty candidate lines."""
    candidates: List[str] = []
    for line in text.splitlines():
        candidate = normalize_candidate(line)
        if candidate:
            candidates.append(candidate)
    return candidates


def load_catalog(path: Path = DEFAULT_CATALOG_PATH) -> List[str]:
    if not path.exists():
        raise CatalogUnavailable(f"Catalog not found: {path}")
    if not path.is_file():
        raise CatalogUnavailable(f"Catalog is not a file: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogUnavailable(f"Catalog unreadable: {path} ({e})") from e
    return parse_catalog(content)
