from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


def path_from_env(var: str) -> Optional[Path]:
    raw = os.environ.get(var, "").strip()
    return Path(raw) if raw else None


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_recursion_limit() -> Optional[int]:
    """Python recursion limit requested via ETA_RECURSION_LIMIT, if any."""
    return int_from_env('ETA_RECURSION_LIMIT')


def get_prelude_path() -> Optional[Path]:
    """Prelude source file requested via ETA_PRELUDE_PATH, if any."""
    path = path_from_env('ETA_PRELUDE_PATH')
    if path is not None and not path.is_file():
        raise ValueError(f"ETA_PRELUDE_PATH must name an existing file, got {str(path)!r}")
    return path
