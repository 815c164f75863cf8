from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return os.pathsep


# Defaults
_DEFAULT_PRELUDE_FILES: List[Path] = []
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_prelude_files() -> List[Path]:
    return paths_from_env('CURRYLISP_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def get_recursion_limit() -> int:
    raw = os.environ.get('CURRYLISP_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 100)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT


def lenient_unbound() -> bool:
    # Root lookup misses yield NIL instead of raising
    return flag_from_env('CURRYLISP_LENIENT_UNBOUND')


def get_log_level() -> int:
    name = os.environ.get('CURRYLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
