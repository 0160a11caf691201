from __future__ import annotations
import logging
import os

_DEFAULT_MAX_DEPTH = 256
_DEFAULT_LOG_LEVEL = 'WARNING'

# Numbers live in the signed 32-bit domain.
INT_BITS = 32
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def get_max_depth() -> int:
    raw = os.environ.get('SCHEMELET_MAX_DEPTH')
    if not raw:
        return _DEFAULT_MAX_DEPTH
    try:
        depth = int(raw.strip())
    except ValueError:
        depth = 0
    if depth <= 0:
        raise ValueError(f'SCHEMELET_MAX_DEPTH must be a positive integer, got {raw!r}')
    return depth


def get_log_level() -> int:
    name = os.environ.get('SCHEMELET_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = getattr(logging, name, None)
    if isinstance(level, int):
        return level
    return logging.WARNING
