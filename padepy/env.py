"""Parsing of the ``PADEPY_*`` environment variables.

Invalid values never raise: an unreadable setting falls back to its default,
since these variables are typically set once in a shell profile and read on
every kernel call.
"""

from __future__ import annotations

import os

BACKEND_NAMES = ("numpy", "numba", "cuda")

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _raw(name: str) -> str:
    return os.environ.get(name, "").strip()


def parse_bool_env(name: str, *, default: bool) -> bool:
    """Read a switch such as ``PADEPY_DOMAIN_CHECK``.

    ``1/true/yes/on`` enable it and ``0/false/no/off`` disable it (case
    insensitive); anything else, including an empty value, gives ``default``.
    """

    value = _raw(name).lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def parse_int_env(name: str, *, default: int, minimum: int = 1) -> int:
    """Read a size such as ``PADEPY_PARALLEL_THRESHOLD``, clipped to ``minimum``."""

    try:
        value = int(_raw(name))
    except ValueError:
        return default
    return max(minimum, value)


def normalize_backend(value: str, *, default: str = "numba") -> str:
    """Map a backend selector to one of :data:`BACKEND_NAMES`, else ``default``."""

    value = value.strip().lower()
    return value if value in BACKEND_NAMES else default
