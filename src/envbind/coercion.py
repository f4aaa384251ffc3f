"""
Leaf kinds and scalar coercion.

A leaf is bound according to its declared type when one is known,
falling back to the type of the value currently stored in it.

Supported kinds:
    - str  → raw value, unchanged
    - int  → base-10 signed 64-bit integer
    - bool → 1/t/T/TRUE/true/True or 0/f/F/FALSE/false/False

Anything else (float, dict, Optional[...], callables, ...) is unsupported.
"""

import re
from enum import Enum
from typing import Any, Optional, Union

from envbind.errors import CoercionError


class LeafKind(Enum):
    """Scalar kinds the binder can assign from an environment string."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"


_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1

_BOOL_VALUES = {
    "1": True, "t": True, "T": True, "TRUE": True, "true": True, "True": True,
    "0": False, "f": False, "F": False, "FALSE": False, "false": False, "False": False,
}


def _effective_type(annotation: Any, value: Any) -> Any:
    if annotation is None or annotation is Any:
        return type(value)
    # NewType("Port", int) binds as its supertype
    while hasattr(annotation, "__supertype__"):
        annotation = annotation.__supertype__
    return annotation


def leaf_kind(annotation: Any, value: Any) -> Optional[LeafKind]:
    """Return the LeafKind for a slot, or None when the kind is unsupported."""
    target = _effective_type(annotation, value)
    # identity checks: bool must never be treated as int
    if target is bool:
        return LeafKind.BOOL
    if target is int:
        return LeafKind.INT
    if target is str:
        return LeafKind.STRING
    return None


def kind_name(annotation: Any, value: Any) -> str:
    """Human-readable kind of a slot, used in errors and inventories."""
    kind = leaf_kind(annotation, value)
    if kind is not None:
        return kind.value
    target = _effective_type(annotation, value)
    return getattr(target, "__name__", None) or repr(target)


def parse_int(raw: str) -> int:
    """Parse a base-10 signed 64-bit integer, rejecting whitespace and underscores."""
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f'parsing "{raw}": invalid syntax')
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f'parsing "{raw}": value out of range')
    return value


def parse_bool(raw: str) -> bool:
    """Parse one of the conventional boolean spellings."""
    try:
        return _BOOL_VALUES[raw]
    except KeyError:
        raise ValueError(f'parsing "{raw}": invalid syntax') from None


def coerce(kind: LeafKind, key: str, raw: str) -> Union[str, int, bool]:
    """
    Convert a raw environment value to `kind`.

    Args:
        kind: Target leaf kind
        key: Environment key the value came from (for error reporting)
        raw: Raw environment value

    Returns:
        The converted value

    Raises:
        CoercionError: If `raw` is not a valid `kind` literal
    """
    if kind is LeafKind.STRING:
        return raw
    parser = parse_int if kind is LeafKind.INT else parse_bool
    try:
        return parser(raw)
    except ValueError as exc:
        raise CoercionError(key, kind.value, exc) from exc


__all__ = ["LeafKind", "leaf_kind", "kind_name", "parse_int", "parse_bool", "coerce"]
