"""
Argument converters for query placeholders.

Each converter maps one argument to its SQL text for one placeholder kind:

* ``?d`` -> ``to_int``
* ``?f`` -> ``to_float``
* ``?a`` -> ``to_array``
* ``?#`` -> ``to_identifier``
* ``?``  -> ``to_auto`` (SQL type inferred from the Python type)

Converters are pure and never escape string contents; escaping the final
query is the builder's job.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from typing import Any

from querytpl.engines.query.errors import (
    ConversionFailedError,
    HeterogeneousArrayError,
    MixedArrayShapeError,
    NotAnArrayError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from querytpl.engines.query.scanner import PlaceholderKind

SQL_NULL = "NULL"

# Types accepted by the bare "?" placeholder (None aside).
AUTO_TYPES: tuple[type, ...] = (str, int, float, bool)
_AUTO_TYPE_NAMES = ("string", "integer", "float", "boolean")

_ARRAY_TYPES: tuple[type, ...] = (list, tuple)

_DIGITS_RE = re.compile(r"[0-9]+")
# Numeric strings: optional whitespace and sign, decimal or exponent form.
_NUMERIC_RE = re.compile(
    r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*"
)


def is_digit_string(value: Any) -> bool:
    return isinstance(value, str) and _DIGITS_RE.fullmatch(value) is not None


def is_numeric_string(value: Any) -> bool:
    return isinstance(value, str) and _NUMERIC_RE.fullmatch(value) is not None


def wrap_identifier(name: str) -> str:
    return f"`{name}`"


def wrap_string(value: str) -> str:
    return f"'{value}'"


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def to_int(value: Any) -> str:
    """
    ``?d``: None -> NULL; bool -> 0/1; int or digit-only string -> integer.
    """
    if value is None:
        return SQL_NULL
    if isinstance(value, bool):
        return str(int(value))
    if is_digit_string(value):
        return value.lstrip("0") or "0"
    if isinstance(value, int):
        try:
            return str(int(value))
        except ValueError as e:
            # beyond the interpreter's int-to-str digit limit
            raise TypeMismatchError("integer", value) from e
    raise TypeMismatchError("integer", value)


def to_float(value: Any) -> str:
    """
    ``?f``: None -> NULL; finite float or numeric string -> float.

    Integers and digit-only strings belong to ``?d`` and are rejected.
    """
    if value is None:
        return SQL_NULL
    if isinstance(value, float):
        number = value
    elif is_numeric_string(value) and not is_digit_string(value):
        number = float(value)
    else:
        raise TypeMismatchError("float", value)
    if not math.isfinite(number):
        raise TypeMismatchError("float", value)
    return repr(number)


def to_auto(value: Any) -> str:
    """
    ``?``: infer the SQL type from the Python type.

    None -> NULL; non-numeric string -> quoted; bool -> 0/1;
    int or digit-only string -> ``to_int``; float or numeric string -> ``to_float``.
    """
    if value is None:
        return SQL_NULL
    if not isinstance(value, AUTO_TYPES):
        raise UnsupportedTypeError(value, _AUTO_TYPE_NAMES)
    if isinstance(value, str) and not is_numeric_string(value):
        return wrap_string(value)
    if isinstance(value, bool):
        return str(int(value))
    try:
        if isinstance(value, int) or is_digit_string(value):
            return to_int(value)
        return to_float(value)
    except TypeMismatchError as e:
        raise ConversionFailedError(value) from e


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


def _check_same_type(items: list[Any]) -> None:
    first: type | None = None
    for item in items:
        if item is None:
            continue
        if first is None:
            first = type(item)
        elif type(item) is not first:
            raise HeterogeneousArrayError(first, type(item))


def _set_order(item: Any) -> tuple[bool, Any]:
    return (item is not None, 0 if item is None else item)


def to_array(value: Any) -> str:
    """
    ``?a``: a mapping with string keys -> ```key` = value`` pairs;
    a list (or a mapping without string keys) -> comma-separated values.

    Values go through ``to_auto``. Sets have no order of their own, so their
    elements are rendered in ascending order with ``NULL`` first.
    """
    if isinstance(value, Mapping):
        keys = list(value.keys())
        str_keys = sum(1 for k in keys if isinstance(k, str))
        if keys and str_keys == len(keys):
            return ", ".join(
                f"{wrap_identifier(k)} = {to_auto(v)}" for k, v in value.items()
            )
        if str_keys:
            raise MixedArrayShapeError()
        items = list(value.values())
    elif isinstance(value, (set, frozenset)):
        _check_same_type(list(value))
        rendered = [(item, to_auto(item)) for item in value]
        rendered.sort(key=lambda pair: _set_order(pair[0]))
        return ", ".join(text for _, text in rendered)
    elif isinstance(value, _ARRAY_TYPES):
        items = list(value)
    else:
        raise NotAnArrayError(value)

    _check_same_type(items)
    return ", ".join(to_auto(item) for item in items)


def to_identifier(value: Any) -> str:
    """
    ``?#``: a name -> ```name```; a list of names -> ```a`, `b```.
    """
    if isinstance(value, str):
        return wrap_identifier(value)
    if isinstance(value, (list, tuple)):
        parts = []
        for name in value:
            if not isinstance(name, str):
                raise TypeMismatchError("identifier", name)
            parts.append(wrap_identifier(name))
        return ", ".join(parts)
    raise TypeMismatchError("identifier", value)


CONVERTERS: dict[PlaceholderKind, Callable[[Any], str]] = {
    PlaceholderKind.INT: to_int,
    PlaceholderKind.FLOAT: to_float,
    PlaceholderKind.ARRAY: to_array,
    PlaceholderKind.IDENTIFIER: to_identifier,
    PlaceholderKind.AUTO: to_auto,
}


def convert(kind: PlaceholderKind, value: Any) -> str:
    """Convert *value* for a placeholder of *kind*; raises ``ArgumentError``."""
    return CONVERTERS[kind](value)
