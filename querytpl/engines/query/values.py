"""
Skip sentinel for conditional blocks.

Passing ``SKIP`` as an argument drops the ``{ ... }`` block that contains its
placeholder. It is a singleton of its own type, so no string, number or
collection argument can ever be mistaken for it.
"""

from __future__ import annotations

from typing import Any, Final


class SkipType:
    """Type of the ``SKIP`` singleton."""

    _instance: SkipType | None = None

    def __new__(cls) -> SkipType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"

    def __reduce__(self) -> str:
        return "SKIP"


SKIP: Final = SkipType()


def skip() -> SkipType:
    """Return the sentinel that removes the enclosing conditional block."""
    return SKIP


def is_skip(value: Any) -> bool:
    return isinstance(value, SkipType)
