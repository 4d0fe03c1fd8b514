"""
Errors raised while building a query from a template.

All errors derive from ``QueryBuildError`` (a ``ValueError``) so callers can
catch template and argument problems in one place. Nothing is partially
applied: any error aborts the whole ``build_query`` call.
"""

from __future__ import annotations


class QueryBuildError(ValueError):
    """Base class for template and argument errors."""

    pass


# ---------------------------------------------------------------------------
# Block grammar
# ---------------------------------------------------------------------------


class BlockError(QueryBuildError):
    """Malformed conditional block (``{ ... }``)."""

    pass


class UnbalancedBlockError(BlockError):
    """Open and close braces do not pair up."""

    def __init__(self, opened: int, closed: int) -> None:
        self.opened = opened
        self.closed = closed
        super().__init__(
            f"Unbalanced conditional block: {opened} '{{' vs {closed} '}}'"
        )


class NestedBlockNotAllowedError(BlockError):
    """A conditional block contains another conditional block."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"Nested conditional block at offset {offset}")


class SkipOutsideBlockError(BlockError):
    """The skip sentinel was bound to a placeholder outside any block."""

    def __init__(self) -> None:
        super().__init__("skip() can only be used inside a conditional block")


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------


class ArgumentError(QueryBuildError):
    """An argument cannot be bound to its placeholder.

    ``position`` is the 0-based ordinal of the placeholder, set by the
    resolver once the error leaves the converter.
    """

    position: int | None = None


class MissingArgumentError(ArgumentError):
    def __init__(self, expected: int, given: int) -> None:
        self.expected = expected
        self.given = given
        super().__init__(
            f"Template has {expected} placeholder(s) but only {given} argument(s) given"
        )


class TypeMismatchError(ArgumentError):
    """Typed placeholder (``?d``, ``?f``, ``?#``) got a value of the wrong shape."""

    def __init__(self, expected: str, value: object) -> None:
        self.expected = expected
        self.value = value
        super().__init__(f"Expected {expected}, got {type(value).__name__}: {value!r}")


class UnsupportedTypeError(ArgumentError):
    def __init__(self, value: object, allowed: tuple[str, ...]) -> None:
        self.value = value
        super().__init__(
            f"Unsupported type {type(value).__name__}; expected one of: {', '.join(allowed)}"
        )


class ConversionFailedError(ArgumentError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Could not convert value: {value!r}")


class NotAnArrayError(ArgumentError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Expected an array, got {type(value).__name__}")


class MixedArrayShapeError(ArgumentError):
    def __init__(self) -> None:
        super().__init__("Expected an associative array: some keys are not strings")


class HeterogeneousArrayError(ArgumentError):
    def __init__(self, first: type, other: type) -> None:
        self.first = first
        self.other = other
        super().__init__(
            f"Array elements must share one type: {first.__name__} and {other.__name__}"
        )
