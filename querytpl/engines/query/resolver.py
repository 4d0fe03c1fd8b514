"""
Bind arguments to placeholders.

Arguments are consumed strictly in order, one per placeholder, left to right.
Each placeholder token becomes a ``Text`` token with the converted SQL, or a
``SkipMarker`` when the argument is ``SKIP``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any

from querytpl.engines.query.converters import convert
from querytpl.engines.query.errors import ArgumentError, MissingArgumentError
from querytpl.engines.query.scanner import Placeholder, SkipMarker, Text, Token
from querytpl.engines.query.values import is_skip


def resolve_placeholders(tokens: Sequence[Token], args: Sequence[Any]) -> list[Token]:
    """Return *tokens* with every placeholder replaced by its bound value."""
    expected = sum(1 for tok in tokens if isinstance(tok, Placeholder))
    if expected > len(args):
        raise MissingArgumentError(expected, len(args))

    pending = deque(args)
    out: list[Token] = []
    for tok in tokens:
        if not isinstance(tok, Placeholder):
            out.append(tok)
            continue
        value = pending.popleft()
        if is_skip(value):
            out.append(SkipMarker(tok.start))
            continue
        try:
            out.append(Text(convert(tok.kind, value), tok.start))
        except ArgumentError as e:
            e.position = tok.ordinal
            raise
    return out
