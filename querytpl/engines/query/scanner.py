"""
Tokenizer for query templates.

A template is literal text with typed placeholders (``?d``, ``?f``, ``?a``,
``?#`` and the bare ``?``) and conditional blocks delimited by ``{`` and
``}``. One left-to-right pass turns it into a flat token list; the number of
placeholders is fixed by that pass and converted argument text is never
rescanned.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Union

BLOCK_START = "{"
BLOCK_END = "}"
PLACEHOLDER_MARK = "?"


class PlaceholderKind(str, Enum):
    """Placeholder kinds, valued by their template token."""

    INT = "?d"
    FLOAT = "?f"
    ARRAY = "?a"
    IDENTIFIER = "?#"
    AUTO = "?"


# Typed tokens are two characters long and win over the bare "?".
_TYPED_KINDS: dict[str, PlaceholderKind] = {
    kind.value[1]: kind for kind in PlaceholderKind if kind is not PlaceholderKind.AUTO
}


class Text(NamedTuple):
    value: str
    start: int


class Placeholder(NamedTuple):
    kind: PlaceholderKind
    start: int
    ordinal: int


class BlockOpen(NamedTuple):
    start: int


class BlockClose(NamedTuple):
    start: int


class SkipMarker(NamedTuple):
    """Stands in for a placeholder whose argument was ``SKIP``."""

    start: int


Token = Union[Text, Placeholder, BlockOpen, BlockClose, SkipMarker]


class PlaceholderMatch(NamedTuple):
    kind: PlaceholderKind
    start: int
    end: int


def _match_placeholder(template: str, i: int) -> PlaceholderKind:
    """Longest match at ``template[i] == "?"``."""
    nxt = template[i + 1 : i + 2]
    return _TYPED_KINDS.get(nxt, PlaceholderKind.AUTO)


def tokenize(template: str) -> list[Token]:
    """Split *template* into text, placeholder and block delimiter tokens."""
    tokens: list[Token] = []
    buf_start = 0
    ordinal = 0
    i = 0
    length = len(template)

    def flush(end: int) -> None:
        if end > buf_start:
            tokens.append(Text(template[buf_start:end], buf_start))

    while i < length:
        ch = template[i]
        if ch == PLACEHOLDER_MARK:
            flush(i)
            kind = _match_placeholder(template, i)
            tokens.append(Placeholder(kind, i, ordinal))
            ordinal += 1
            i += len(kind.value)
            buf_start = i
            continue
        if ch == BLOCK_START or ch == BLOCK_END:
            flush(i)
            tokens.append(BlockOpen(i) if ch == BLOCK_START else BlockClose(i))
            i += 1
            buf_start = i
            continue
        i += 1

    flush(length)
    return tokens


def scan_placeholders(template: str) -> list[PlaceholderMatch]:
    """Return every placeholder in *template*, left to right."""
    return [
        PlaceholderMatch(tok.kind, tok.start, tok.start + len(tok.kind.value))
        for tok in tokenize(template)
        if isinstance(tok, Placeholder)
    ]
