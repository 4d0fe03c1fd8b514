"""
Conditional blocks: ``{ ... }`` fragments that disappear when skipped.

Grammar (one level only)::

    template := (text | block)*
    block    := "{" text* "}"

``parse_blocks`` validates the grammar and builds the fragment tree;
``resolve_blocks`` renders it, dropping every block that holds a skip marker
and keeping the interior of the others without the braces.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple, Union

from querytpl.engines.query.errors import (
    NestedBlockNotAllowedError,
    SkipOutsideBlockError,
    UnbalancedBlockError,
)
from querytpl.engines.query.scanner import (
    BlockClose,
    BlockOpen,
    Placeholder,
    SkipMarker,
    Text,
    Token,
)

Leaf = Union[Text, SkipMarker]


class Block(NamedTuple):
    start: int
    children: tuple[Leaf, ...]

    @property
    def skipped(self) -> bool:
        return any(isinstance(child, SkipMarker) for child in self.children)

    def interior(self) -> str:
        return "".join(child.value for child in self.children if isinstance(child, Text))


Node = Union[Text, SkipMarker, Block]


def check_balance(tokens: Sequence[Token]) -> None:
    opened = sum(1 for tok in tokens if isinstance(tok, BlockOpen))
    closed = sum(1 for tok in tokens if isinstance(tok, BlockClose))
    if opened != closed:
        raise UnbalancedBlockError(opened, closed)


class _BlockParser:
    """Recursive-descent parser over resolved tokens."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._opened = sum(1 for tok in tokens if isinstance(tok, BlockOpen))
        self._closed = sum(1 for tok in tokens if isinstance(tok, BlockClose))

    def parse(self) -> list[Node]:
        nodes: list[Node] = []
        while self._pos < len(self._tokens):
            tok = self._tokens[self._pos]
            self._pos += 1
            if isinstance(tok, BlockOpen):
                nodes.append(self._block(tok))
            elif isinstance(tok, BlockClose):
                # close brace with no open block
                raise UnbalancedBlockError(self._opened, self._closed)
            else:
                nodes.append(self._leaf(tok))
        return nodes

    def _block(self, opener: BlockOpen) -> Block:
        children: list[Leaf] = []
        while self._pos < len(self._tokens):
            tok = self._tokens[self._pos]
            self._pos += 1
            if isinstance(tok, BlockClose):
                return Block(opener.start, tuple(children))
            if isinstance(tok, BlockOpen):
                raise NestedBlockNotAllowedError(tok.start)
            children.append(self._leaf(tok))
        raise UnbalancedBlockError(self._opened, self._closed)

    @staticmethod
    def _leaf(tok: Token) -> Leaf:
        if isinstance(tok, Placeholder):
            raise TypeError(f"Unresolved placeholder {tok.kind.value!r} at offset {tok.start}")
        return tok  # type: ignore[return-value]


def parse_blocks(tokens: Sequence[Token]) -> list[Node]:
    """Validate block grammar and return the fragment tree.

    Raises ``UnbalancedBlockError`` or ``NestedBlockNotAllowedError``.
    Balance is checked first, so ``"{a"`` is always reported as unbalanced.
    """
    check_balance(tokens)
    return _BlockParser(tokens).parse()


def resolve_blocks(nodes: Sequence[Node]) -> str:
    """Render the fragment tree to the final query text."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Block):
            if not node.skipped:
                parts.append(node.interior())
        elif isinstance(node, SkipMarker):
            raise SkipOutsideBlockError()
        else:
            parts.append(node.value)
    return "".join(parts)
