"""
Query builder: template + positional args -> final SQL string.

Pipeline (fixed order)::

    tokenize -> bind args to placeholders -> validate blocks
             -> resolve blocks -> escape

Escaping is delegated to an injected ``Escaper`` (e.g. a MySQL connection
wrapped in ``ConnectionEscaper``). In test mode the resolved string is
returned as is, so no database is needed.

The builder keeps no per-call state; one instance can be shared between
threads.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, cast

from querytpl.core.config import settings
from querytpl.core.escape import Escaper
from querytpl.engines.query.blocks import parse_blocks, resolve_blocks
from querytpl.engines.query.errors import QueryBuildError
from querytpl.engines.query.resolver import resolve_placeholders
from querytpl.engines.query.scanner import tokenize
from querytpl.engines.query.values import SkipType, skip

_log = logging.getLogger(__name__)


class QueryBuilder:
    """Builds SQL from ``?``-placeholder templates with ``{ }`` conditional blocks."""

    def __init__(
        self,
        escaper: Escaper | None = None,
        *,
        test_mode: bool | None = None,
    ) -> None:
        self._test_mode = settings.QUERY_TEST_MODE if test_mode is None else test_mode
        if not self._test_mode and escaper is None:
            raise ValueError("escaper is required when test_mode is off")
        self._escaper = escaper

    @property
    def test_mode(self) -> bool:
        return self._test_mode

    def build_query(self, template: str, args: Sequence[Any] = ()) -> str:
        """Substitute *args* into *template* and resolve conditional blocks.

        With no args the template is returned unchanged.
        """
        if not args:
            return template

        try:
            tokens = resolve_placeholders(tokenize(template), args)
            query = resolve_blocks(parse_blocks(tokens))
        except QueryBuildError as e:
            _log.warning("Query build failed: %s", e)
            raise
        _log.debug("Resolved query: %s", query)
        return self._escape(query)

    def skip(self) -> SkipType:
        """Sentinel argument that drops the enclosing ``{ }`` block."""
        return skip()

    def _escape(self, query: str) -> str:
        if self._test_mode:
            return query
        return cast(Escaper, self._escaper).escape(query)


def build_query(template: str, args: Sequence[Any] = ()) -> str:
    """Build *template* with *args* without escaping (test-mode builder)."""
    return QueryBuilder(test_mode=True).build_query(template, args)
