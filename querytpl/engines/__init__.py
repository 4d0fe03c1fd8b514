"""
Engines: query template engine (placeholders + conditional blocks).
"""

from querytpl.engines.query import QueryBuilder, build_query, parse_placeholders, skip

__all__ = [
    "QueryBuilder",
    "build_query",
    "parse_placeholders",
    "skip",
]
