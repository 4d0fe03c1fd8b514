"""
Query template engine: typed ``?`` placeholders and ``{ }`` conditional blocks.

Exports: QueryBuilder, build_query, skip, parse_placeholders and the error classes.
"""

from querytpl.engines.query.builder import QueryBuilder, build_query
from querytpl.engines.query.errors import (
    ArgumentError,
    BlockError,
    ConversionFailedError,
    HeterogeneousArrayError,
    MissingArgumentError,
    MixedArrayShapeError,
    NestedBlockNotAllowedError,
    NotAnArrayError,
    QueryBuildError,
    SkipOutsideBlockError,
    TypeMismatchError,
    UnbalancedBlockError,
    UnsupportedTypeError,
)
from querytpl.engines.query.parser import parse_placeholders
from querytpl.engines.query.scanner import PlaceholderKind
from querytpl.engines.query.values import SKIP, SkipType, skip

__all__ = [
    "QueryBuilder",
    "build_query",
    "parse_placeholders",
    "PlaceholderKind",
    "SKIP",
    "SkipType",
    "skip",
    "QueryBuildError",
    "BlockError",
    "UnbalancedBlockError",
    "NestedBlockNotAllowedError",
    "SkipOutsideBlockError",
    "ArgumentError",
    "MissingArgumentError",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "ConversionFailedError",
    "NotAnArrayError",
    "MixedArrayShapeError",
    "HeterogeneousArrayError",
]
