"""
querytpl: build SQL from templates with typed ``?`` placeholders and
``{ }`` conditional blocks.
"""

from querytpl.core import ConnectionEscaper, Escaper, connect_mysql, settings
from querytpl.engines.query import (
    SKIP,
    ArgumentError,
    BlockError,
    ConversionFailedError,
    HeterogeneousArrayError,
    MissingArgumentError,
    MixedArrayShapeError,
    NestedBlockNotAllowedError,
    NotAnArrayError,
    PlaceholderKind,
    QueryBuilder,
    QueryBuildError,
    SkipOutsideBlockError,
    SkipType,
    TypeMismatchError,
    UnbalancedBlockError,
    UnsupportedTypeError,
    build_query,
    parse_placeholders,
    skip,
)

__all__ = [
    "QueryBuilder",
    "build_query",
    "parse_placeholders",
    "PlaceholderKind",
    "SKIP",
    "SkipType",
    "skip",
    "Escaper",
    "ConnectionEscaper",
    "connect_mysql",
    "settings",
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
