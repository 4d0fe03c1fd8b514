"""
Core: settings and database escaping collaborators.
"""

from .config import Settings, settings
from .escape import ConnectionEscaper, Escaper, connect_mysql

__all__ = [
    "Settings",
    "settings",
    "Escaper",
    "ConnectionEscaper",
    "connect_mysql",
]
