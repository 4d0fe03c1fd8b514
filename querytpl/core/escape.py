"""
Escaping collaborators for the query builder.

The builder only needs ``escape(str) -> str``; ``ConnectionEscaper`` adapts a
pymysql connection to that. ``connect_mysql`` opens such a connection from
settings. No queries are ever executed here.
"""

import logging
from typing import Any, Protocol

import pymysql

from querytpl.core.config import settings

_log = logging.getLogger(__name__)


class Escaper(Protocol):
    def escape(self, value: str) -> str: ...


class ConnectionEscaper:
    """Escapes strings with a live DB-API connection's ``escape_string``."""

    def __init__(self, conn: Any) -> None:
        self._conn = conn

    def escape(self, value: str) -> str:
        return self._conn.escape_string(value)


def connect_mysql(
    *,
    host: str | None = None,
    port: int | None = None,
    user: str | None = None,
    password: str | None = None,
    database: str | None = None,
) -> Any:
    """
    Open a pymysql connection. Arguments default to the ``MYSQL_*`` settings.
    """
    host = host or settings.MYSQL_HOST
    user = user or settings.MYSQL_USER
    database = database or settings.MYSQL_DATABASE
    for name, val in [
        ("host", host),
        ("user", user),
        ("database", database),
    ]:
        if val is None:
            raise ValueError(f"MySQL connection requires {name} (set MYSQL_{name.upper()})")
    port = port or settings.MYSQL_PORT
    password = password if password is not None else settings.MYSQL_PASSWORD

    _log.info("Connecting to MySQL %s:%s/%s", host, port, database)
    return pymysql.connect(
        host=host,
        port=int(port),
        database=database,
        user=user,
        password=password,
        connect_timeout=settings.EXTERNAL_DB_CONNECT_TIMEOUT,
    )
