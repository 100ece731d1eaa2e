"""
hostinfo.db
AUTHOR: carter-vin

Remote libSQL access: one client per run, one INSERT.

Failure semantics:
- client creation problems (bad scheme, malformed URL) -> DatabaseConnectError
- anything raised while executing the insert -> InsertError
- no retries, no transaction wrapper; the single statement is its own unit
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import libsql_client

from hostinfo.config import AgentConfig
from hostinfo.errors import DatabaseConnectError, InsertError
from hostinfo.model import INFO_COLUMNS, InfoRow

INSERT_INFO_SQL = (
    f"INSERT INTO info ({', '.join(INFO_COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in INFO_COLUMNS)})"
)


@asynccontextmanager
async def connect(config: AgentConfig) -> AsyncIterator[libsql_client.Client]:
    """
    Open the remote client, close it when the run is over

    The libSQL client talks to the server lazily, so network and auth errors
    only show up on the first statement.
    """
    try:
        client = libsql_client.create_client(
            config.libsql_url,
            # Empty token means anonymous access
            auth_token=config.libsql_auth_token or None,
        )
    except (libsql_client.LibsqlError, ValueError) as e:
        raise DatabaseConnectError(f"cannot connect to {config.libsql_url!r}: {e}") from e

    async with client:
        yield client


async def insert_info(client: libsql_client.Client, row: InfoRow) -> None:
    """
    Write one row into `info`
    """
    try:
        await client.execute(INSERT_INFO_SQL, row.to_params())
    except Exception as e:
        raise InsertError(f"insert into info failed: {e}") from e
