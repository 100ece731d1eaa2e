"""
hostinfo.config
AUTHOR: carter-vin

Run configuration, built once at startup.

Sources (highest precedence first):
1) process environment
2) optional env file (KEY=value lines), searched from cwd upwards

The loader never writes into os.environ; callers get an AgentConfig and pass it on.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import dotenv_values, find_dotenv

from hostinfo.errors import ConfigError

URL_ENV = "LIBSQL_URL"
AUTH_TOKEN_ENV = "LIBSQL_AUTH_TOKEN"

DEFAULT_ENV_FILE = ".env"


@dataclass(frozen=True)
class AgentConfig:
    """
    Connection settings for the remote store.

    - libsql_url: not validated here; a bad value fails at connect time
    - libsql_auth_token: empty string means "no token"
    """

    libsql_url: str
    libsql_auth_token: str = ""


def read_env_file(env_file: Optional[str] = DEFAULT_ENV_FILE) -> dict[str, str]:
    """
    Read overrides from the env file, or {} if there is none
    """
    if not env_file:
        return {}

    path = find_dotenv(filename=env_file, usecwd=True)
    if not path:
        return {}

    # Keys without a value ("FOO" alone on a line) come back as None
    return {k: v for k, v in dotenv_values(path).items() if v is not None}


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    *,
    env_file: Optional[str] = DEFAULT_ENV_FILE,
) -> AgentConfig:
    """
    Build the AgentConfig

    Raises ConfigError when LIBSQL_URL is absent from both sources.
    """
    if environ is None:
        environ = os.environ

    values: dict[str, str] = read_env_file(env_file)
    values.update(environ)

    url = values.get(URL_ENV)
    if url is None:
        raise ConfigError(f"{URL_ENV} must be set")

    return AgentConfig(
        libsql_url=url,
        libsql_auth_token=values.get(AUTH_TOKEN_ENV, ""),
    )
