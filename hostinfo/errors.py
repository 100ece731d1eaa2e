"""
hostinfo.errors
AUTHOR: carter-vin

Fatal error taxonomy for a collection run.

Helpers raise these; only the CLI entrypoint decides how the process exits.
Expected absence of data (no matching disk, unknown OS name) is never an error.
"""

from __future__ import annotations


class AgentError(Exception):
    """Base class for every failure that aborts a run."""


class ConfigError(AgentError):
    """Required configuration is missing."""


class DatabaseConnectError(AgentError):
    """The remote database client could not be created."""


class MountPointDecodeError(AgentError):
    """A selected disk's mount point is not valid text."""


class InsertError(AgentError):
    """The info row could not be written."""
