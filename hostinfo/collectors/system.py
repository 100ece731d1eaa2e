"""
hostinfo.collectors.system

AUTHOR: carter-vin

- system_name: human readable OS name (Linux: os-release NAME, else platform.system())
- system_host_name: network host name

Either value may be unavailable; it is reported as "" and the run continues.
"""

from __future__ import annotations

import platform
import socket
from dataclasses import dataclass


@dataclass(frozen=True)
class SystemResult:
    system_name: str
    system_host_name: str


def _read_os_name() -> str:
    """
    OS display name, "" if it can't be determined
    """
    try:
        # e.g. "Ubuntu", "Fedora Linux"
        name = platform.freedesktop_os_release().get("NAME")
        if name:
            return name
    except OSError:
        pass

    return platform.system()


def _read_host_name() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""


def collect_system() -> SystemResult:
    """
    Collect OS name and host name
    """
    return SystemResult(
        system_name=_read_os_name(),
        system_host_name=_read_host_name(),
    )
