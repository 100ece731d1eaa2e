"""
Contract tests for the system collector: unavailable values become ""
"""

import platform
import socket

from hostinfo.collectors.system import SystemResult, collect_system


def test_collect_system_uses_os_release_name(monkeypatch) -> None:
    monkeypatch.setattr(
        platform,
        "freedesktop_os_release",
        lambda: {"NAME": "Ubuntu", "ID": "ubuntu"},
        raising=False,
    )
    monkeypatch.setattr(socket, "gethostname", lambda: "node-a")

    assert collect_system() == SystemResult(system_name="Ubuntu", system_host_name="node-a")


def test_collect_system_falls_back_to_platform_system(monkeypatch) -> None:
    def no_os_release():
        raise OSError("no os-release")

    monkeypatch.setattr(platform, "freedesktop_os_release", no_os_release, raising=False)
    monkeypatch.setattr(platform, "system", lambda: "Darwin")
    monkeypatch.setattr(socket, "gethostname", lambda: "mac-1")

    assert collect_system() == SystemResult(system_name="Darwin", system_host_name="mac-1")


def test_collect_system_unavailable_values_are_empty(monkeypatch) -> None:
    def no_os_release():
        raise OSError("no os-release")

    def no_hostname():
        raise OSError("no hostname")

    monkeypatch.setattr(platform, "freedesktop_os_release", no_os_release, raising=False)
    monkeypatch.setattr(platform, "system", lambda: "")
    monkeypatch.setattr(socket, "gethostname", no_hostname)

    assert collect_system() == SystemResult(system_name="", system_host_name="")
