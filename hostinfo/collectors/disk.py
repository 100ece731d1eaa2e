"""
hostinfo.collectors.disk
AUTHOR: carter-vin

Disk collector
- Enumerates mounted disks via psutil (device name, mount point, capacity)
- Selects the first disk whose name contains "1p6" and whose mount point contains "/home"
- Capacities reported in GiB (2**30 bytes)

Selection notes:
- enumeration order is whatever the OS reports; it is not stable across platforms,
  so with several matching disks "first" is platform dependent
- the name is checked before the mount point is decoded: only a name-matching disk
  with an undecodable mount point is fatal
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

import psutil

from hostinfo.errors import MountPointDecodeError

DISK_NAME_FILTER = "1p6"
MOUNT_POINT_FILTER = "/home"


@dataclass(frozen=True)
class DiskEntry:
    """
    One mounted disk as reported by the OS

    mount_point may be raw bytes when the platform hands them over undecoded.
    """

    name: str
    mount_point: Union[str, bytes]
    total_bytes: int
    available_bytes: int


@dataclass(frozen=True)
class DiskResult:
    total_space: float
    available_space: float
    used_space: float

    @classmethod
    def empty(cls) -> "DiskResult":
        return cls(total_space=0.0, available_space=0.0, used_space=0.0)


def bytes_to_gb(n: int) -> float:
    """
    Convert bytes to binary gigabytes (GiB)
    """
    return n / 1024 / 1024 / 1024


def decode_mount_point(mount_point: Union[str, bytes]) -> str:
    """
    Return the mount point as text

    psutil decodes paths with surrogateescape, so an undecodable path shows up
    as a str carrying lone surrogates rather than as bytes.
    """
    try:
        if isinstance(mount_point, bytes):
            return mount_point.decode("utf-8")
        mount_point.encode("utf-8")
        return mount_point
    except UnicodeError as e:
        raise MountPointDecodeError(f"Error getting mount point: {mount_point!r}") from e


def enumerate_disks() -> list[DiskEntry]:
    """
    List mounted physical disks with their capacity

    Disks whose usage can't be read (permissions, stale mounts) are left out.
    """
    entries: list[DiskEntry] = []

    for partition in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except OSError:
            continue

        entries.append(
            DiskEntry(
                name=partition.device,
                mount_point=partition.mountpoint,
                total_bytes=usage.total,
                available_bytes=usage.free,
            )
        )

    return entries


def select_disk(
    entries: Iterable[DiskEntry],
    *,
    name_filter: str = DISK_NAME_FILTER,
    mount_filter: str = MOUNT_POINT_FILTER,
) -> Optional[DiskEntry]:
    """
    First entry matching both filters, or None

    Raises MountPointDecodeError if a name-matching entry has an undecodable mount point.
    """
    for entry in entries:
        if name_filter in entry.name and mount_filter in decode_mount_point(entry.mount_point):
            return entry
    return None


def disk_result_from_entry(entry: DiskEntry) -> DiskResult:
    # used is derived, not measured
    used_bytes = entry.total_bytes - entry.available_bytes
    return DiskResult(
        total_space=bytes_to_gb(entry.total_bytes),
        available_space=bytes_to_gb(entry.available_bytes),
        used_space=bytes_to_gb(used_bytes),
    )


def collect_disk(entries: Optional[Iterable[DiskEntry]] = None) -> Optional[DiskResult]:
    """
    Collect capacity of the matching disk

    Returns None when no disk matches; that is not an error.
    """
    if entries is None:
        entries = enumerate_disks()

    entry = select_disk(entries)
    if entry is None:
        return None

    return disk_result_from_entry(entry)
