"""hostinfo.collectors package exports."""

from hostinfo.collectors.disk import collect_disk
from hostinfo.collectors.system import collect_system

__all__ = [
    "collect_disk",
    "collect_system",
]
