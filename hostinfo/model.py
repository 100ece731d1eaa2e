"""
hostinfo.model
AUTHOR: carter-vin

Row schema for the `info` table + text rendering of numeric fields.

Design goals:
- Explicit column order (no accidental serialization via __dict__)
- Numbers bound as text: shortest round-trip decimal, no exponent, no trailing ".0"
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from hostinfo.collectors.disk import DiskResult
from hostinfo.collectors.system import SystemResult

# Column order is contract-critical; it must match the INSERT placeholders
INFO_COLUMNS = (
    "system_name",
    "system_host_name",
    "system_total_space",
    "system_available_space",
    "system_used_space",
)


def format_number(value: float) -> str:
    """
    Render a float as plain decimal text

    10.0 -> "10", 5.5 -> "5.5", 1e-05 -> "0.00001"
    """
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class InfoRow:
    """
    One `info` row
    - system_*: identity of the host
    - *_space: GiB values for the selected disk (zeros when none matched)
    """

    system_name: str
    system_host_name: str
    system_total_space: float
    system_available_space: float
    system_used_space: float

    def to_params(self) -> list[str]:
        # Same order as INFO_COLUMNS
        return [
            self.system_name,
            self.system_host_name,
            format_number(self.system_total_space),
            format_number(self.system_available_space),
            format_number(self.system_used_space),
        ]


def build_info_row(system: SystemResult, disk: DiskResult) -> InfoRow:
    """
    Assemble an InfoRow from collector results
    """
    return InfoRow(
        system_name=system.system_name,
        system_host_name=system.system_host_name,
        system_total_space=disk.total_space,
        system_available_space=disk.available_space,
        system_used_space=disk.used_space,
    )
