"""
Device module for appliance controller.

Provides per-kind dispatch and factory functions for refrigerators and drills.
"""

from appliancectl.devices.base import describe, effective_power, format_number
from appliancectl.devices.factory import (
    available_kinds,
    create_device,
    create_drill,
    create_refrigerator,
)

__all__ = [
    "describe",
    "effective_power",
    "format_number",
    "available_kinds",
    "create_device",
    "create_drill",
    "create_refrigerator",
]
