"""
Device manager for appliance controller.

Owns the registered devices, switches them on in bulk and aggregates power draw.
Every mutating operation is reported to the event logger.
"""

import logging

from appliancectl.core.models import Device, Number
from appliancectl.sinks.base import EventLogger

logger = logging.getLogger(__name__)

ADDED_PREFIX = "Добавлено устройство: "
TURNED_ON_PREFIX = "Включено: "


class DeviceManager:
    """Registry for devices (refrigerators, drills, etc.)."""

    def __init__(self, event_logger: EventLogger):
        """
        Initialize device manager.

        Args:
            event_logger: Sink for device event messages
        """
        self.event_logger = event_logger
        self._devices: list[Device] = []

    def add_device(self, device: Device) -> None:
        """
        Register a device.

        The device is appended after all previously added devices.
        The same instance may be added more than once.

        Args:
            device: Device to take ownership of
        """
        self.event_logger.log(ADDED_PREFIX + device.describe())
        self._devices.append(device)
        logger.debug(f"Registered {device!r} ({len(self._devices)} total)")

    def turn_on_all(self) -> None:
        """Switch on every device in insertion order."""
        for device in self._devices:
            device.turn_on()
            self.event_logger.log(TURNED_ON_PREFIX + device.describe())

    def get_total_power(self) -> Number:
        """
        Get combined power draw of all devices.

        Returns:
            Sum of each device's current power, 0 if no devices
        """
        total = 0
        for device in self._devices:
            total += device.get_power()
        return total

    def get_devices(self) -> tuple[Device, ...]:
        """Get registered devices in insertion order."""
        return tuple(self._devices)

    def __len__(self) -> int:
        return len(self._devices)


def get_manager(event_logger: EventLogger) -> DeviceManager:
    """
    Get a device manager instance.

    Args:
        event_logger: Sink for device event messages

    Returns:
        Empty DeviceManager instance
    """
    return DeviceManager(event_logger)
