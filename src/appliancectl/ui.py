"""
Console presentation for appliance controller.

Renders the registered devices and their combined power draw.
"""

from typing import Callable

import click

from appliancectl.core.manager import DeviceManager
from appliancectl.core.models import Number
from appliancectl.devices.base import format_number
from appliancectl.sinks.base import EventLogger

DEVICES_HEADER = "Список устройств:"


class ConsoleUI:
    """Console view over a device manager."""

    def __init__(
        self,
        manager: DeviceManager,
        event_logger: EventLogger,
        echo: Callable[[str], None] = click.echo,
    ):
        self.manager = manager
        self.event_logger = event_logger
        self._echo = echo

    def show_devices(self) -> None:
        """Print one description line per device under a header."""
        self._echo(f"\n{DEVICES_HEADER}")
        for device in self.manager.get_devices():
            self._echo(device.describe())

    def show_total_power(self) -> Number:
        """Print combined power draw and report it to the event logger."""
        total = self.manager.get_total_power()
        text = format_number(total)
        self._echo(f"Общая мощность: {text} W")
        self.event_logger.log(f"Общая мощность потребления: {text} W")
        return total
