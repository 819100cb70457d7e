"""
Dispatch functions for devices.

Each operation is a single function that branches on the device kind.
"""

from typing import TYPE_CHECKING

from appliancectl.core.models import DeviceKind

if TYPE_CHECKING:
    from appliancectl.core.models import Device, Number


def format_number(value: "Number") -> str:
    """
    Render a numeric field for descriptions.

    Integral values are rendered without a decimal part (300.0 -> "300").

    Args:
        value: Number to render

    Returns:
        String representation
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def effective_power(device: "Device") -> "Number":
    """
    Get effective power draw of a device.

    Args:
        device: Device to inspect

    Returns:
        Rated power if the device is on, 0 otherwise
    """
    if device.is_on:
        return device.rated_power
    return 0


def describe(device: "Device") -> str:
    """
    Build the description string for a device.

    Args:
        device: Device to describe

    Returns:
        Description containing the kind tag, name, variant fields and rated power

    Raises:
        ValueError: If the device kind is not supported
    """
    kind = device.kind
    name = device.name
    power = format_number(device.rated_power)

    if kind == DeviceKind.REFRIGERATOR:
        return (
            f"{kind.label}: {name}, Brand: {device.brand}, "
            f"Capacity: {format_number(device.capacity)}L, Power: {power}W"
        )

    elif kind == DeviceKind.DRILL:
        return (
            f"{kind.label}: {name}, Voltage: {format_number(device.voltage)}V, "
            f"RPM: {device.rpm}, Power: {power}W"
        )

    else:
        raise ValueError(f"Unsupported device kind: {kind}")
