"""
Device factories.

Each construction function builds one canonical device profile.
create_device() selects the construction function by kind.
"""

from appliancectl.core.models import Device, DeviceKind, DrillSpec, RefrigeratorSpec


def create_refrigerator() -> Device:
    """Create the standard refrigerator (Samsung Fridge, 150 W, 300 L)."""
    return Device(
        name="Samsung Fridge",
        rated_power=150,
        spec=RefrigeratorSpec(brand="Samsung", capacity=300),
    )


def create_drill() -> Device:
    """Create the standard drill (Bosch Drill, 800 W, 220 V, 3000 rpm)."""
    return Device(
        name="Bosch Drill",
        rated_power=800,
        spec=DrillSpec(voltage=220, rpm=3000),
    )


def create_device(kind: DeviceKind) -> Device:
    """
    Factory function to create a device of the given kind.

    Args:
        kind: Kind of device (refrigerator, drill)

    Returns:
        Newly constructed Device, switched off

    Raises:
        ValueError: If kind is not supported
    """
    if kind == DeviceKind.REFRIGERATOR:
        return create_refrigerator()

    elif kind == DeviceKind.DRILL:
        return create_drill()

    else:
        raise ValueError(f"Unsupported device kind: {kind}")


def available_kinds() -> list[DeviceKind]:
    """Get device kinds that have a factory."""
    return [DeviceKind.REFRIGERATOR, DeviceKind.DRILL]
