"""
Data models for appliance controller.

Defines the device variant tags, per-variant field sets and the Device entity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

Number = Union[int, float]


class DeviceCategory(Enum):
    """Device category values."""

    HOME_APPLIANCE = "home_appliance"
    POWER_TOOL = "power_tool"


class DeviceKind(Enum):
    """Device kind values."""

    REFRIGERATOR = "refrigerator"
    DRILL = "drill"

    @property
    def category(self) -> DeviceCategory:
        """Get the category this kind belongs to."""
        if self == DeviceKind.REFRIGERATOR:
            return DeviceCategory.HOME_APPLIANCE
        return DeviceCategory.POWER_TOOL

    @property
    def label(self) -> str:
        """Get display tag used in descriptions."""
        return self.value.capitalize()


@dataclass(frozen=True)
class HomeApplianceSpec:
    """Fields shared by home appliances (base for concrete specs only)."""

    brand: str = ""


@dataclass(frozen=True)
class RefrigeratorSpec(HomeApplianceSpec):
    """Refrigerator fields."""

    kind: ClassVar[DeviceKind] = DeviceKind.REFRIGERATOR

    capacity: Number = 0


@dataclass(frozen=True)
class PowerToolSpec:
    """Fields shared by power tools (base for concrete specs only)."""

    voltage: Number = 0


@dataclass(frozen=True)
class DrillSpec(PowerToolSpec):
    """Drill fields."""

    kind: ClassVar[DeviceKind] = DeviceKind.DRILL

    rpm: int = 0


DeviceSpec = Union[RefrigeratorSpec, DrillSpec]


class Device:
    """
    A single electrical appliance.

    Name, rated power and the variant fields are fixed at construction.
    Only the on/off state changes afterwards, through turn_on() and turn_off().
    """

    def __init__(self, name: str, rated_power: Number, spec: DeviceSpec):
        """
        Initialize device.

        Args:
            name: Display name of the appliance
            rated_power: Power draw in watts while switched on
            spec: Variant field set (RefrigeratorSpec, DrillSpec)

        Raises:
            TypeError: If spec is a category field set without a device kind
        """
        if not isinstance(getattr(spec, "kind", None), DeviceKind):
            raise TypeError(
                f"{type(spec).__name__} has no device kind; "
                "use a concrete spec such as RefrigeratorSpec or DrillSpec"
            )

        self._name = name
        self._rated_power = rated_power
        self._spec = spec
        self._is_on = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def rated_power(self) -> Number:
        return self._rated_power

    @property
    def spec(self) -> DeviceSpec:
        return self._spec

    @property
    def kind(self) -> DeviceKind:
        return self._spec.kind

    @property
    def category(self) -> DeviceCategory:
        return self.kind.category

    @property
    def is_on(self) -> bool:
        return self._is_on

    # --- Variant fields ---

    @property
    def brand(self) -> str:
        return self._variant_field("brand")

    @property
    def capacity(self) -> Number:
        return self._variant_field("capacity")

    @property
    def voltage(self) -> Number:
        return self._variant_field("voltage")

    @property
    def rpm(self) -> int:
        return self._variant_field("rpm")

    def _variant_field(self, field_name: str):
        """Look up a field on the variant spec."""
        if not hasattr(self._spec, field_name):
            raise AttributeError(
                f"{self.kind.label} device has no attribute '{field_name}'"
            )
        return getattr(self._spec, field_name)

    # --- Operations ---

    def turn_on(self) -> None:
        """Switch the device on."""
        self._is_on = True

    def turn_off(self) -> None:
        """Switch the device off."""
        self._is_on = False

    def get_power(self) -> Number:
        """Get current power draw (rated power when on, 0 when off)."""
        from appliancectl.devices.base import effective_power

        return effective_power(self)

    def describe(self) -> str:
        """Get human-readable description of the device."""
        from appliancectl.devices.base import describe

        return describe(self)

    def __repr__(self) -> str:
        state = "on" if self._is_on else "off"
        return f"<Device {self.kind.value} '{self._name}' {state}>"
