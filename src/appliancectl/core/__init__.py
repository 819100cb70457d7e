"""
Core components for appliance controller.

Provides configuration, device models, and the device manager.
"""

from appliancectl.core.config import Config, load_config
from appliancectl.core.manager import DeviceManager, get_manager
from appliancectl.core.models import (
    Device,
    DeviceCategory,
    DeviceKind,
    DrillSpec,
    HomeApplianceSpec,
    PowerToolSpec,
    RefrigeratorSpec,
)

__all__ = [
    "Config",
    "load_config",
    "DeviceManager",
    "get_manager",
    "Device",
    "DeviceCategory",
    "DeviceKind",
    "DrillSpec",
    "HomeApplianceSpec",
    "PowerToolSpec",
    "RefrigeratorSpec",
]
