"""
Appliance Controller (appliancectl).

In-process registry for electrical appliances.
Builds devices from factories, toggles power state and aggregates power draw.
"""

__version__ = "0.1.0"
