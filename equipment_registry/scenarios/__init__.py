"""Scenarios for populating a registry with realistic data."""

from equipment_registry.scenarios.field_network import FieldNetworkScenario

__all__ = ["FieldNetworkScenario"]
