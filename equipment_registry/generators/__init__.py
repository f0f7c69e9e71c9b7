"""Synthetic data generators for the equipment registry."""

from equipment_registry.generators.equipment import EquipmentGenerator
from equipment_registry.generators.maintenance import MaintenanceGenerator, MaintenanceRequest

__all__ = ["EquipmentGenerator", "MaintenanceGenerator", "MaintenanceRequest"]
