"""Domain models for the equipment registry."""

from equipment_registry.models.enums import EquipmentStatus, EquipmentType, MaintenanceType
from equipment_registry.models.equipment import Equipment, EquipmentAttributes, OwnershipTransfer
from equipment_registry.models.maintenance import MaintenanceRecord

__all__ = [
    "Equipment",
    "EquipmentAttributes",
    "EquipmentStatus",
    "EquipmentType",
    "MaintenanceRecord",
    "MaintenanceType",
    "OwnershipTransfer",
]
