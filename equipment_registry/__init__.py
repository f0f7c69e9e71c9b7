"""Registry of field network equipment, ownership history and maintenance."""

from equipment_registry.context import ManualBlockClock, StaticIdentity
from equipment_registry.models import (
    Equipment,
    EquipmentAttributes,
    EquipmentStatus,
    MaintenanceRecord,
    OwnershipTransfer,
)
from equipment_registry.service import ErrorCode, RegistryService, Result

__version__ = "0.1.0"

__all__ = [
    "Equipment",
    "EquipmentAttributes",
    "EquipmentStatus",
    "ErrorCode",
    "MaintenanceRecord",
    "ManualBlockClock",
    "OwnershipTransfer",
    "RegistryService",
    "Result",
    "StaticIdentity",
]
