"""In-memory stores for registry records."""

from equipment_registry.store.equipment import EquipmentStore
from equipment_registry.store.history import OwnershipHistoryLog
from equipment_registry.store.maintenance import MaintenanceLog

__all__ = ["EquipmentStore", "MaintenanceLog", "OwnershipHistoryLog"]
