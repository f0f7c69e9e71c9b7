"""Maintenance log with referential integrity against the equipment store."""

import logging
from dataclasses import dataclass, field

from equipment_registry.exceptions import (
    EquipmentNotFoundError,
    InvalidAttributeError,
    MaintenanceRecordNotFoundError,
)
from equipment_registry.models import MaintenanceRecord
from equipment_registry.store.equipment import EquipmentStore

logger = logging.getLogger(__name__)


@dataclass
class MaintenanceLog:
    """Maintenance records keyed by their own identifier sequence.

    The equipment reference is checked once, when the record is added.
    Later changes to the equipment (decommissioning, transfers) never touch
    existing records.
    """

    equipment: EquipmentStore
    records: dict[int, MaintenanceRecord] = field(default_factory=dict)

    _last_id: int = 0

    # Relationship index
    _equipment_records: dict[int, list[int]] = field(default_factory=dict)

    @property
    def last_id(self) -> int:
        return self._last_id

    def add(
        self,
        equipment_id: int,
        maintenance_type: str,
        description: str,
        performed_date: int,
        cost: int,
        parts_replaced: str,
        next_maintenance_date: int,
        performed_by: str,
    ) -> int:
        """Attach a maintenance record to existing equipment.

        Any principal may report maintenance; there is no ownership check.

        Returns
        -------
        int
            The new maintenance record identifier.
        """
        if not self.equipment.exists(equipment_id):
            raise EquipmentNotFoundError(equipment_id)
        if cost < 0:
            raise InvalidAttributeError(f"cost must be non-negative, got {cost}")

        record_id = self._last_id + 1
        self.records[record_id] = MaintenanceRecord(
            record_id=record_id,
            equipment_id=equipment_id,
            maintenance_type=maintenance_type,
            description=description,
            performed_by=performed_by,
            performed_date=performed_date,
            next_maintenance_date=next_maintenance_date,
            cost=cost,
            parts_replaced=parts_replaced,
        )
        self._equipment_records.setdefault(equipment_id, []).append(record_id)
        self._last_id = record_id
        logger.debug(
            "Maintenance record %d (%s) on equipment %d by %s",
            record_id,
            maintenance_type,
            equipment_id,
            performed_by,
        )
        return record_id

    def get(self, record_id: int) -> MaintenanceRecord:
        """Look up a maintenance record by identifier."""
        try:
            return self.records[record_id]
        except KeyError:
            raise MaintenanceRecordNotFoundError(record_id) from None

    def for_equipment(self, equipment_id: int) -> list[MaintenanceRecord]:
        """Get all records of an equipment in the order they were added."""
        ids = self._equipment_records.get(equipment_id, [])
        return [self.records[rid] for rid in ids]

    def due_before(self, block_height: int) -> list[MaintenanceRecord]:
        """Get records whose next maintenance is due at or before a height."""
        return [r for r in self.records.values() if r.next_maintenance_date <= block_height]

    def all(self) -> list[MaintenanceRecord]:
        return list(self.records.values())

    def __len__(self) -> int:
        return len(self.records)
