"""Maintenance record model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MaintenanceRecord:
    """Service event performed on a piece of equipment."""

    record_id: int
    equipment_id: int
    maintenance_type: str
    description: str
    performed_by: str
    performed_date: int
    next_maintenance_date: int
    cost: int  # Smallest currency unit
    parts_replaced: str  # Free-form list
