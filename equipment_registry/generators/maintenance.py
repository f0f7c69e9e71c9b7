"""Synthetic maintenance events."""

from __future__ import annotations

import random
from dataclasses import dataclass

from equipment_registry.generators.base import BaseGenerator
from equipment_registry.models import MaintenanceType


@dataclass
class MaintenanceRequest:
    """Inputs of one maintenance report, minus the equipment and reporter."""

    maintenance_type: str
    description: str
    performed_date: int
    cost: int
    parts_replaced: str
    next_maintenance_date: int


class MaintenanceGenerator(BaseGenerator):
    """Generate maintenance reports for registered equipment."""

    MAINTENANCE_TYPES = list(MaintenanceType)
    TYPE_WEIGHTS = [0.35, 0.20, 0.20, 0.10, 0.15]

    # Cost ranges in cents
    COST_RANGES = {
        MaintenanceType.INSPECTION: (0, 5_000),
        MaintenanceType.REPAIR: (5_000, 60_000),
        MaintenanceType.FIRMWARE_UPGRADE: (0, 2_000),
        MaintenanceType.PART_REPLACEMENT: (10_000, 120_000),
        MaintenanceType.CLEANING: (0, 3_000),
    }

    PARTS = [
        "antenna",
        "battery pack",
        "charge controller",
        "PoE injector",
        "weatherproof enclosure",
        "surge protector",
        "coax cable",
    ]

    # Blocks until the next scheduled visit
    SERVICE_INTERVAL = (500, 4000)

    def generate(self, performed_date: int) -> MaintenanceRequest:
        """Generate one maintenance report performed at ``performed_date``."""
        maintenance_type = random.choices(
            self.MAINTENANCE_TYPES, weights=self.TYPE_WEIGHTS, k=1
        )[0]
        low, high = self.COST_RANGES[maintenance_type]

        parts = ""
        if maintenance_type in (MaintenanceType.PART_REPLACEMENT, MaintenanceType.REPAIR):
            parts = ", ".join(random.sample(self.PARTS, k=random.randint(1, 3)))

        return MaintenanceRequest(
            maintenance_type=maintenance_type.value,
            description=self.fake.sentence(nb_words=8),
            performed_date=performed_date,
            cost=random.randint(low, high),
            parts_replaced=parts,
            next_maintenance_date=performed_date + random.randint(*self.SERVICE_INTERVAL),
        )
