"""Synthetic routers and access points."""

from __future__ import annotations

import random
from typing import Iterator

from equipment_registry.generators.base import BaseGenerator
from equipment_registry.models import EquipmentAttributes, EquipmentType


class EquipmentGenerator(BaseGenerator):
    """Generate registration attributes for field network devices."""

    EQUIPMENT_TYPES = list(EquipmentType)
    TYPE_WEIGHTS = [0.35, 0.65]

    # (manufacturer, model, serial prefix) per device type
    CATALOG = {
        EquipmentType.ROUTER: [
            ("Rural Networks Inc", "MeshNet Pro 2000", "MNP2000"),
            ("Rural Networks Inc", "MeshNet Lite 800", "MNL800"),
            ("OpenSky Radio", "Backhaul X5", "BHX5"),
        ],
        EquipmentType.ACCESS_POINT: [
            ("Rural Networks Inc", "RuralConnect AP-350", "RCAP350"),
            ("OpenSky Radio", "SkyCell 24", "SKC24"),
            ("FieldLink", "Outdoor AP 5G", "FLO5G"),
        ],
    }

    COVERAGE_RANGES = {
        EquipmentType.ROUTER: (1000, 8000),
        EquipmentType.ACCESS_POINT: (100, 2500),
    }

    POWER_SOURCES = [
        "Grid",
        "Grid with solar backup",
        "Solar with battery backup",
        "Wind with battery backup",
        "PoE",
    ]

    SITES = [
        "Community center rooftop",
        "Water tower",
        "School building rooftop",
        "Grain silo",
        "Church steeple",
        "Clinic mast",
        "Farm co-op roof",
    ]

    def generate(self, block_height: int) -> EquipmentAttributes:
        """Generate a single device purchased and installed before ``block_height``.

        Parameters
        ----------
        block_height : int
            Current block height; purchase and installation dates are
            drawn from the preceding blocks.

        Returns
        -------
        EquipmentAttributes
            Generated attributes.
        """
        return self._generate_one(block_height)

    def generate_batch(self, count: int, block_height: int) -> Iterator[EquipmentAttributes]:
        for _ in range(count):
            yield self._generate_one(block_height)

    def _generate_one(self, block_height: int) -> EquipmentAttributes:
        equipment_type = random.choices(self.EQUIPMENT_TYPES, weights=self.TYPE_WEIGHTS, k=1)[0]
        manufacturer, model, prefix = random.choice(self.CATALOG[equipment_type])
        low, high = self.COVERAGE_RANGES[equipment_type]

        purchase_date = max(0, block_height - random.randint(100, 2000))
        installation_date = min(block_height, purchase_date + random.randint(0, 100))

        return EquipmentAttributes(
            equipment_type=equipment_type.value,
            model=model,
            serial_number=f"{prefix}-{self.fake.numerify('#####')}",
            manufacturer=manufacturer,
            purchase_date=purchase_date,
            installation_date=installation_date,
            location_latitude=str(self.fake.latitude()),
            location_longitude=str(self.fake.longitude()),
            location_description=random.choice(self.SITES),
            ip_address=self.fake.ipv4_private(),
            mac_address=self.fake.mac_address().upper(),
            firmware_version=self._firmware_version(),
            power_source=random.choice(self.POWER_SOURCES),
            coverage_radius_meters=random.randrange(low, high, 50),
        )

    def _firmware_version(self) -> str:
        return f"v{random.randint(1, 3)}.{random.randint(0, 9)}.{random.randint(0, 20)}"
