"""Field network scenario: devices deployed, handed over and serviced."""

import logging
import random
from dataclasses import asdict

from equipment_registry.config import ScenarioConfig
from equipment_registry.context import ManualBlockClock, StaticIdentity
from equipment_registry.generators import EquipmentGenerator, MaintenanceGenerator
from equipment_registry.models import EquipmentStatus
from equipment_registry.service import RegistryService

logger = logging.getLogger(__name__)


class FieldNetworkScenario:
    """Populate a registry the way a community network grows.

    This scenario:
    - registers equipment for a pool of owner principals
    - hands a share of the devices over to another owner
    - has technicians (who never own equipment) report maintenance
    - decommissions a share of the devices

    Every step goes through ``RegistryService`` with the block clock
    advancing between operations.
    """

    def __init__(
        self,
        num_owners: int = 5,
        num_equipment: int = 20,
        transfer_rate: float = 0.2,
        maintenance_per_equipment: int = 2,
        decommission_rate: float = 0.05,
        start_height: int = 1000,
        seed: int | None = None,
    ) -> None:
        """Initialize the scenario.

        Parameters
        ----------
        num_owners : int
            Number of distinct owner principals.
        num_equipment : int
            Number of devices to register.
        transfer_rate : float
            Fraction of devices transferred to another owner (0.0 to 1.0).
        maintenance_per_equipment : int
            Maximum maintenance reports per device.
        decommission_rate : float
            Fraction of devices decommissioned at the end (0.0 to 1.0).
        start_height : int
            Block height at which the scenario starts.
        seed : int | None
            Random seed for reproducibility.
        """
        if num_owners < 2:
            raise ValueError("num_owners must be at least 2 to allow transfers")

        self.num_owners = num_owners
        self.num_equipment = num_equipment
        self.transfer_rate = transfer_rate
        self.maintenance_per_equipment = maintenance_per_equipment
        self.decommission_rate = decommission_rate
        self.seed = seed

        if seed is not None:
            random.seed(seed)

        self.owners = [f"owner-{i:03d}" for i in range(1, num_owners + 1)]
        self.technicians = ["technician-001", "technician-002"]
        self.identity = StaticIdentity(principal=self.owners[0])
        self.clock = ManualBlockClock(height=start_height)
        self.service = RegistryService(identity=self.identity, clock=self.clock)

        self._equipment_gen = EquipmentGenerator(seed=seed)
        self._maintenance_gen = MaintenanceGenerator(seed=seed)

    @classmethod
    def from_config(cls, config: ScenarioConfig, seed: int | None = None) -> "FieldNetworkScenario":
        return cls(
            num_owners=config.num_owners,
            num_equipment=config.num_equipment,
            transfer_rate=config.transfer_rate,
            maintenance_per_equipment=config.maintenance_per_equipment,
            decommission_rate=config.decommission_rate,
            start_height=config.start_height,
            seed=seed,
        )

    def generate(self) -> RegistryService:
        """Run the scenario.

        Returns
        -------
        RegistryService
            Service holding every generated record.
        """
        logger.info(
            "Starting field network scenario: %d devices across %d owners",
            self.num_equipment,
            self.num_owners,
        )

        equipment_ids = self._register_equipment()
        self._transfer_equipment(equipment_ids)
        self._service_equipment(equipment_ids)
        self._decommission_equipment(equipment_ids)

        logger.info("Scenario complete: %s", self.service.summary())
        return self.service

    def _register_equipment(self) -> list[int]:
        equipment_ids = []
        for _ in range(self.num_equipment):
            self.clock.advance(random.randint(1, 20))
            attributes = self._equipment_gen.generate(self.clock.current_height())
            with self.identity.acting_as(random.choice(self.owners)):
                equipment_ids.append(self.service.register_equipment(attributes).unwrap())
        logger.info("Registered %d devices", len(equipment_ids))
        return equipment_ids

    def _transfer_equipment(self, equipment_ids: list[int]) -> None:
        count = int(len(equipment_ids) * self.transfer_rate)
        for equipment_id in random.sample(equipment_ids, k=count):
            self.clock.advance(random.randint(1, 50))
            current_owner = self.service.get_equipment(equipment_id).unwrap().owner
            new_owner = random.choice([o for o in self.owners if o != current_owner])
            with self.identity.acting_as(current_owner):
                self.service.transfer_ownership(equipment_id, new_owner, "Handover").unwrap()
        logger.info("Transferred %d devices", count)

    def _service_equipment(self, equipment_ids: list[int]) -> None:
        for equipment_id in equipment_ids:
            for _ in range(random.randint(0, self.maintenance_per_equipment)):
                self.clock.advance(random.randint(10, 200))
                request = self._maintenance_gen.generate(self.clock.current_height())
                with self.identity.acting_as(random.choice(self.technicians)):
                    self.service.add_maintenance(equipment_id, **asdict(request)).unwrap()
        logger.info("Recorded %d maintenance reports", len(self.service.maintenance))

    def _decommission_equipment(self, equipment_ids: list[int]) -> None:
        count = int(len(equipment_ids) * self.decommission_rate)
        for equipment_id in random.sample(equipment_ids, k=count):
            owner = self.service.get_equipment(equipment_id).unwrap().owner
            with self.identity.acting_as(owner):
                self.service.update_status(equipment_id, EquipmentStatus.DECOMMISSIONED).unwrap()
        logger.info("Decommissioned %d devices", count)

    def get_status_distribution(self) -> dict[str, int]:
        """Count devices per status tag."""
        distribution: dict[str, int] = {}
        for equipment in self.service.equipment.all():
            distribution[equipment.status] = distribution.get(equipment.status, 0) + 1
        return distribution
