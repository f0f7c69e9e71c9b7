"""Registry service: the public operation surface.

Every operation resolves the caller from the identity collaborator,
delegates to the owning store and reports the outcome as a ``Result``.
Stores signal ``404`` / ``403`` with typed exceptions; this module is the
only place those are turned into result values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Generic, TypeVar

from equipment_registry.context import BlockHeightSource, IdentityResolver
from equipment_registry.exceptions import (
    EntityNotFoundError,
    EquipmentNotFoundError,
    RegistryError,
    UnauthorizedError,
)
from equipment_registry.models import (
    Equipment,
    EquipmentAttributes,
    MaintenanceRecord,
    OwnershipTransfer,
)
from equipment_registry.store import EquipmentStore, MaintenanceLog, OwnershipHistoryLog

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorCode(IntEnum):
    """Closed set of error codes returned by the registry."""

    UNAUTHORIZED = 403
    NOT_FOUND = 404


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a registry operation: either ``value`` or ``error``."""

    value: T | None = None
    error: ErrorCode | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising ``RegistryError`` on an error result."""
        if self.error is not None:
            raise RegistryError(f"[{int(self.error)}] {self.message}")
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorCode, message: str = "") -> Result[T]:
        return cls(error=error, message=message)


@dataclass
class RegistryService:
    """Orchestrates the equipment store, ownership history and maintenance log.

    Parameters
    ----------
    identity : IdentityResolver
        Supplies the calling principal of each operation.
    clock : BlockHeightSource
        Supplies the block height stamped on registrations and transfers.
    """

    identity: IdentityResolver
    clock: BlockHeightSource
    history: OwnershipHistoryLog = field(default_factory=OwnershipHistoryLog)
    equipment: EquipmentStore = field(init=False)
    maintenance: MaintenanceLog = field(init=False)

    def __post_init__(self) -> None:
        self.equipment = EquipmentStore(history=self.history)
        self.maintenance = MaintenanceLog(equipment=self.equipment)

    # Equipment
    def register_equipment(self, attributes: EquipmentAttributes) -> Result[int]:
        """Register equipment owned by the caller."""
        owner = self.identity.current_caller()
        equipment_id = self.equipment.register(attributes, owner, self.clock.current_height())
        logger.info("Equipment %d registered by %s", equipment_id, owner)
        return Result.success(equipment_id)

    def get_equipment(self, equipment_id: int) -> Result[Equipment]:
        return self._run("get_equipment", lambda: self.equipment.get(equipment_id))

    def update_status(self, equipment_id: int, status: str) -> Result[int]:
        caller = self.identity.current_caller()
        return self._run(
            "update_status",
            lambda: self.equipment.set_status(equipment_id, status, caller),
        )

    def update_location(
        self,
        equipment_id: int,
        latitude: str,
        longitude: str,
        description: str,
    ) -> Result[int]:
        caller = self.identity.current_caller()
        return self._run(
            "update_location",
            lambda: self.equipment.set_location(
                equipment_id, latitude, longitude, description, caller
            ),
        )

    def update_network(
        self,
        equipment_id: int,
        ip_address: str,
        firmware_version: str,
    ) -> Result[int]:
        caller = self.identity.current_caller()
        return self._run(
            "update_network",
            lambda: self.equipment.set_network(equipment_id, ip_address, firmware_version, caller),
        )

    def transfer_ownership(self, equipment_id: int, new_owner: str, reason: str) -> Result[int]:
        """Transfer equipment from the caller to ``new_owner``."""
        caller = self.identity.current_caller()
        result = self._run(
            "transfer_ownership",
            lambda: self.equipment.transfer_ownership(
                equipment_id, new_owner, reason, caller, self.clock.current_height()
            ),
        )
        if result.ok:
            logger.info("Equipment %d transferred %s -> %s", equipment_id, caller, new_owner)
        return result

    # Maintenance
    def add_maintenance(
        self,
        equipment_id: int,
        maintenance_type: str,
        description: str,
        performed_date: int,
        cost: int,
        parts_replaced: str,
        next_maintenance_date: int,
    ) -> Result[int]:
        """Record maintenance performed by the caller on existing equipment."""
        performed_by = self.identity.current_caller()
        return self._run(
            "add_maintenance",
            lambda: self.maintenance.add(
                equipment_id=equipment_id,
                maintenance_type=maintenance_type,
                description=description,
                performed_date=performed_date,
                cost=cost,
                parts_replaced=parts_replaced,
                next_maintenance_date=next_maintenance_date,
                performed_by=performed_by,
            ),
        )

    def get_maintenance(self, record_id: int) -> Result[MaintenanceRecord]:
        return self._run("get_maintenance", lambda: self.maintenance.get(record_id))

    # History queries
    def get_transfer(self, equipment_id: int, sequence: int) -> Result[OwnershipTransfer]:
        return self._run("get_transfer", lambda: self.history.get(equipment_id, sequence))

    def get_ownership_history(self, equipment_id: int) -> Result[list[OwnershipTransfer]]:
        return self._run(
            "get_ownership_history",
            lambda: self.history.for_equipment(self._require(equipment_id)),
        )

    def get_maintenance_history(self, equipment_id: int) -> Result[list[MaintenanceRecord]]:
        return self._run(
            "get_maintenance_history",
            lambda: self.maintenance.for_equipment(self._require(equipment_id)),
        )

    def list_equipment_by_owner(self, owner: str) -> Result[list[Equipment]]:
        return Result.success(self.equipment.by_owner(owner))

    def summary(self) -> dict[str, int]:
        """Return summary counts of all records."""
        return {
            "equipment": len(self.equipment),
            "transfers": len(self.history),
            "maintenance_records": len(self.maintenance),
        }

    def _require(self, equipment_id: int) -> int:
        if not self.equipment.exists(equipment_id):
            raise EquipmentNotFoundError(equipment_id)
        return equipment_id

    def _run(self, operation: str, action: Callable[[], T]) -> Result[T]:
        """Execute a store action, mapping its typed errors to a result."""
        try:
            return Result.success(action())
        except EntityNotFoundError as exc:
            return self._reject(operation, ErrorCode.NOT_FOUND, exc)
        except UnauthorizedError as exc:
            return self._reject(operation, ErrorCode.UNAUTHORIZED, exc)

    def _reject(self, operation: str, code: ErrorCode, exc: RegistryError) -> Result:
        logger.info(
            "%s rejected: %s",
            operation,
            exc,
            extra={"extra": {"operation": operation, "code": int(code)}},
        )
        return Result.failure(code, str(exc))
