"""Equipment store: identifier allocation and owner-gated mutation."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from equipment_registry.exceptions import EquipmentNotFoundError, UnauthorizedError
from equipment_registry.models import Equipment, EquipmentAttributes
from equipment_registry.store.history import OwnershipHistoryLog

logger = logging.getLogger(__name__)


def _tag(status: str) -> str:
    """Store enum members by value, anything else as given."""
    return status.value if isinstance(status, Enum) else status


@dataclass
class EquipmentStore:
    """In-memory equipment records keyed by identifier.

    Records are frozen; every mutation builds a replacement with
    ``dataclasses.replace`` and swaps it in only after the existence and
    ownership checks passed, so a rejected call leaves the stored record
    untouched.
    """

    history: OwnershipHistoryLog = field(default_factory=OwnershipHistoryLog)
    equipment: dict[int, Equipment] = field(default_factory=dict)

    # Identifier counter, incremented once per registration
    _last_id: int = 0

    # Relationship index
    _owner_equipment: dict[str, list[int]] = field(default_factory=dict)

    @property
    def last_id(self) -> int:
        """Most recently allocated identifier (0 before any registration)."""
        return self._last_id

    def register(self, attributes: EquipmentAttributes, owner: str, block_height: int) -> int:
        """Register new equipment owned by ``owner``.

        Parameters
        ----------
        attributes : EquipmentAttributes
            Technical and location attributes of the device.
        owner : str
            Principal that becomes the first owner.
        block_height : int
            Current block height, stamped as the registration date.

        Returns
        -------
        int
            The new equipment identifier.
        """
        equipment_id = self._last_id + 1
        record = Equipment.from_attributes(equipment_id, attributes, owner, block_height)
        self.equipment[equipment_id] = record
        self._owner_equipment.setdefault(owner, []).append(equipment_id)
        self._last_id = equipment_id
        logger.debug("Registered equipment %d (%s) for %s", equipment_id, record.model, owner)
        return equipment_id

    def get(self, equipment_id: int) -> Equipment:
        """Look up equipment by identifier."""
        try:
            return self.equipment[equipment_id]
        except KeyError:
            raise EquipmentNotFoundError(equipment_id) from None

    def exists(self, equipment_id: int) -> bool:
        return equipment_id in self.equipment

    def set_status(self, equipment_id: int, status: str, caller: str) -> int:
        """Replace the status tag."""
        record = self._owned_by(equipment_id, caller)
        self.equipment[equipment_id] = replace(record, status=_tag(status))
        return equipment_id

    def set_location(
        self,
        equipment_id: int,
        latitude: str,
        longitude: str,
        description: str,
        caller: str,
    ) -> int:
        """Replace the three location fields together."""
        record = self._owned_by(equipment_id, caller)
        self.equipment[equipment_id] = replace(
            record,
            location_latitude=latitude,
            location_longitude=longitude,
            location_description=description,
        )
        return equipment_id

    def set_network(
        self,
        equipment_id: int,
        ip_address: str,
        firmware_version: str,
        caller: str,
    ) -> int:
        """Replace the IP address and firmware version together."""
        record = self._owned_by(equipment_id, caller)
        self.equipment[equipment_id] = replace(
            record,
            ip_address=ip_address,
            firmware_version=firmware_version,
        )
        return equipment_id

    def transfer_ownership(
        self,
        equipment_id: int,
        new_owner: str,
        reason: str,
        caller: str,
        block_height: int,
    ) -> int:
        """Hand the equipment over to ``new_owner``.

        Appends the transfer to the ownership history and swaps the owner in
        the same call. Nothing after the history append can fail.
        """
        record = self._owned_by(equipment_id, caller)
        updated = replace(record, owner=new_owner)

        self.history.append(
            equipment_id=equipment_id,
            previous_owner=record.owner,
            new_owner=new_owner,
            transfer_date=block_height,
            transfer_reason=reason,
        )
        self.equipment[equipment_id] = updated
        self._owner_equipment[record.owner].remove(equipment_id)
        self._owner_equipment.setdefault(new_owner, []).append(equipment_id)
        return equipment_id

    # Query methods
    def by_owner(self, owner: str) -> list[Equipment]:
        """Get all equipment currently held by an owner."""
        ids = self._owner_equipment.get(owner, [])
        return [self.equipment[eid] for eid in ids]

    def by_status(self, status: str) -> list[Equipment]:
        """Get all equipment carrying a status tag."""
        tag = _tag(status)
        return [e for e in self.equipment.values() if e.status == tag]

    def all(self) -> list[Equipment]:
        """Get every record in identifier order."""
        return [self.equipment[eid] for eid in sorted(self.equipment)]

    def __contains__(self, equipment_id: object) -> bool:
        return equipment_id in self.equipment

    def __len__(self) -> int:
        return len(self.equipment)

    def _owned_by(self, equipment_id: int, caller: str) -> Equipment:
        """Return the record if it exists and ``caller`` owns it."""
        record = self.get(equipment_id)
        if record.owner != caller:
            raise UnauthorizedError(equipment_id, caller)
        return record
