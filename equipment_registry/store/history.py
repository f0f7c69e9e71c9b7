"""Append-only ownership transfer history."""

import logging
from dataclasses import dataclass, field

from equipment_registry.exceptions import DuplicateHistoryKeyError, TransferNotFoundError
from equipment_registry.models import OwnershipTransfer

logger = logging.getLogger(__name__)


@dataclass
class OwnershipHistoryLog:
    """Ownership transfers keyed by ``(equipment_id, sequence)``.

    Sequences are allocated per equipment starting at 1, so the keys of one
    device are contiguous and ordered regardless of activity elsewhere in
    the registry. Entries are never replaced or removed.
    """

    transfers: dict[tuple[int, int], OwnershipTransfer] = field(default_factory=dict)

    # Relationship index
    _equipment_sequences: dict[int, list[int]] = field(default_factory=dict)

    def append(
        self,
        equipment_id: int,
        previous_owner: str,
        new_owner: str,
        transfer_date: int,
        transfer_reason: str,
    ) -> OwnershipTransfer:
        """Record a transfer under the next unused key for the equipment.

        Returns
        -------
        OwnershipTransfer
            The written entry.
        """
        sequences = self._equipment_sequences.setdefault(equipment_id, [])
        sequence = len(sequences) + 1
        key = (equipment_id, sequence)
        if key in self.transfers:
            raise DuplicateHistoryKeyError(f"History key {key} already written")

        transfer = OwnershipTransfer(
            equipment_id=equipment_id,
            sequence=sequence,
            previous_owner=previous_owner,
            new_owner=new_owner,
            transfer_date=transfer_date,
            transfer_reason=transfer_reason,
        )
        self.transfers[key] = transfer
        sequences.append(sequence)
        logger.debug(
            "Equipment %d transfer #%d: %s -> %s",
            equipment_id,
            sequence,
            previous_owner,
            new_owner,
        )
        return transfer

    def get(self, equipment_id: int, sequence: int) -> OwnershipTransfer:
        """Look up one history entry."""
        try:
            return self.transfers[(equipment_id, sequence)]
        except KeyError:
            raise TransferNotFoundError(equipment_id, sequence) from None

    def for_equipment(self, equipment_id: int) -> list[OwnershipTransfer]:
        """Get all transfers of an equipment, oldest first."""
        sequences = self._equipment_sequences.get(equipment_id, [])
        return [self.transfers[(equipment_id, s)] for s in sequences]

    def all(self) -> list[OwnershipTransfer]:
        """Get every transfer in write order."""
        return list(self.transfers.values())

    def __len__(self) -> int:
        return len(self.transfers)
