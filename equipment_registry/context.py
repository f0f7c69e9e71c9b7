"""Caller identity and block height collaborators.

The registry trusts both as given. The implementations here are in-process
stand-ins used by scenarios and tests.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Protocol


class IdentityResolver(Protocol):
    """Supplies the principal executing the current operation."""

    def current_caller(self) -> str: ...


class BlockHeightSource(Protocol):
    """Supplies the current logical time as a block height."""

    def current_height(self) -> int: ...


@dataclass
class StaticIdentity:
    """Identity resolver returning a settable principal."""

    principal: str

    def current_caller(self) -> str:
        return self.principal

    @contextmanager
    def acting_as(self, principal: str) -> Iterator[StaticIdentity]:
        """Temporarily switch the calling principal."""
        previous = self.principal
        self.principal = principal
        try:
            yield self
        finally:
            self.principal = previous


@dataclass
class ManualBlockClock:
    """Block height source advanced explicitly by the caller."""

    height: int = 0

    def current_height(self) -> int:
        return self.height

    def advance(self, blocks: int = 1) -> int:
        """Move the clock forward and return the new height."""
        if blocks < 0:
            raise ValueError("Block height cannot move backwards")
        self.height += blocks
        return self.height
