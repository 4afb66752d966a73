from __future__ import annotations

from typing import Protocol

from .model import Roster


class RosterRepository(Protocol):
    """Load/save boundary for the roster blob.

    Note: services depend on this interface, never on a concrete storage.
    """

    def load(self) -> Roster:
        raise NotImplementedError

    def save(self, roster: Roster) -> None:
        raise NotImplementedError
