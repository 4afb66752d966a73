from __future__ import annotations

from datetime import date

import pytest

from labour_attendance.workers.model import Roster
from labour_attendance.workers.service import add_worker


class InMemoryRosterRepo:
    def __init__(self, roster: Roster = ()):
        self._roster = tuple(roster)
        self.saved: list[Roster] = []

    def load(self) -> Roster:
        return self._roster

    def save(self, roster: Roster) -> None:
        self._roster = roster
        self.saved.append(roster)


@pytest.fixture
def roster_repo():
    return InMemoryRosterRepo()


@pytest.fixture
def asha_roster() -> Roster:
    return add_worker((), "Asha")


@pytest.fixture
def first_week_2024():
    # Mon 2024-01-01 .. Sun 2024-01-07
    return date(2024, 1, 1), date(2024, 1, 7)
