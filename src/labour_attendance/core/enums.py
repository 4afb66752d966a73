from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status stored per worker and date."""

    PRESENT = "Present"
    ABSENT = "Absent"

    def toggled(self) -> "AttendanceStatus":
        return AttendanceStatus.ABSENT if self is AttendanceStatus.PRESENT else AttendanceStatus.PRESENT


class TextKind(str, Enum):
    """How a placed line of report text should be typeset."""

    TITLE = "TITLE"
    BODY = "BODY"
