from __future__ import annotations

from dataclasses import dataclass

from .core.constants import STORAGE_KEY
from .reports.pdf_writer import PdfDocumentWriter
from .reports.service import ReportService
from .workers.json_repository import JsonFileRosterRepository
from .workers.service import AttendanceBook


@dataclass(frozen=True)
class Container:
    roster_repo: JsonFileRosterRepository

    attendance_book: AttendanceBook
    report_service: ReportService


def build_container(*, data_file: str, storage_key: str = STORAGE_KEY) -> Container:
    roster_repo = JsonFileRosterRepository(data_file, key=storage_key)
    attendance_book = AttendanceBook(roster_repo)
    report_service = ReportService(writer=PdfDocumentWriter())

    return Container(
        roster_repo=roster_repo,
        attendance_book=attendance_book,
        report_service=report_service,
    )
