from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..stats.service import compute_stats
from ..workers.model import Worker
from .model import GeneratedReport
from .pdf_writer import PdfDocumentWriter
from .renderer import render_report

logger = logging.getLogger(__name__)


def report_filename(start: str, end: str) -> str:
    return f"attendance_{start}_to_{end}.pdf"


class ReportService:
    """Use case: turn a roster snapshot and a date range into a report."""

    def __init__(self, *, writer: Optional[PdfDocumentWriter] = None):
        self._writer = writer or PdfDocumentWriter()

    def build(self, roster: Sequence[Worker], start: date | str, end: date | str) -> GeneratedReport:
        result = compute_stats(roster, start, end)
        return GeneratedReport(
            filename=report_filename(result.start, result.end),
            result=result,
            instructions=tuple(render_report(result)),
        )

    def export_pdf(self, roster: Sequence[Worker], start: date | str, end: date | str) -> tuple[str, bytes]:
        report = self.build(roster, start, end)
        data = self._writer.write(report.instructions, title=report.filename)
        logger.info("Generated %s (%d worker(s), %d bytes)", report.filename, len(report.result.stats), len(data))
        return report.filename, data
