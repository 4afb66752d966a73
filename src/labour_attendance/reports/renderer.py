from __future__ import annotations

from ..core.constants import (
    REPORT_COLUMNS,
    REPORT_HEADER_ROW,
    REPORT_HEADERS,
    REPORT_PAGE_BOTTOM,
    REPORT_PAGE_TOP,
    REPORT_ROW_STEP,
    REPORT_SUBTITLE_ROW,
    REPORT_SUMMARY_ROW,
    REPORT_TITLE,
    REPORT_TITLE_ROW,
)
from ..core.enums import TextKind
from ..stats.model import StatsResult, WorkerStats
from .model import DrawInstruction, PageBreak, PlaceText


def _cells(s: WorkerStats) -> tuple[str, ...]:
    return (
        s.name,
        str(s.present_days),
        str(s.absent_days),
        str(s.late_days),
        str(s.working_days),
        str(s.sunday_count),
    )


def _row(cells, row: float, page: int) -> list[PlaceText]:
    return [PlaceText(text=t, column=x, row=row, page_index=page) for t, x in zip(cells, REPORT_COLUMNS)]


def render_report(result: StatsResult) -> list[DrawInstruction]:
    """Lay out a statistics result as a paginated table.

    The column header is printed on the first page only. When the next row
    would fall below the page bottom a PageBreak is emitted and placement
    resumes at the top of the next page.
    """
    page = 0
    out: list[DrawInstruction] = [
        PlaceText(text=REPORT_TITLE, column=REPORT_COLUMNS[0], row=REPORT_TITLE_ROW, page_index=page, kind=TextKind.TITLE),
        PlaceText(
            text=f"Period: {result.start} — {result.end}",
            column=REPORT_COLUMNS[0],
            row=REPORT_SUBTITLE_ROW,
            page_index=page,
        ),
        PlaceText(
            text=f"Working days: {result.range.working_days} | Sundays: {result.range.sunday_count}",
            column=REPORT_COLUMNS[0],
            row=REPORT_SUMMARY_ROW,
            page_index=page,
        ),
    ]
    out.extend(_row(REPORT_HEADERS, REPORT_HEADER_ROW, page))

    y = REPORT_HEADER_ROW + REPORT_ROW_STEP
    for s in result.stats:
        if y > REPORT_PAGE_BOTTOM:
            out.append(PageBreak())
            page += 1
            y = REPORT_PAGE_TOP
        out.extend(_row(_cells(s), y, page))
        y += REPORT_ROW_STEP

    return out
