"""
PDF output for rendered reports using ReportLab.
"""

from __future__ import annotations

import io
from typing import Iterable

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from ..core.enums import TextKind
from .model import DrawInstruction, PageBreak, PlaceText


class PdfDocumentWriter:
    """Execute draw instructions on an A4 canvas.

    Coordinates are millimetres measured from the top-left corner of the page.
    """

    def __init__(self, *, font_name: str = "Helvetica", title_size: int = 16, body_size: int = 10):
        self._font_name = font_name
        self._sizes = {TextKind.TITLE: title_size, TextKind.BODY: body_size}

    def write(self, instructions: Iterable[DrawInstruction], *, title: str = "") -> bytes:
        buffer = io.BytesIO()
        page_width, page_height = A4
        c = canvas.Canvas(buffer, pagesize=A4)
        if title:
            c.setTitle(title)

        for item in instructions:
            if isinstance(item, PageBreak):
                c.showPage()
            elif isinstance(item, PlaceText):
                c.setFont(self._font_name, self._sizes[item.kind])
                c.drawString(item.column * mm, page_height - item.row * mm, item.text)
            else:
                raise TypeError(f"Unknown draw instruction: {item!r}")

        c.save()
        return buffer.getvalue()
