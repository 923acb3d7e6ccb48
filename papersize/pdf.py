from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pypdf import PdfReader

from papersize.database import PaperDatabase, PaperRecord
from papersize.events import log_event
from papersize.units import points_to_mm

_LOGGER = logging.getLogger("papersize.pdf")


@dataclass(frozen=True)
class PageSize:
    page_index: int
    width: float
    height: float
    paper_name: str | None
    landscape: bool


def match_page_size(database: PaperDatabase, width: float, height: float) -> tuple[PaperRecord | None, bool]:
    """Find the paper for a page of ``width`` x ``height`` points.

    Exact matches win over millimetre-rounded ones, and portrait over
    landscape. Returns ``(record, landscape)``; record is None when no paper fits.
    """
    for landscape, (w, h) in ((False, (width, height)), (True, (height, width))):
        record = database.lookup_by_dimensions(w, h)
        if record is not None:
            return record, landscape
    for landscape, (w, h) in ((False, (width, height)), (True, (height, width))):
        record = database.lookup_by_millimetres(points_to_mm(w), points_to_mm(h))
        if record is not None:
            return record, landscape
    return None, False


def identify_pages(source: PdfReader | Path | str, database: PaperDatabase) -> list[PageSize]:
    reader = source if isinstance(source, PdfReader) else PdfReader(str(source))

    sizes: list[PageSize] = []
    for page_index, page in enumerate(reader.pages):
        width = float(page.mediabox.width)
        height = float(page.mediabox.height)
        record, landscape = match_page_size(database, width, height)
        paper_name = None if record is None else record.name
        log_event(
            _LOGGER,
            logging.DEBUG,
            "pdf.identify.page",
            page_index=page_index,
            width=width,
            height=height,
            paper_name=paper_name,
            landscape=landscape,
        )
        sizes.append(
            PageSize(
                page_index=page_index,
                width=width,
                height=height,
                paper_name=paper_name,
                landscape=landscape,
            )
        )

    return sizes
