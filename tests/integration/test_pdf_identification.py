from __future__ import annotations

import io
from pathlib import Path

import pytest
from pypdf import PdfReader, PdfWriter

from papersize import PaperDatabase
from papersize.pdf import PageSize, identify_pages, match_page_size

pytestmark = pytest.mark.integration


def _pdf_bytes(sizes: list[tuple[float, float]]) -> bytes:
    writer = PdfWriter()
    for width, height in sizes:
        writer.add_blank_page(width=width, height=height)
    payload = io.BytesIO()
    writer.write(payload)
    return payload.getvalue()


@pytest.fixture
def bundled_db():  # type: ignore[no-untyped-def]
    with PaperDatabase.open() as database:
        yield database


def test_identify_pages_from_path(tmp_path: Path, bundled_db: PaperDatabase) -> None:
    source = tmp_path / "mixed.pdf"
    source.write_bytes(_pdf_bytes([(612, 792), (595.2756, 841.8898), (792, 612), (300, 500)]))

    sizes = identify_pages(source, bundled_db)

    assert [(size.page_index, size.paper_name, size.landscape) for size in sizes] == [
        (0, "letter", False),
        (1, "a4", False),
        (2, "letter", True),
        (3, None, False),
    ]
    assert sizes[0] == PageSize(page_index=0, width=612.0, height=792.0, paper_name="letter", landscape=False)


def test_identify_pages_accepts_reader(bundled_db: PaperDatabase) -> None:
    reader = PdfReader(io.BytesIO(_pdf_bytes([(841.8898, 1190.551)])))
    [size] = identify_pages(reader, bundled_db)
    assert size.paper_name == "a3"
    assert size.width == pytest.approx(841.8898, abs=1e-3)


def test_exact_match_beats_landscape(bundled_db: PaperDatabase) -> None:
    record, landscape = match_page_size(bundled_db, 1224.0, 792.0)
    assert record is not None
    assert (record.name, landscape) == ("ledger", False)


def test_no_match(bundled_db: PaperDatabase) -> None:
    assert match_page_size(bundled_db, 10.0, 10.0) == (None, False)
