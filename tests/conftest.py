from __future__ import annotations

from pathlib import Path

import fitz
import pytest


def _write_pdf(path: Path, page_count: int, toc: list | None = None) -> Path:
    doc = fitz.open()
    for _ in range(page_count):
        doc.new_page()
    if toc:
        doc.set_toc(toc)
    doc.save(str(path))
    doc.close()
    return path


@pytest.fixture
def book_pdf(tmp_path: Path) -> Path:
    toc = [
        [1, "Intro", 1],
        [1, "Chapter 1", 3],
        [2, "Section 1.1", 4],
        [1, "Appendix", 6],
    ]
    return _write_pdf(tmp_path / "book.pdf", 6, toc)


@pytest.fixture
def plain_pdf(tmp_path: Path) -> Path:
    return _write_pdf(tmp_path / "plain.pdf", 3)
