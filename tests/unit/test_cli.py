from __future__ import annotations

import json
from pathlib import Path

from pdf_outline.cli import main


def test_cli_writes_outline(book_pdf: Path, tmp_path: Path, capsys) -> None:
    output = tmp_path / "outline.json"

    code = main([str(book_pdf), "-o", str(output), "--level", "1", "--tree"])

    assert code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["page_count"] == 6
    assert [p["title"] for p in payload["paragraphs"]] == ["Section 1.1"]
    assert "Appendix" in capsys.readouterr().out


def test_cli_inter_level_text(book_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "outline.json"

    assert main([str(book_pdf), "-o", str(output), "--level", "1", "--inter-level-text"]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["inter_level_text"] is True
    assert [p["title"] for p in payload["paragraphs"]] == ["root", "Chapter 1", "Section 1.1"]


def test_cli_reads_json_toc(tmp_path: Path) -> None:
    toc = tmp_path / "toc.json"
    toc.write_text(
        json.dumps([{"title": "Chapter 1", "page": 1, "children": [{"title": "Section 1.1", "page": 2}]}]),
        encoding="utf-8",
    )
    output = tmp_path / "outline.json"

    assert main([str(toc), "--pages", "4", "-o", str(output), "--level", "0"]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    chapter = payload["outline"]["children"][0]
    assert (chapter["start_page_number"], chapter["end_page_number"]) == (1, 2)
    assert payload["paragraphs"][0]["title"] == "Chapter 1"


def test_cli_missing_input_fails(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.pdf")]) == 1
    assert main([str(tmp_path / "missing.json"), "--pages", "3"]) == 1


def test_cli_can_disable_inter_level_text_default(book_pdf: Path, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr("pdf_outline.cli.DEFAULT_INTER_LEVEL_TEXT", True)
    output = tmp_path / "outline.json"

    assert main([str(book_pdf), "-o", str(output), "--level", "1", "--no-inter-level-text"]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["inter_level_text"] is False
    assert [p["title"] for p in payload["paragraphs"]] == ["Section 1.1"]


def test_cli_inter_level_text_follows_default(book_pdf: Path, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr("pdf_outline.cli.DEFAULT_INTER_LEVEL_TEXT", True)
    output = tmp_path / "outline.json"

    assert main([str(book_pdf), "-o", str(output), "--level", "1"]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["inter_level_text"] is True
