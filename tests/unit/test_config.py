from __future__ import annotations

import pytest

from pdf_outline import config


def test_env_int_parses_value(monkeypatch) -> None:
    monkeypatch.setenv("PDF_OUTLINE_TEST_INT", "2")
    assert config._env_int("PDF_OUTLINE_TEST_INT", 0) == 2


def test_env_int_defaults_when_blank(monkeypatch) -> None:
    monkeypatch.setenv("PDF_OUTLINE_TEST_INT", " ")
    assert config._env_int("PDF_OUTLINE_TEST_INT", 5) == 5


def test_env_int_rejects_garbage(monkeypatch) -> None:
    monkeypatch.setenv("PDF_OUTLINE_TEST_INT", "deep")
    with pytest.raises(ValueError, match="PDF_OUTLINE_TEST_INT"):
        config._env_int("PDF_OUTLINE_TEST_INT", 0)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("Yes", True), ("on", True), ("false", False), ("0", False)],
)
def test_env_bool(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("PDF_OUTLINE_TEST_BOOL", raw)
    assert config._env_bool("PDF_OUTLINE_TEST_BOOL", not expected) is expected


def test_env_bool_default(monkeypatch) -> None:
    monkeypatch.delenv("PDF_OUTLINE_TEST_BOOL", raising=False)
    assert config._env_bool("PDF_OUTLINE_TEST_BOOL", True) is True
