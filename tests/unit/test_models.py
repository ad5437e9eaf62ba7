from __future__ import annotations

from pdf_outline.models import Paragraph


def test_str_indents_by_level() -> None:
    root = Paragraph(parent=None, title="root", level=-1, start_page_number=1, end_page_number=9)
    child = Paragraph(parent=root, title="Methods", level=2, start_page_number=4, end_page_number=6, position=700)

    assert str(root) == " -1) root [1,9], children = 0, pos = 0"
    assert str(child) == "     2) Methods [4,6], children = 0, pos = 700"


def test_repr_and_dict_skip_parent() -> None:
    root = Paragraph(parent=None, title="root", level=-1, start_page_number=1, end_page_number=9)
    child = Paragraph(parent=root, title="Intro", level=0, start_page_number=1, end_page_number=2)

    assert "parent" not in repr(child)
    assert child.to_dict() == {
        "title": "Intro",
        "level": 0,
        "start_page_number": 1,
        "end_page_number": 2,
        "position": 0,
        "children": [],
    }
    assert not child.is_root
    assert root.is_root
