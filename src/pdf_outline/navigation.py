"""Navigation capability the outline builder reads documents through.

One adapter per backing document format implements these protocols:
``fitz_adapter`` for PDFs opened with PyMuPDF and ``toc`` for in-memory
tables of contents.
"""
from __future__ import annotations

from typing import Any, Hashable, Iterable, Optional, Protocol


class Destination(Protocol):
    def vertical_offset(self) -> Optional[float]:
        """Top coordinate on the target page, or ``None`` if the destination has none."""
        ...


class OutlineNode(Protocol):
    @property
    def title(self) -> str: ...

    def first_child(self) -> Optional[OutlineNode]: ...

    def next_sibling(self) -> Optional[OutlineNode]: ...

    def last_child(self) -> Optional[OutlineNode]: ...

    def destination(self) -> Optional[Destination]: ...


class OutlineDocument(Protocol):
    @property
    def page_count(self) -> int: ...

    def outline_root(self) -> Optional[OutlineNode]:
        """Scope node whose children are the top-level entries, or ``None``."""
        ...

    def resolve_page(self, node: OutlineNode) -> Optional[Hashable]:
        """Page reference the entry points at, or ``None``."""
        ...

    def pages(self) -> Iterable[Any]:
        """Page references in document order."""
        ...
