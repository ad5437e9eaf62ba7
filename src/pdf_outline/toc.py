"""In-memory tables of contents as outline documents.

A TOC can be given as nested :class:`TocEntry` objects, as the flat
``[level, title, page]`` list PyMuPDF's ``Document.get_toc()`` returns,
or as nested dicts (e.g. loaded from JSON).
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence


@dataclass
class TocEntry:
    """One bookmark: a title, its 1-based page and optional top offset."""
    title: str
    page: Optional[int] = None
    top: Optional[float] = None
    children: List["TocEntry"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TocEntry":
        return cls(
            title=str(data.get('title', '')),
            page=data.get('page'),
            top=data.get('top'),
            children=[cls.from_dict(child) for child in data.get('children', [])],
        )


class TocDestination:
    def __init__(self, top: Optional[float]):
        self.top = top

    def vertical_offset(self) -> Optional[float]:
        return self.top


class TocNode:
    """Position of an entry among its siblings."""

    def __init__(self, siblings: Sequence[TocEntry], index: int):
        self.siblings = siblings
        self.index = index

    @property
    def entry(self) -> TocEntry:
        return self.siblings[self.index]

    @property
    def title(self) -> str:
        return self.entry.title

    def first_child(self) -> Optional["TocNode"]:
        children = self.entry.children
        return TocNode(children, 0) if children else None

    def last_child(self) -> Optional["TocNode"]:
        children = self.entry.children
        return TocNode(children, len(children) - 1) if children else None

    def next_sibling(self) -> Optional["TocNode"]:
        if self.index + 1 < len(self.siblings):
            return TocNode(self.siblings, self.index + 1)
        return None

    def destination(self) -> Optional[TocDestination]:
        if self.entry.top is None:
            return None
        return TocDestination(self.entry.top)


class TocOutlineDocument:
    """Outline document over an in-memory TOC.

    Page references are the 1-based page numbers stored on the entries;
    numbers outside ``1..page_count`` do not resolve.
    """

    def __init__(self, entries: Sequence[TocEntry], page_count: int):
        self.entries = list(entries)
        self._page_count = page_count

    @property
    def page_count(self) -> int:
        return self._page_count

    def outline_root(self) -> Optional[TocNode]:
        if not self.entries:
            return None
        return TocNode([TocEntry("root", children=self.entries)], 0)

    def resolve_page(self, node: TocNode) -> Optional[int]:
        return node.entry.page

    def pages(self) -> Iterable[int]:
        return range(1, self._page_count + 1)

    @classmethod
    def from_flat_toc(cls, toc: Sequence[Sequence[Any]], page_count: int) -> "TocOutlineDocument":
        """Create a document from a ``get_toc()``-style list.

        Args:
            toc: Rows of ``[level, title, page]`` with an optional fourth
                destination dict; levels start at 1
            page_count: Number of pages in the document

        Returns:
            Outline document with the rows nested by level
        """
        entries: List[TocEntry] = []
        # stack[i] holds the children list for level i + 1
        stack: List[List[TocEntry]] = [entries]
        for row in toc:
            level, title, page = int(row[0]), str(row[1]), int(row[2])
            if level < 1 or level > len(stack):
                raise ValueError(f"Invalid outline level {level} for entry '{title}'")
            del stack[level:]
            entry = TocEntry(title=title, page=page, top=_top_from_dest(row))
            stack[level - 1].append(entry)
            stack.append(entry.children)
        return cls(entries, page_count)

    @classmethod
    def from_dicts(cls, data: Iterable[Mapping[str, Any]], page_count: int) -> "TocOutlineDocument":
        return cls([TocEntry.from_dict(item) for item in data], page_count)


def _top_from_dest(row: Sequence[Any]) -> Optional[float]:
    if len(row) < 4 or not isinstance(row[3], dict):
        return None
    to = row[3].get('to')
    if to is None:
        return None
    # fitz.Point and plain (x, y) pairs both index this way
    return float(to[1])

