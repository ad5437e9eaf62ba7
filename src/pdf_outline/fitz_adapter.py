import fitz
from typing import Iterable, Optional

from .custom_logger import get_logger
from .models import Paragraph
from .outline_builder import OutlineBuildError, build_outline

logger = get_logger(__name__)


def _outline_item(item: Optional[fitz.Outline]) -> Optional[fitz.Outline]:
    """Return ``item`` unless it is missing or wraps an empty MuPDF outline."""
    if item is None:
        return None
    # Recent PyMuPDF returns an Outline around a NULL pointer instead of None
    this = getattr(item, "this", None)
    if this is not None and not getattr(this, "m_internal", True):
        return None
    return item


class FitzDestination:
    """Destination of a PyMuPDF outline item."""

    def __init__(self, dest):
        self.dest = dest

    def vertical_offset(self) -> Optional[float]:
        # Only goto-style destinations with an explicit top carry an offset
        if self.dest.kind != fitz.LINK_GOTO:
            return None
        if not self.dest.flags & fitz.LINK_FLAG_T_VALID:
            return None
        return self.dest.lt.y


class FitzOutlineNode:
    """Wraps a ``fitz.Outline`` item, which PyMuPDF links via ``down``/``next``."""

    def __init__(self, item: fitz.Outline):
        self.item = item

    @property
    def title(self) -> str:
        return self.item.title or ""

    def first_child(self) -> Optional["FitzOutlineNode"]:
        down = _outline_item(self.item.down)
        return FitzOutlineNode(down) if down is not None else None

    def next_sibling(self) -> Optional["FitzOutlineNode"]:
        nxt = _outline_item(self.item.next)
        return FitzOutlineNode(nxt) if nxt is not None else None

    def last_child(self) -> Optional["FitzOutlineNode"]:
        child = self.first_child()
        return child.last_sibling() if child is not None else None

    def last_sibling(self) -> "FitzOutlineNode":
        node, nxt = self, self.next_sibling()
        while nxt is not None:
            node, nxt = nxt, nxt.next_sibling()
        return node

    def destination(self) -> Optional[FitzDestination]:
        if self.item.is_external:
            return None
        dest = self.item.dest
        return FitzDestination(dest) if dest is not None else None


class FitzOutlineRoot:
    """Scope node above the top-level outline items of a document."""

    title = "root"

    def __init__(self, first: fitz.Outline):
        self.first = first

    def first_child(self) -> FitzOutlineNode:
        return FitzOutlineNode(self.first)

    def next_sibling(self) -> None:
        return None

    def last_child(self) -> FitzOutlineNode:
        return FitzOutlineNode(self.first).last_sibling()

    def destination(self) -> None:
        return None


class FitzOutlineDocument:
    """Outline document backed by an open PyMuPDF document.

    Page references are 0-based page indexes as reported by PyMuPDF.
    """

    def __init__(self, doc: fitz.Document):
        self.doc = doc

    @property
    def page_count(self) -> int:
        return self.doc.page_count

    def outline_root(self) -> Optional[FitzOutlineRoot]:
        if not self.doc.get_toc(simple=True):
            return None
        first = _outline_item(self.doc.outline)
        return FitzOutlineRoot(first) if first is not None else None

    def resolve_page(self, node: FitzOutlineNode) -> Optional[int]:
        if node.item.is_external:
            return None
        page = node.item.page
        return page if page is not None and page >= 0 else None

    def pages(self) -> Iterable[int]:
        return range(self.doc.page_count)


def build_pdf_outline(pdf_path: str) -> Paragraph:
    """Open a PDF and build the paragraph tree from its bookmarks.

    Args:
        pdf_path: Path to the PDF file

    Returns:
        Root paragraph of the outline tree

    Raises:
        OutlineBuildError: If the file cannot be opened or its outline read
    """
    try:
        doc = fitz.open(pdf_path)
    except Exception as e:
        raise OutlineBuildError(f"Cannot open PDF '{pdf_path}': {e}") from e

    with doc:
        logger.info(f"Reading outline of '{pdf_path}' ({doc.page_count} pages)")
        return build_outline(FitzOutlineDocument(doc))
