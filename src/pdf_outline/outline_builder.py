from typing import Any, Dict, List, Optional

from .custom_logger import get_logger
from .models import Paragraph, UNRESOLVED_PAGE
from .navigation import OutlineDocument, OutlineNode

logger = get_logger(__name__)


class OutlineBuildError(RuntimeError):
    """Raised when the document's navigation data cannot be read."""


class _ParagraphBuilder:
    """Mutable paragraph used while the outline is walked."""

    def __init__(self, title: str, level: int, start_page_number: int,
                 end_page_number: int, position: int = 0):
        self.title = title
        self.level = level
        self.start_page_number = start_page_number
        self.end_page_number = end_page_number
        self.position = position
        self.children: List["_ParagraphBuilder"] = []

    def freeze(self, parent: Optional[Paragraph] = None) -> Paragraph:
        paragraph = Paragraph(
            parent=parent,
            title=self.title,
            level=self.level,
            start_page_number=self.start_page_number,
            end_page_number=self.end_page_number,
            position=self.position,
        )
        # Children need the frozen parent, so they are attached afterwards
        children = tuple(child.freeze(paragraph) for child in self.children)
        object.__setattr__(paragraph, 'children', children)
        return paragraph


class _PageResolver:
    """Maps outline entries to 1-based page numbers for one build pass."""

    def __init__(self, document: OutlineDocument):
        self.document = document
        self._index: Optional[Dict[Any, int]] = None

    def _page_index(self) -> Dict[Any, int]:
        if self._index is None:
            index: Dict[Any, int] = {}
            for i, page in enumerate(self.document.pages()):
                index.setdefault(page, i)
            self._index = index
        return self._index

    def page_number(self, node: Optional[OutlineNode]) -> int:
        """Return the entry's page number, or ``UNRESOLVED_PAGE``."""
        if node is None:
            return UNRESOLVED_PAGE
        page = self.document.resolve_page(node)
        if page is None:
            logger.debug(f"No destination page for outline entry '{node.title}'")
            return UNRESOLVED_PAGE
        i = self._page_index().get(page)
        if i is None:
            logger.debug(f"Destination page of '{node.title}' is not part of the document")
            return UNRESOLVED_PAGE
        return i + 1


def _position(node: OutlineNode) -> int:
    destination = node.destination()
    if destination is None:
        return 0
    top = destination.vertical_offset()
    return int(top) if top is not None else 0


def _end_page_number(node: OutlineNode, resolver: _PageResolver, page_count: int) -> int:
    """Infer where an entry ends by looking ahead in document order.

    The next sibling's start bounds the entry; when there is no sibling, or
    its page does not resolve, the entry's first child is used instead. An
    entry with neither runs to the end of the document.
    """
    sibling = node.next_sibling()
    child = node.first_child()
    if sibling is None and child is None:
        return page_count
    page_number = resolver.page_number(sibling)
    if page_number == UNRESOLVED_PAGE:
        page_number = resolver.page_number(child)
    return page_number


def _generate_paragraphs(parent: _ParagraphBuilder, scope: OutlineNode, level: int,
                         resolver: _PageResolver, page_count: int) -> _ParagraphBuilder:
    """Append one paragraph per sibling entry of ``scope`` to ``parent``.

    Each child subtree is built completely before its right sibling.
    """
    current = scope.first_child()

    while current is not None:
        paragraph = _ParagraphBuilder(
            title=current.title,
            level=level,
            start_page_number=resolver.page_number(current),
            end_page_number=_end_page_number(current, resolver, page_count),
            position=_position(current),
        )
        parent.children.append(paragraph)

        # Go one level deeper
        _generate_paragraphs(paragraph, current, level + 1, resolver, page_count)

        current = current.next_sibling()
    return parent


def build_outline(document: OutlineDocument) -> Paragraph:
    """Build the paragraph tree for a document's outline.

    Args:
        document: Adapter exposing the document's outline and pages

    Returns:
        Synthetic root paragraph (level -1) spanning the whole document

    Raises:
        OutlineBuildError: If the navigation data cannot be read
    """
    try:
        page_count = document.page_count
        root = _ParagraphBuilder("root", -1, 1, page_count, 0)
        outline = document.outline_root()
        if outline is None:
            logger.info("Document has no outline")
        else:
            _generate_paragraphs(root, outline, 0, _PageResolver(document), page_count)
    except Exception as e:
        raise OutlineBuildError(f"Failed to read document outline: {e}") from e

    paragraph = root.freeze()
    log_paragraph_tree(paragraph)
    logger.info(f"Built outline with {len(flatten(paragraph))} entries over {page_count} pages")
    return paragraph


def log_paragraph_tree(paragraph: Paragraph) -> None:
    logger.debug(str(paragraph))
    for child in paragraph.children:
        log_paragraph_tree(child)


def flatten(root: Paragraph) -> List[Paragraph]:
    """Return every paragraph below ``root`` in pre-order."""
    paragraphs: List[Paragraph] = []
    for child in root.children:
        _flatten(child, paragraphs)
    return paragraphs


def _flatten(current: Paragraph, paragraphs: List[Paragraph]) -> None:
    paragraphs.append(current)
    for child in current.children:
        _flatten(child, paragraphs)


def paragraphs_by_level(paragraph: Paragraph, level: int, inter_level_text: bool = False) -> List[Paragraph]:
    """Project the subtree of ``paragraph`` onto a single outline level.

    Paragraphs above ``level`` are descended into. With ``inter_level_text``
    each of them also contributes a detached copy spanning from its own start
    to its first child's start, so text before the first sub-entry is kept.
    Paragraphs deeper than ``level`` contribute nothing.
    """
    result: List[Paragraph] = []

    if paragraph.level < level:
        if paragraph.children:
            if inter_level_text:
                result.append(Paragraph(
                    parent=paragraph.parent,
                    title=paragraph.title,
                    level=paragraph.level,
                    start_page_number=paragraph.start_page_number,
                    end_page_number=paragraph.children[0].start_page_number,
                    position=paragraph.position,
                ))
            for child in paragraph.children:
                result.extend(paragraphs_by_level(child, level, inter_level_text))
    elif paragraph.level == level:
        result.append(paragraph)

    return result
