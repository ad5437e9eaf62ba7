from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

# Page number used when an outline entry cannot be located in the document
UNRESOLVED_PAGE = -1


@dataclass(frozen=True, eq=False)
class Paragraph:
    """One outline entry and the page span inferred for it.

    ``parent`` is a read-only back-reference; it is left out of repr and
    comparison so that walking the tree never recurses upwards.
    """
    parent: Optional["Paragraph"] = field(repr=False, compare=False)
    title: str
    level: int
    start_page_number: int
    end_page_number: int
    position: int = 0
    children: Tuple["Paragraph", ...] = ()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __str__(self) -> str:
        indent = "" if self.level < 0 else " " * (self.level * 2)
        return (
            f"{indent} {self.level}) {self.title} "
            f"[{self.start_page_number},{self.end_page_number}], "
            f"children = {len(self.children)}, pos = {self.position}"
        )

    def to_dict(self, include_children: bool = True) -> Dict[str, Any]:
        """Return a JSON-ready dict of this node (and its subtree)."""
        data: Dict[str, Any] = {
            'title': self.title,
            'level': self.level,
            'start_page_number': self.start_page_number,
            'end_page_number': self.end_page_number,
            'position': self.position,
        }
        if include_children:
            data['children'] = [child.to_dict() for child in self.children]
        return data
