import json
from pathlib import Path
from typing import Optional

from .models import Paragraph, UNRESOLVED_PAGE
from .outline_builder import flatten, paragraphs_by_level


def save_to_json(root: Paragraph, output_path: str, level: Optional[int] = None,
                 inter_level_text: bool = False) -> None:
    """Save an outline tree to JSON file.

    Args:
        root: Root paragraph of the outline tree
        output_path: Path to output JSON file
        level: If given, also write the paragraphs projected onto this level
        inter_level_text: Include gap paragraphs in the level projection
    """
    payload = {
        'page_count': root.end_page_number,
        'outline': root.to_dict(),
    }
    if level is not None:
        payload['level'] = level
        payload['inter_level_text'] = inter_level_text
        payload['paragraphs'] = [
            p.to_dict(include_children=False)
            for p in paragraphs_by_level(root, level, inter_level_text)
        ]

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def print_outline_summary(root: Paragraph) -> None:
    """Print a summary of the outline tree.

    Args:
        root: Root paragraph of the outline tree
    """
    paragraphs = flatten(root)
    print(f"\n📄 Pages: {root.end_page_number}")
    print(f"📊 Total outline entries: {len(paragraphs)}")

    # Group entries by level
    level_counts = {}
    for paragraph in paragraphs:
        level_counts[paragraph.level] = level_counts.get(paragraph.level, 0) + 1

    print("📋 Entry breakdown:")
    for level in sorted(level_counts.keys()):
        print(f"   Level {level}: {level_counts[level]} entries")


def print_outline_tree(root: Paragraph, max_depth: Optional[int] = None) -> None:
    """Print the outline tree, one entry per line.

    Args:
        root: Root paragraph of the outline tree
        max_depth: Deepest level to print; everything when None
    """
    print(root)
    for paragraph in flatten(root):
        if max_depth is None or paragraph.level <= max_depth:
            print(paragraph)


def validate_outline(root: Paragraph) -> bool:
    """Report entries whose page span could not be fully inferred.

    Unresolved pages are errors; spans ending before they start are only
    warnings since unusual destination ordering produces them legitimately.

    Args:
        root: Root paragraph of the outline tree

    Returns:
        True if every start and end page was resolved
    """
    paragraphs = flatten(root)

    unresolved = [
        p.title for p in paragraphs
        if UNRESOLVED_PAGE in (p.start_page_number, p.end_page_number)
    ]
    inverted = [
        p.title for p in paragraphs
        if p.end_page_number != UNRESOLVED_PAGE
        and p.start_page_number != UNRESOLVED_PAGE
        and p.end_page_number < p.start_page_number
    ]

    if inverted:
        print("⚠️  Entries ending before they start:")
        for title in inverted:
            print(f"   - {title}")

    if unresolved:
        print("⚠️  Entries with unresolved pages:")
        for title in unresolved:
            print(f"   - {title}")
        return False

    print("✅ Outline page spans resolved")
    return True
