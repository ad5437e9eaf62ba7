"""Command-line interface for building PDF outline trees."""
import argparse
import json
from typing import List, Optional

from .config import DEFAULT_INTER_LEVEL_TEXT, DEFAULT_LEVEL
from .custom_logger import get_logger
from .fitz_adapter import build_pdf_outline
from .outline_builder import OutlineBuildError, build_outline
from .output_utils import print_outline_summary, print_outline_tree, save_to_json, validate_outline
from .toc import TocOutlineDocument

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-outline",
        description="Build the paragraph tree of a PDF from its bookmarks.",
    )
    parser.add_argument("input", help="PDF file, or a JSON TOC when --pages is given")
    parser.add_argument("-o", "--output", help="Write the outline tree to this JSON file")
    parser.add_argument("--level", type=int, default=DEFAULT_LEVEL,
                        help="Outline level to project paragraphs onto (default: %(default)s)")
    parser.add_argument("--inter-level-text", action=argparse.BooleanOptionalAction,
                        default=DEFAULT_INTER_LEVEL_TEXT,
                        help="Keep text between a paragraph and its first child")
    parser.add_argument("--pages", type=int,
                        help="Treat INPUT as a nested JSON TOC for a document with this many pages")
    parser.add_argument("--tree", action="store_true", help="Print the full outline tree")
    return parser


def _load_toc_outline(path: str, page_count: int):
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise OutlineBuildError(f"Cannot read TOC '{path}': {e}") from e
    return build_outline(TocOutlineDocument.from_dicts(data, page_count))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    print("🚀 Building outline...")
    print(f"📁 Input file: {args.input}")

    try:
        if args.pages is not None:
            root = _load_toc_outline(args.input, args.pages)
        else:
            root = build_pdf_outline(args.input)
    except OutlineBuildError as e:
        logger.error(str(e))
        print(f"❌ {e}")
        return 1

    print_outline_summary(root)
    if args.tree:
        print_outline_tree(root)
    validate_outline(root)

    if args.output:
        save_to_json(root, args.output, level=args.level, inter_level_text=args.inter_level_text)
        print(f"💾 Saved outline to {args.output}")
    return 0
