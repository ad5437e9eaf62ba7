"""
PDF Outline Package

Builds the paragraph tree of a PDF from its bookmarks and projects it onto
outline levels.

Simple Usage:
    from pdf_outline import extract_pdf_outline

    extract_pdf_outline("input.pdf", "output.json")
"""
from typing import Optional

from .custom_logger import get_logger
from .fitz_adapter import FitzOutlineDocument, build_pdf_outline
from .models import Paragraph, UNRESOLVED_PAGE
from .outline_builder import OutlineBuildError, build_outline, flatten, paragraphs_by_level
from .output_utils import save_to_json
from .toc import TocEntry, TocOutlineDocument

logger = get_logger(__name__)


def extract_pdf_outline(input_path: str, output_path: str, level: Optional[int] = None,
                        inter_level_text: bool = False) -> bool:
    """
    Simple interface to build a PDF's outline tree and save it to JSON.

    Args:
        input_path: Path to the input PDF file
        output_path: Path to save the output JSON file
        level: Optional outline level to project paragraphs onto
        inter_level_text: Include gap paragraphs in the projection

    Returns:
        True if successful, False otherwise
    """
    try:
        # Build the tree
        root = build_pdf_outline(input_path)

        # Save to JSON
        save_to_json(root, output_path, level=level, inter_level_text=inter_level_text)

        return True

    except (OutlineBuildError, OSError) as e:
        logger.error(f"Error processing PDF: {str(e)}")
        return False


__all__ = [
    "FitzOutlineDocument",
    "OutlineBuildError",
    "Paragraph",
    "TocEntry",
    "TocOutlineDocument",
    "UNRESOLVED_PAGE",
    "build_outline",
    "build_pdf_outline",
    "extract_pdf_outline",
    "flatten",
    "paragraphs_by_level",
    "save_to_json",
]
