"""Markdown rendering and writing of knowledge base documents"""

import logging
from pathlib import Path, PurePosixPath
from typing import Iterable, Tuple

from ai_kb.domain.errors import OutputWriteError

logger = logging.getLogger(__name__)

FENCE = "```"


def render_file_block(path: str, content: str) -> str:
    """Render one file as a heading followed by a fenced block

    Args:
        path: File path relative to the project root
        content: Already normalized content

    Returns:
        Markdown fragment
    """
    language = PurePosixPath(path).suffix[1:]
    return f"## {path}\n{FENCE}{language}\n{content}\n{FENCE}"


def render_section(blocks: Iterable[Tuple[str, str]]) -> str:
    """Join (path, content) pairs into one document"""
    return "\n\n".join(render_file_block(path, content) for path, content in blocks)


def render_tree_document(tree: str) -> str:
    return f"## Project tree\n{FENCE}\n{tree}\n{FENCE}"


def write_document(directory: Path, filename: str, body: str) -> Path:
    """Write a rendered document

    Args:
        directory: Output directory (created if missing)
        filename: Document filename
        body: Markdown text

    Returns:
        Path of the written file

    Raises:
        OutputWriteError: If the file cannot be written
    """
    out_path = Path(directory) / filename
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(body, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(out_path, e) from e
    logger.info(f"Generated {out_path}")
    return out_path
