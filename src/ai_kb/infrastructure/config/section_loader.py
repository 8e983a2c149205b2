"""Loader for the .ai-kb-config sections file.

The file is line oriented::

    [docs]
    docs/**/*.md
    +node_modules/some-pkg/README.md
    -docs/drafts/**

A ``[name]`` line opens a section, every other non-blank line is a raw
pattern for the section currently open. Lines before the first header are
ignored.
"""

import logging
from pathlib import Path
from typing import Dict, List

from ai_kb.domain.errors import ConfigNotFoundError, ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SECTIONS_FILENAME = ".ai-kb-config"


def parse_sections(text: str) -> Dict[str, List[str]]:
    """Parse sections file content into an ordered section mapping

    Args:
        text: Raw file content

    Returns:
        Mapping of section name to its raw pattern lines, in declaration order
    """
    sections: Dict[str, List[str]] = {}
    current = None

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if line.startswith("[") and line.endswith("]"):
            current = line[1:-1].strip()
            # A repeated header starts the section over
            sections[current] = []
        elif current is not None and line:
            sections[current].append(line)

    return sections


def load_sections(path: Path) -> Dict[str, List[str]]:
    """Read and parse a sections file

    Args:
        path: Path to the sections file

    Returns:
        Ordered section mapping (may be empty)

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigurationError: If the file exists but cannot be read
    """
    if not path.is_file():
        raise ConfigNotFoundError(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}") from e

    sections = parse_sections(text)
    if not sections:
        logger.warning(f"No sections found in {path}, nothing to generate")
    else:
        logger.debug(f"Parsed sections: {sections}")
    return sections
