"""Whitespace normalization for file content"""

import re
from pathlib import PurePosixPath

# Languages where indentation or line breaks carry meaning
WHITESPACE_SENSITIVE_EXTENSIONS = frozenset(
    {
        ".py",  # Python
        ".yaml",  # YAML
        ".yml",  # YAML
        ".jade",  # Jade/Pug
        ".haml",  # Haml
        ".slim",  # Slim
        ".coffee",  # CoffeeScript
        ".pug",  # Pug
        ".styl",  # Stylus
    }
)

_WHITESPACE_RUN = re.compile(r"\s+")
_SPACE_AROUND_BRACKET = re.compile(r"\s*([(){}\[\]])\s*")
_SPACE_AFTER_SEMICOLON = re.compile(r";\s+")
_SPACE_AFTER_COMMA = re.compile(r",\s+")


def is_whitespace_sensitive(path: str) -> bool:
    """Check if a file's extension marks it as whitespace-sensitive"""
    return PurePosixPath(path).suffix in WHITESPACE_SENSITIVE_EXTENSIONS


def normalize_content(content: str, whitespace_sensitive: bool) -> str:
    """Remove unnecessary whitespace from file content.

    Whitespace-sensitive content keeps its line structure and indentation;
    only trailing whitespace and blank lines are dropped. Everything else is
    compacted onto a single line.

    Args:
        content: Raw file content
        whitespace_sensitive: Whether layout must be preserved

    Returns:
        Normalized content
    """
    lines = content.split("\n")
    if whitespace_sensitive:
        return "\n".join(line.rstrip() for line in lines if line.strip())

    text = " ".join(line.strip() for line in lines if line.strip())
    text = _WHITESPACE_RUN.sub(" ", text)
    text = _SPACE_AROUND_BRACKET.sub(r"\1", text)
    text = _SPACE_AFTER_SEMICOLON.sub(";", text)
    return _SPACE_AFTER_COMMA.sub(",", text)


def normalize_file_content(path: str, content: str) -> str:
    return normalize_content(content, is_whitespace_sensitive(path))
