"""Pattern model - a classified line from a section"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

EXCLUDE_MARKER = "-"
EXPLICIT_INCLUDE_MARKER = "+"


class PatternKind(str, Enum):
    """How a pattern takes part in selection"""

    EXPLICIT_INCLUDE = "explicit_include"  # bypasses the ignore catalogue
    NORMAL_INCLUDE = "normal_include"
    EXCLUDE = "exclude"


@dataclass(frozen=True)
class Pattern:
    """A glob with its marker stripped"""

    kind: PatternKind
    glob: str

    @property
    def is_include(self) -> bool:
        return self.kind is not PatternKind.EXCLUDE

    @property
    def applies_ignores(self) -> bool:
        """Only normal includes are filtered through the ignore catalogue"""
        return self.kind is PatternKind.NORMAL_INCLUDE

    def __str__(self) -> str:
        if self.kind is PatternKind.EXCLUDE:
            return f"{EXCLUDE_MARKER}{self.glob}"
        if self.kind is PatternKind.EXPLICIT_INCLUDE:
            return f"{EXPLICIT_INCLUDE_MARKER}{self.glob}"
        return self.glob


def classify_pattern(line: str) -> Pattern:
    """Classify a raw pattern line by its first character.

    Args:
        line: Raw line from a section (surrounding whitespace is ignored)

    Returns:
        Classified pattern
    """
    line = line.strip()
    if line.startswith(EXCLUDE_MARKER):
        return Pattern(PatternKind.EXCLUDE, line[1:])
    if line.startswith(EXPLICIT_INCLUDE_MARKER):
        return Pattern(PatternKind.EXPLICIT_INCLUDE, line[1:])
    return Pattern(PatternKind.NORMAL_INCLUDE, line)


def classify_patterns(lines: Iterable[str]) -> list[Pattern]:
    return [classify_pattern(line) for line in lines]


def partition_patterns(patterns: Iterable[Pattern]) -> tuple[list[Pattern], list[Pattern]]:
    """Split patterns into (includes, excludes), keeping the original order"""
    includes = []
    excludes = []
    for pattern in patterns:
        if pattern.is_include:
            includes.append(pattern)
        else:
            excludes.append(pattern)
    return includes, excludes
