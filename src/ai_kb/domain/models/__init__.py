"""Domain models"""

from ai_kb.domain.models.pattern import (
    Pattern,
    PatternKind,
    classify_pattern,
    classify_patterns,
    partition_patterns,
)
from ai_kb.domain.models.section_result import SectionResult

__all__ = [
    "Pattern",
    "PatternKind",
    "SectionResult",
    "classify_pattern",
    "classify_patterns",
    "partition_patterns",
]
