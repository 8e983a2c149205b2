"""SectionResult model - outcome of building one section"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass
class SectionResult:
    """Result of processing one configured section"""

    name: str
    files: Tuple[str, ...] = ()  # Resolved relative paths, sorted
    body: Optional[str] = None  # Rendered markdown (None if nothing rendered)
    output_path: Optional[Path] = None  # Where the body was written
    errors: List[str] = field(default_factory=list)  # Non-fatal diagnostics

    @property
    def has_files(self) -> bool:
        return len(self.files) > 0

    @property
    def is_successful(self) -> bool:
        """True when no pattern, file or write error occurred"""
        return not self.errors

    @property
    def was_written(self) -> bool:
        return self.output_path is not None
