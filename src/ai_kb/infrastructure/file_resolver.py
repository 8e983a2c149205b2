"""Resolution of section patterns to project files.

Precedence between pattern kinds:

* ``+glob`` (explicit include) matches any file, including those under the
  ignore catalogue.
* ``glob`` (normal include) matches files the catalogue does not cover.
* ``-glob`` (exclude) removes its matches after every include has been
  applied, whatever produced them.
"""

import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from pathlib import Path
from typing import Optional

from wcmatch import glob

from ai_kb.domain.errors import PatternResolutionError
from ai_kb.domain.models.pattern import Pattern, partition_patterns
from ai_kb.infrastructure.file_filter import IgnorePolicy

logger = logging.getLogger(__name__)

# No FOLLOW: "**" never descends into symlinked directories
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.NODIR


@dataclass(frozen=True)
class ResolvedFileSet:
    """Final file membership of one section"""

    files: frozenset[str]
    errors: tuple[PatternResolutionError, ...] = ()

    def ordered(self) -> tuple[str, ...]:
        """Paths in stable, sorted order"""
        return tuple(sorted(self.files))

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, path: object) -> bool:
        return path in self.files


class SelectionResolver:
    """Resolves classified patterns against a project tree"""

    def __init__(self, root: Path, ignore_policy: Optional[IgnorePolicy] = None):
        """Initialize resolver

        Args:
            root: Project root all globs are relative to
            ignore_policy: Policy applied to normal includes (catalogue default if None)
        """
        self.root = Path(root)
        self.ignore_policy = ignore_policy or IgnorePolicy()

    def resolve(self, patterns: Iterable[Pattern], section: Optional[str] = None) -> ResolvedFileSet:
        """Compute the file set for a section

        Args:
            patterns: Classified patterns in declaration order
            section: Section name, used in diagnostics

        Returns:
            Resolved file set with any per-pattern errors
        """
        includes, excludes = partition_patterns(patterns)
        errors: list[PatternResolutionError] = []

        def matches(pattern: Pattern, apply_ignores: bool) -> frozenset[str]:
            try:
                return self.match(pattern.glob, apply_ignores=apply_ignores)
            except (OSError, ValueError, re.error) as e:
                error = PatternResolutionError(str(pattern), section, e)
                logger.error(str(error))
                errors.append(error)
                return frozenset()

        included = reduce(
            frozenset.union,
            (matches(p, apply_ignores=p.applies_ignores) for p in includes),
            frozenset(),
        )
        excluded = reduce(
            frozenset.union,
            (matches(p, apply_ignores=False) for p in excludes),
            frozenset(),
        )
        if excluded & included:
            logger.debug(f"Excluded from {section or 'section'}: {sorted(excluded & included)}")

        return ResolvedFileSet(files=included - excluded, errors=tuple(errors))

    def match(self, pattern: str, apply_ignores: bool = False) -> frozenset[str]:
        """Find regular files matching a glob

        Args:
            pattern: Glob relative to the project root
            apply_ignores: Whether to drop files covered by the ignore policy

        Returns:
            Matching paths relative to the root, POSIX style
        """
        logger.debug(f"Glob pattern: {pattern} (ignores {'on' if apply_ignores else 'off'})")
        found = set()
        for match in glob.glob(pattern, root_dir=str(self.root), flags=GLOB_FLAGS):
            if not (self.root / match).is_file():
                continue
            found.add(self._relative(match))

        if apply_ignores:
            kept, _ = self.ignore_policy.filter_paths(sorted(found))
            found = set(kept)

        logger.debug(f"Matched files for {pattern}: {sorted(found)}")
        return frozenset(found)

    def _relative(self, match: str) -> str:
        path = Path(os.path.normpath(match))
        if path.is_absolute():
            try:
                path = path.relative_to(self.root.resolve())
            except ValueError:
                pass
        return path.as_posix()
