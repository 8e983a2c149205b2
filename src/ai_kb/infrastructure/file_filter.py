"""Ignore policy built on the global ignore catalogue"""

import logging
from collections.abc import Iterable, Sequence

from wcmatch import glob

from ai_kb.domain.ignore_catalogue import GLOBAL_IGNORES

logger = logging.getLogger(__name__)

# Catalogue entries match with dot files included, like the original's ignore option
MATCH_FLAGS = glob.GLOBSTAR | glob.DOTGLOB

TREE_SUFFIX = "/**"


class IgnorePolicy:
    """Decides whether a relative path falls under the ignore catalogue"""

    def __init__(self, patterns: Sequence[str] = GLOBAL_IGNORES):
        """Initialize ignore policy

        Args:
            patterns: Root-relative glob patterns to ignore
        """
        self.patterns = tuple(patterns)
        # only "dir/**" entries hide a whole directory
        self.directory_patterns = tuple(
            p[: -len(TREE_SUFFIX)] for p in self.patterns if p.endswith(TREE_SUFFIX)
        )

    def is_ignored(self, path: str) -> bool:
        """Check if a relative POSIX path is covered by the catalogue"""
        return glob.globmatch(path.replace("\\", "/"), self.patterns, flags=MATCH_FLAGS)

    def should_ignore(self, path: str) -> tuple[bool, str]:
        """Check if path should be ignored

        Args:
            path: Path relative to the project root

        Returns:
            Tuple of (should_ignore, reason)
        """
        path = path.replace("\\", "/")
        for pattern in self.patterns:
            if glob.globmatch(path, pattern, flags=MATCH_FLAGS):
                return True, f"matches pattern: {pattern}"
        return False, ""

    def is_ignored_directory(self, path: str) -> bool:
        """Check if everything below a relative directory is ignored"""
        path = path.replace("\\", "/").rstrip("/")
        if not self.directory_patterns:
            return False
        return glob.globmatch(path, self.directory_patterns, flags=MATCH_FLAGS)

    def with_patterns(self, *extra: str) -> "IgnorePolicy":
        """Return a policy that also ignores the given patterns"""
        return IgnorePolicy(self.patterns + tuple(p for p in extra if p not in self.patterns))

    def filter_paths(self, paths: Iterable[str]) -> tuple[list[str], list[tuple[str, str]]]:
        """Split paths into kept and ignored

        Args:
            paths: Relative paths to filter

        Returns:
            Tuple of (kept_paths, ignored_paths_with_reasons)
        """
        kept = []
        ignored = []

        for path in paths:
            should_ignore, reason = self.should_ignore(path)
            if should_ignore:
                ignored.append((path, reason))
                logger.debug(f"Ignoring {path}: {reason}")
            else:
                kept.append(path)

        if ignored:
            logger.debug(f"Filtered out {len(ignored)} files, {len(kept)} files remaining")

        return kept, ignored
