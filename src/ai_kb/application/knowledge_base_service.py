"""Service for building knowledge base documents from configured sections"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from wcmatch import glob

from ai_kb.domain.config import OutputConfig
from ai_kb.domain.errors import FileReadError, OutputWriteError
from ai_kb.domain.models.pattern import classify_patterns, partition_patterns
from ai_kb.domain.models.section_result import SectionResult
from ai_kb.domain.normalizer import normalize_file_content
from ai_kb.infrastructure.file_filter import IgnorePolicy
from ai_kb.infrastructure.file_resolver import SelectionResolver
from ai_kb.infrastructure.markdown import render_section, render_tree_document, write_document
from ai_kb.infrastructure.tree_renderer import build_project_tree

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = OutputConfig().prefix


class KnowledgeBaseService:
    """Builds one markdown document per configured section"""

    def __init__(
        self,
        root: Path,
        output_dir: Optional[Path] = None,
        output_config: Optional[OutputConfig] = None,
        resolver: Optional[SelectionResolver] = None,
        ignore_policy: Optional[IgnorePolicy] = None,
    ):
        """Initialize knowledge base service

        Args:
            root: Project root patterns are resolved against
            output_dir: Where documents are written (defaults to root)
            output_config: Output naming (defaults if None)
            resolver: Selection resolver (created for root if None)
            ignore_policy: Ignore policy shared by resolver and tree renderer
        """
        self.root = Path(root)
        self.output_dir = Path(output_dir) if output_dir is not None else self.root
        self.output_config = output_config or OutputConfig()
        self.ignore_policy = ignore_policy or self._default_ignore_policy()
        self.resolver = resolver or SelectionResolver(self.root, self.ignore_policy)

    def _default_ignore_policy(self) -> IgnorePolicy:
        """Catalogue policy, extended to hide documents written outside the default location"""
        policy = IgnorePolicy()
        pattern = self.output_pattern()
        if pattern is None:
            return policy
        return policy.with_patterns(pattern)

    def output_pattern(self) -> Optional[str]:
        """Root-relative glob of the documents this service writes

        Returns:
            The glob, or None when the catalogue already covers the documents
            or they are written outside the project root
        """
        try:
            rel_dir = self.output_dir.resolve().relative_to(self.root.resolve())
        except ValueError:
            return None

        prefix = self.output_config.prefix
        if rel_dir == Path(".") and prefix == DEFAULT_PREFIX:
            return None

        name = f"{glob.escape(prefix)}*.md"
        if rel_dir == Path("."):
            return name
        return f"{glob.escape(rel_dir.as_posix())}/{name}"

    def generate(self, sections: Dict[str, Sequence[str]]) -> List[SectionResult]:
        """Build every section in declaration order

        Args:
            sections: Ordered mapping of section name to raw pattern lines

        Returns:
            One result per section
        """
        results = []
        for name, lines in sections.items():
            results.append(self.generate_section(name, lines))
        return results

    def generate_section(self, name: str, lines: Sequence[str]) -> SectionResult:
        """Resolve, render and write a single section

        Args:
            name: Section name
            lines: Raw pattern lines of the section

        Returns:
            Section result; errors are recorded, never raised
        """
        logger.info(f"Processing section: {name}")
        patterns = classify_patterns(lines)
        includes, excludes = partition_patterns(patterns)
        logger.info(f"Include patterns: {[str(p) for p in includes]}")
        logger.info(f"Exclude patterns: {[p.glob for p in excludes]}")

        resolved = self.resolver.resolve(patterns, section=name)
        result = SectionResult(
            name=name,
            files=resolved.ordered(),
            errors=[str(e) for e in resolved.errors],
        )
        logger.info(f"Matching files for {name}: {list(result.files)}")

        if not result.has_files:
            logger.info(f"No files found for section {name}. Skipping markdown generation.")
            return result

        blocks = self._read_blocks(result)
        if not blocks:
            logger.warning(f"No readable files for section {name}. Skipping markdown generation.")
            return result

        result.body = render_section(blocks)
        try:
            result.output_path = write_document(
                self.output_dir, self.output_config.filename_for(name), result.body
            )
        except OutputWriteError as e:
            logger.error(f"Section {name}: {e}")
            result.errors.append(str(e))

        return result

    def _read_blocks(self, result: SectionResult) -> List[Tuple[str, str]]:
        """Read and normalize every file of a section, skipping unreadable ones"""
        blocks = []
        for path in result.files:
            try:
                content = self._read_file(path, result.name)
            except FileReadError as e:
                logger.error(str(e))
                result.errors.append(str(e))
                continue
            blocks.append((path, normalize_file_content(path, content)))
        return blocks

    def _read_file(self, path: str, section: str) -> str:
        try:
            return (self.root / path).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(path, section, e) from e

    def generate_tree(self) -> SectionResult:
        """Render the project tree and write it as a document

        Returns:
            Result named after the configured tree document
        """
        name = self.output_config.tree_name
        logger.info(f"Generating project tree for {self.root}")
        result = SectionResult(name=name)
        result.body = render_tree_document(build_project_tree(self.root, self.ignore_policy))
        try:
            result.output_path = write_document(
                self.output_dir, self.output_config.filename_for(name), result.body
            )
        except OutputWriteError as e:
            logger.error(str(e))
            result.errors.append(str(e))
        return result
