"""Tests for SelectionResolver"""

import os
from unittest.mock import patch

import pytest

from ai_kb.domain.errors import PatternResolutionError
from ai_kb.domain.models.pattern import classify_patterns
from ai_kb.infrastructure.file_filter import IgnorePolicy
from ai_kb.infrastructure.file_resolver import ResolvedFileSet, SelectionResolver

PROJECT_FILES = [
    "src/a.js",
    "src/b.ts",
    "src/legacy/a.js",
    "src/legacy/old.js",
    "src/.hidden.js",
    "node_modules/pkg-a/index.js",
    "node_modules/pkg-a/lib/util.js",
    "node_modules/pkg-b/index.js",
    "dist/bundle.js",
    "docs/guide.md",
    "package-lock.json",
    "README.md",
]


@pytest.fixture
def resolver(project):
    return SelectionResolver(project(PROJECT_FILES))


def _resolve(resolver, lines, section="test"):
    return resolver.resolve(classify_patterns(lines), section=section)


class TestIncludes:
    """Tests for include resolution"""

    def test_explicit_include_bypasses_catalogue(self, resolver):
        result = _resolve(resolver, ["+node_modules/pkg-a/**/*.js"])
        assert result.ordered() == ("node_modules/pkg-a/index.js", "node_modules/pkg-a/lib/util.js")

    def test_normal_include_respects_catalogue(self, resolver):
        result = _resolve(resolver, ["node_modules/**/*.js"])
        assert "node_modules/pkg-a/index.js" not in result
        assert len(result) == 0

    def test_explicit_include_rescues_path_dropped_by_normal_include(self, resolver):
        """Test per-pattern resolution followed by union"""
        result = _resolve(resolver, ["**/*.js", "+node_modules/pkg-a/index.js"])
        assert "node_modules/pkg-a/index.js" in result
        assert "node_modules/pkg-b/index.js" not in result
        assert "dist/bundle.js" not in result
        assert "src/a.js" in result

    def test_globstar_spans_directories(self, resolver):
        result = _resolve(resolver, ["src/**/*.js"])
        assert result.ordered() == ("src/a.js", "src/legacy/a.js", "src/legacy/old.js")

    def test_single_star_stays_in_directory(self, resolver):
        assert _resolve(resolver, ["src/*.js"]).ordered() == ("src/a.js",)

    def test_bracket_class(self, resolver):
        assert _resolve(resolver, ["src/[ab].*"]).ordered() == ("src/a.js", "src/b.ts")

    def test_hidden_files_need_explicit_dot(self, resolver):
        assert "src/.hidden.js" not in _resolve(resolver, ["src/*.js"])
        assert "src/.hidden.js" in _resolve(resolver, ["src/.*.js"])

    def test_directories_are_never_matched(self, resolver):
        result = _resolve(resolver, ["src/*", "+node_modules/*"])
        assert result.ordered() == ("src/a.js", "src/b.ts")

    def test_root_level_catalogue_file(self, resolver):
        assert _resolve(resolver, ["*.json"]).ordered() == ()
        assert _resolve(resolver, ["+*.json"]).ordered() == ("package-lock.json",)

    def test_union_deduplicates(self, resolver):
        result = _resolve(resolver, ["src/**/*.js", "src/a.js", "src/a.js"])
        assert result.ordered().count("src/a.js") == 1
        assert len(result) == 3

    def test_dot_slash_prefix_is_normalized(self, resolver):
        assert _resolve(resolver, ["./docs/*.md"]).ordered() == ("docs/guide.md",)


class TestExcludes:
    """Tests for exclude resolution"""

    def test_exclude_always_wins(self, resolver):
        result = _resolve(resolver, ["src/**/*.js", "-src/legacy/a.js"])
        assert "src/legacy/a.js" not in result
        assert result.ordered() == ("src/a.js", "src/legacy/old.js")

    def test_exclude_applies_after_all_includes(self, resolver):
        """Test that an exclude listed first still removes later includes"""
        result = _resolve(resolver, ["-src/legacy/**", "src/**/*.js", "+src/legacy/old.js"])
        assert result.ordered() == ("src/a.js",)

    def test_exclude_removes_explicit_includes(self, resolver):
        result = _resolve(resolver, ["+node_modules/**/*.js", "-node_modules/pkg-b/**"])
        assert result.ordered() == ("node_modules/pkg-a/index.js", "node_modules/pkg-a/lib/util.js")

    def test_exclude_without_matches(self, resolver):
        result = _resolve(resolver, ["docs/*.md", "-nothing/**"])
        assert result.ordered() == ("docs/guide.md",)

    def test_only_excludes(self, resolver):
        assert len(_resolve(resolver, ["-src/**"])) == 0


class TestResolution:
    """Tests for overall behaviour"""

    def test_zero_matches_is_not_an_error(self, resolver):
        result = _resolve(resolver, ["missing/**/*.rs"])
        assert result == ResolvedFileSet(files=frozenset())

    def test_result_is_order_independent(self, resolver):
        lines = ["src/**/*.js", "+node_modules/pkg-a/*.js", "-src/legacy/old.js", "docs/*.md"]
        forward = _resolve(resolver, lines)
        backward = _resolve(resolver, list(reversed(lines)))
        assert forward.files == backward.files

    def test_failing_pattern_is_isolated(self, resolver):
        """Test that one failing pattern doesn't abort the section"""
        real_match = SelectionResolver.match

        def flaky_match(self, pattern, apply_ignores=False):
            if pattern == "broken/**":
                raise OSError("permission denied")
            return real_match(self, pattern, apply_ignores=apply_ignores)

        with patch.object(SelectionResolver, "match", flaky_match):
            result = _resolve(resolver, ["broken/**", "docs/*.md"], section="docs")

        assert result.ordered() == ("docs/guide.md",)
        assert len(result.errors) == 1
        error = result.errors[0]
        assert isinstance(error, PatternResolutionError)
        assert error.pattern == "broken/**"
        assert error.section == "docs"
        assert "permission denied" in str(error)

    def test_failing_exclude_removes_nothing(self, resolver):
        with patch("ai_kb.infrastructure.file_resolver.glob.glob") as mock_glob:
            mock_glob.side_effect = [["docs/guide.md"], ValueError("bad pattern")]
            result = _resolve(resolver, ["docs/*.md", "-docs/*.md"])

        assert result.ordered() == ("docs/guide.md",)
        assert "-docs/*.md" in str(result.errors[0])

    def test_custom_ignore_policy(self, project):
        root = project(["logs/app.log", "src/main.py"])
        resolver = SelectionResolver(root, IgnorePolicy(["logs/**"]))
        result = resolver.resolve(classify_patterns(["**/*"]))
        assert result.ordered() == ("src/main.py",)


class TestMatch:
    """Tests for single glob matching"""

    def test_match_with_and_without_ignores(self, resolver):
        assert resolver.match("node_modules/pkg-b/*.js") == frozenset({"node_modules/pkg-b/index.js"})
        assert resolver.match("node_modules/pkg-b/*.js", apply_ignores=True) == frozenset()

    def test_match_returns_posix_paths(self, resolver):
        assert all("\\" not in path for path in resolver.match("**/*", apply_ignores=False))


class TestLookalikeDirectories:
    """Tests for directories named like ignored files"""

    def test_normal_include_keeps_files_below_them(self, project):
        root = project(["src/app.user/index.js", "src/lib.env.d/a.js", "src/main.js", "src/app.user.js.user"])
        result = SelectionResolver(root).resolve(classify_patterns(["src/**/*.js", "src/**/*.user"]))
        assert result.ordered() == ("src/app.user/index.js", "src/lib.env.d/a.js", "src/main.js")


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
class TestSymlinks:
    """Tests for symlinked directories"""

    def test_directory_cycle_is_not_traversed(self, project):
        root = project(["src/a.js"])
        try:
            os.symlink("..", root / "src" / "up", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")

        result = SelectionResolver(root).resolve(classify_patterns(["src/**/*.js"]))

        assert result.ordered() == ("src/a.js",)
        assert result.errors == ()
