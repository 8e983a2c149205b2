"""Project tree renderer"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from ai_kb.infrastructure.file_filter import IgnorePolicy

logger = logging.getLogger(__name__)

Tree = Dict[str, Optional["Tree"]]


def collect_tree_files(root: Path, ignore_policy: IgnorePolicy) -> List[str]:
    """List files under root that the ignore policy keeps

    Args:
        root: Project root
        ignore_policy: Policy deciding which paths are hidden

    Returns:
        Sorted relative POSIX paths
    """
    root = Path(root)
    files = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root)
        # prune ignored directories in place so os.walk skips them
        dirnames[:] = sorted(
            d for d in dirnames if not ignore_policy.is_ignored_directory((rel_dir / d).as_posix())
        )
        for name in filenames:
            rel = (rel_dir / name).as_posix()
            if ignore_policy.is_ignored(rel):
                logger.debug(f"Tree skips {rel}")
                continue
            files.append(rel)
    return sorted(files)


def build_tree(paths: List[str]) -> Tree:
    """Nest relative paths into a dict, files map to None"""
    tree: Tree = {}
    for path in paths:
        parts = path.split("/")
        node = tree
        for part in parts[:-1]:
            child = node.get(part)
            if child is None:
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = None
    return tree


def render_tree(tree: Tree, root_name: str = ".") -> str:
    """Return an ASCII tree in the style of the Unix ``tree`` utility.

    Directories are listed before files, each group alphabetically.
    """
    lines = [f"{root_name}/"]

    def _walk(node: Tree, prefix: str = "") -> None:
        items = sorted(node.items(), key=lambda kv: (kv[1] is None, kv[0]))
        for idx, (name, child) in enumerate(items):
            last = idx == len(items) - 1
            connector = "└── " if last else "├── "
            lines.append(f"{prefix}{connector}{name}{'/' if child is not None else ''}")
            if child is not None:
                _walk(child, prefix + ("    " if last else "│   "))

    _walk(tree)
    return "\n".join(lines)


def build_project_tree(root: Path, ignore_policy: Optional[IgnorePolicy] = None) -> str:
    root = Path(root)
    policy = ignore_policy or IgnorePolicy()
    files = collect_tree_files(root, policy)
    return render_tree(build_tree(files), root.resolve().name or ".")
