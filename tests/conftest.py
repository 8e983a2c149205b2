"""Shared fixtures"""

from pathlib import Path
from typing import Dict, Iterable, Union

import pytest


def write_files(root: Path, files: Union[Dict[str, str], Iterable[str]]) -> Path:
    """Create files below root; an iterable of paths gets placeholder content"""
    if not isinstance(files, dict):
        files = {path: f"// {path}\n" for path in files}
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def project(tmp_path):
    """Factory creating a project tree in tmp_path"""

    def _make(files):
        return write_files(tmp_path, files)

    return _make
