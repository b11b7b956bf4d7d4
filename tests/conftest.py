from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def write_settings(tmp_path: Path):
    """Return a helper that writes tzseries.yaml into a temp directory."""

    def _write(content: str, directory: Path | None = None) -> Path:
        target = directory or tmp_path
        target.mkdir(parents=True, exist_ok=True)
        path = target / "tzseries.yaml"
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
