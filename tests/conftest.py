"""
Shared fixtures for the token build tests.
"""

import json
from pathlib import Path

import pytest


@pytest.fixture
def sample_tree() -> dict:
    """Small token tree covering nesting, numbers and lists."""
    return {
        "colors": {
            "primary": {"500": "#007cff", "700": "#0057b3"},
            "neutral": {"0": "#ffffff"},
        },
        "spacing": {"4": "16px", "6": "24px"},
        "opacity": {"muted": 0.2, "full": 1},
        "fontFamily": {"mono": ["Menlo", "monospace"]},
    }


@pytest.fixture
def src_dir(tmp_path: Path, sample_tree: dict) -> Path:
    """Directory holding a tokens.json built from sample_tree."""
    src = tmp_path / "design"
    src.mkdir()
    (src / "tokens.json").write_text(json.dumps(sample_tree), encoding="utf-8")
    return src


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    return tmp_path / "dist"
