"""
Shared fixtures: small corpora and YAML configs written under tmp_path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pytest
import yaml


CARMILLA_TEXT = (
    "The pale girl came to my bed at night.\n"
    "Her lips were cold.\n"
    "\n"
    "\n"
    "\n"
    "I felt the bite, and I dreamed of blood.\n"
    "\n"
)

FRANKENSTEIN_TEXT = (
    "I collected the instruments of life around me.\n"
    "\n"
    "The creature opened his dull yellow eye; the creature breathed.\n"
)


def write_yaml(path: Path, data: Dict[str, Any]) -> str:
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return str(path)


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    root = tmp_path / "raw"
    root.mkdir()
    (root / "carmilla.txt").write_text(CARMILLA_TEXT, encoding="utf-8")
    (root / "frankenstein.txt").write_text(FRANKENSTEIN_TEXT, encoding="utf-8")
    return root


@pytest.fixture
def data_config(corpus_dir: Path) -> Dict[str, Any]:
    return {
        "corpus": {
            "root": str(corpus_dir),
            "sources": [
                {"path": "carmilla.txt", "label": "vampire"},
                {"path": "frankenstein.txt", "label": "frankenstein"},
            ],
        },
        "labels": {"frankenstein": 0, "vampire": 1},
        "vectorizer": {"ignore_case": True, "char_level": False, "stop_words": ["and", "of"]},
        "trim": {"min_count": None, "max_count": None},
    }


@pytest.fixture
def data_config_path(tmp_path: Path, data_config: Dict[str, Any]) -> str:
    return write_yaml(tmp_path / "data.yaml", data_config)


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a helper writing a dict as YAML under tmp_path."""

    def _write(name: str, data: Dict[str, Any]) -> str:
        return write_yaml(tmp_path / name, data)

    return _write
