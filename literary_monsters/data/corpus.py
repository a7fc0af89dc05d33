"""
Corpus loading utilities for the literary monsters texts.

This module is responsible for:
- reading the data configuration from config/data.yaml
- splitting raw book text into paragraph documents
- loading every configured source file into a pandas DataFrame with
  standard columns ("text", "label", "label_id", "source")

The resulting DataFrame feeds the bag-of-words vectorizer in
literary_monsters.features.bow_vectorizer.
"""

from __future__ import annotations

import os
import re
from typing import Any, Dict, List

import pandas as pd

from literary_monsters.utils.common import load_yaml


DEFAULT_DATA_CONFIG_PATH = "config/data.yaml"

_REQUIRED_SECTIONS = ("corpus", "vectorizer")


def load_data_config(config_path: str = DEFAULT_DATA_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load and return the full data configuration dictionary.

    Parameters
    ----------
    config_path : str, optional
        Path to the data YAML configuration file.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing at least the "corpus" and "vectorizer" sections.
    """
    cfg = load_yaml(config_path, kind="Data config")

    for section in _REQUIRED_SECTIONS:
        if section not in cfg:
            raise KeyError(f'Missing "{section}" section in data config: {config_path}')

    return cfg


def split_by_paragraphs(text: str) -> List[str]:
    """
    Lowercase a raw text and split it into paragraphs.

    Paragraphs are separated by blank lines; longer runs of empty lines
    count as a single separator. Line breaks inside a paragraph become
    spaces.

    Parameters
    ----------
    text : str
        Raw book text.

    Returns
    -------
    List[str]
        Paragraph strings, in reading order.
    """
    processed = re.sub(r"\n{3,}", "\n\n", text.lower())
    return [p.replace("\n", " ") for p in processed.split("\n\n")]


def _read_source(path: str, base_dir: str) -> str:
    if not os.path.isabs(path):
        path = os.path.join(base_dir, path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Corpus source not found at: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_corpus(config_path: str = DEFAULT_DATA_CONFIG_PATH) -> pd.DataFrame:
    """
    Load every configured corpus source as one row per paragraph.

    Source paths in the config are resolved relative to the "corpus.root"
    entry (default: the current working directory). Paragraphs that are
    empty after stripping are dropped.

    Parameters
    ----------
    config_path : str, optional
        Path to the data YAML configuration file.

    Returns
    -------
    pd.DataFrame
        DataFrame with columns ["text", "label", "label_id", "source"].

    Raises
    ------
    FileNotFoundError
        If a configured source file cannot be found.
    ValueError
        If no sources are configured, or a source label has no id in the
        "labels" mapping.
    """
    cfg = load_data_config(config_path)
    corpus_cfg = cfg["corpus"] or {}
    label_ids: Dict[str, int] = {str(k): int(v) for k, v in (cfg.get("labels") or {}).items()}

    sources = corpus_cfg.get("sources") or []
    if not sources:
        raise ValueError(f"No corpus sources configured in: {config_path}")

    base_dir = str(corpus_cfg.get("root", "."))

    records = []
    for source in sources:
        path = str(source["path"])
        label = str(source["label"])
        if label not in label_ids:
            raise ValueError(
                f"Label {label!r} of source {path} is missing from the labels mapping. "
                f"Known labels: {sorted(label_ids)}"
            )

        for paragraph in split_by_paragraphs(_read_source(path, base_dir)):
            if not paragraph.strip():
                continue
            records.append(
                {
                    "text": paragraph,
                    "label": label,
                    "label_id": label_ids[label],
                    "source": path,
                }
            )

    df = pd.DataFrame.from_records(records, columns=["text", "label", "label_id", "source"])
    return df.reset_index(drop=True)
