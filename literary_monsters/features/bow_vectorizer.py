"""
Bag-of-words feature extraction helpers for the monster classifier.

This module provides helpers to:
- build a TermVectorizer from the "vectorizer" section of config/data.yaml
- fit it on a pandas Series of documents and trim it per the "trim" section
- persist and reload the fitted vectorizer
- transform new texts into count-vector matrices or bag-of-words pairs

Persisted vectorizers are stored under the artifacts directory defined
in config/app.yaml.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

import joblib
import numpy as np
import pandas as pd

from literary_monsters.data.corpus import DEFAULT_DATA_CONFIG_PATH, load_data_config
from literary_monsters.features.vocabulary import BagOfWords, TermVectorizer, VectorizerConfig
from literary_monsters.utils.common import ensure_dir_exists, resolve_artifacts_dir


logger = logging.getLogger(__name__)

DEFAULT_VECTORIZER_FILENAME = "text_vectorizer.joblib"


def _optional_int(value) -> Optional[int]:
    return None if value is None else int(value)


def build_vectorizer(config_path: str = DEFAULT_DATA_CONFIG_PATH) -> TermVectorizer:
    """
    Construct an empty TermVectorizer configured from config/data.yaml.

    Parameters
    ----------
    config_path : str
        Path to the data YAML configuration.

    Returns
    -------
    TermVectorizer
        Vectorizer holding only the unknown sentinel.
    """
    cfg = load_data_config(config_path)
    return TermVectorizer(VectorizerConfig.from_dict(cfg["vectorizer"]))


def fit_vectorizer_from_series(
    texts: pd.Series,
    config_path: str = DEFAULT_DATA_CONFIG_PATH,
    artifacts_dir: Optional[str] = None,
    save: bool = True,
    filename: str = DEFAULT_VECTORIZER_FILENAME,
) -> TermVectorizer:
    """
    Fit a bag-of-words vectorizer from a pandas Series of documents.

    This function:
    - builds a vectorizer from the "vectorizer" config section
    - ingests every document, reindexing once at the end
    - trims the vocabulary with the "trim" config section, if present
    - optionally saves the fitted vectorizer to disk

    Parameters
    ----------
    texts : pd.Series
        Series of raw documents.
    config_path : str
        Path to the data YAML configuration.
    artifacts_dir : Optional[str]
        Directory where the vectorizer should be saved. If None, this
        will be determined from config/app.yaml.
    save : bool
        Whether to persist the fitted vectorizer to disk.
    filename : str
        File name for the saved vectorizer.

    Returns
    -------
    TermVectorizer
        Fitted vectorizer.
    """
    cfg = load_data_config(config_path)
    vectorizer = TermVectorizer(VectorizerConfig.from_dict(cfg["vectorizer"]))
    vectorizer.ingest_many(texts.astype(str).values)
    logger.info("Ingested %d documents, vocabulary size %d.", len(texts), vectorizer.vocab_size)

    trim_cfg = cfg.get("trim", {}) or {}
    min_count = _optional_int(trim_cfg.get("min_count"))
    max_count = _optional_int(trim_cfg.get("max_count"))
    if min_count is not None or max_count is not None:
        vectorizer.trim(min_count=min_count, max_count=max_count)

    if save:
        save_vectorizer(vectorizer, artifacts_dir=artifacts_dir, filename=filename)

    return vectorizer


def save_vectorizer(
    vectorizer: TermVectorizer,
    artifacts_dir: Optional[str] = None,
    filename: str = DEFAULT_VECTORIZER_FILENAME,
) -> str:
    """
    Save a vectorizer with joblib under the artifacts directory.

    Returns
    -------
    str
        Full path to the saved file.
    """
    artifacts_dir = resolve_artifacts_dir(artifacts_dir)
    ensure_dir_exists(artifacts_dir)
    path = os.path.join(artifacts_dir, filename)
    joblib.dump(vectorizer, path)
    logger.info("Saved vectorizer (%d terms) to %s", vectorizer.vocab_size, path)
    return path


def load_vectorizer(
    artifacts_dir: Optional[str] = None,
    filename: str = DEFAULT_VECTORIZER_FILENAME,
) -> TermVectorizer:
    """
    Load a previously saved vectorizer from disk.

    Parameters
    ----------
    artifacts_dir : Optional[str]
        Directory where the vectorizer is stored. If None, this will be
        determined from config/app.yaml.
    filename : str
        File name of the saved vectorizer.

    Returns
    -------
    TermVectorizer
        Loaded vectorizer.

    Raises
    ------
    FileNotFoundError
        If the vectorizer file does not exist.
    TypeError
        If the file holds something other than a TermVectorizer.
    """
    artifacts_dir = resolve_artifacts_dir(artifacts_dir)
    path = os.path.join(artifacts_dir, filename)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Vectorizer not found at: {path}")

    vectorizer = joblib.load(path)
    if not isinstance(vectorizer, TermVectorizer):
        raise TypeError(f"Expected a TermVectorizer in {path}, got {type(vectorizer).__name__}")
    return vectorizer


def transform_texts_to_counts(
    texts: Iterable[str],
    vectorizer: TermVectorizer,
) -> np.ndarray:
    """
    Transform an iterable of raw texts into a count-vector matrix.

    Parameters
    ----------
    texts : Iterable[str]
        Iterable of raw text strings.
    vectorizer : TermVectorizer
        Fitted vectorizer.

    Returns
    -------
    np.ndarray
        Integer matrix of shape (n_samples, vocab_size), columns in
        vocabulary index order.
    """
    rows = [vectorizer.to_count_vector(str(text)) for text in texts]
    if not rows:
        return np.zeros((0, vectorizer.vocab_size), dtype=np.int64)
    return np.array(rows, dtype=np.int64)


def transform_texts_to_bow(
    texts: Iterable[str],
    vectorizer: TermVectorizer,
) -> List[BagOfWords]:
    """
    Transform an iterable of raw texts into bag-of-words pair lists.
    """
    return [vectorizer.to_bag_of_words(str(text)) for text in texts]
