"""
Inference helpers for the pre-trained monster-type classifier.

The classifier is a fitted scikit-learn estimator exposing
`predict_proba`, trained on count vectors produced by a TermVectorizer.
This module loads it from the artifacts directory and turns a raw text
into a prediction record (monster type plus probability).

Class display names come from the "classifier" section of config/app.yaml.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

import joblib
import numpy as np

from literary_monsters.features.vocabulary import TermVectorizer
from literary_monsters.utils.common import (
    DEFAULT_APP_CONFIG_PATH,
    load_app_config,
    resolve_artifacts_dir,
)


DEFAULT_CLASSIFIER_FILENAME = "literary_monsters.joblib"
DEFAULT_LABEL_NAMES: Dict[int, str] = {0: "Frankenstein's", 1: "Vampire"}
DEFAULT_FALLBACK_LABEL = "not sure"


def load_classifier(
    artifacts_dir: Optional[str] = None,
    filename: str = DEFAULT_CLASSIFIER_FILENAME,
) -> Any:
    """
    Load a previously saved classifier from disk.

    Parameters
    ----------
    artifacts_dir : Optional[str]
        Directory where the classifier is stored. If None, this will be
        determined from config/app.yaml.
    filename : str
        File name of the saved classifier.

    Returns
    -------
    Any
        Fitted estimator with a `predict_proba` method.

    Raises
    ------
    FileNotFoundError
        If the classifier file does not exist.
    TypeError
        If the loaded object has no `predict_proba` method.
    """
    artifacts_dir = resolve_artifacts_dir(artifacts_dir)
    path = os.path.join(artifacts_dir, filename)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Classifier not found at: {path}")

    clf = joblib.load(path)
    if not callable(getattr(clf, "predict_proba", None)):
        raise TypeError(f"Object in {path} does not provide predict_proba().")
    return clf


def get_label_names(config_path: str = DEFAULT_APP_CONFIG_PATH) -> Dict[int, str]:
    """
    Return the class index -> display name mapping from config/app.yaml,
    falling back to DEFAULT_LABEL_NAMES when the section is absent.
    """
    cfg = load_app_config(config_path)
    clf_cfg = cfg.get("classifier", {}) or {}
    names = clf_cfg.get("label_names") or DEFAULT_LABEL_NAMES
    return {int(k): str(v) for k, v in names.items()}


def predict_monster(
    text: str,
    vectorizer: TermVectorizer,
    classifier: Any,
    label_names: Optional[Mapping[int, str]] = None,
    fallback_label: str = DEFAULT_FALLBACK_LABEL,
) -> Dict[str, Any]:
    """
    Classify a text as one of the monster types.

    Parameters
    ----------
    text : str
        Raw input text.
    vectorizer : TermVectorizer
        Vectorizer the classifier was trained against.
    classifier : Any
        Fitted estimator with `predict_proba`.
    label_names : Optional[Mapping[int, str]]
        Class index -> display name. Defaults to DEFAULT_LABEL_NAMES.
    fallback_label : str
        Name reported when the winning class has no display name.

    Returns
    -------
    Dict[str, Any]
        Keys "input_text", "bag_of_words", "monster_type_prediction",
        and "prediction_probability".
    """
    if label_names is None:
        label_names = DEFAULT_LABEL_NAMES

    features = [vectorizer.to_count_vector(text)]
    probabilities = np.asarray(classifier.predict_proba(features))[0]

    best = int(np.argmax(probabilities))
    # predict_proba columns follow classes_, which need not be 0..n-1.
    classes = getattr(classifier, "classes_", None)
    best_class = classes[best] if classes is not None else best

    return {
        "input_text": text,
        "bag_of_words": vectorizer.to_bag_of_words(text),
        "monster_type_prediction": label_names.get(best_class, fallback_label),
        "prediction_probability": float(probabilities[best]),
    }
