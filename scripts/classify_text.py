"""
Classify a text as a vampire or Frankenstein's-creature passage.

Loads the fitted vectorizer and the pre-trained classifier from the
artifacts directory and prints the prediction record as JSON.

Usage (from project root):

    python -m scripts.classify_text "she drank from the pale throat"
"""

from __future__ import annotations

import argparse
import json

from literary_monsters.features.bow_vectorizer import (
    DEFAULT_VECTORIZER_FILENAME,
    load_vectorizer,
)
from literary_monsters.models.monster_classifier import (
    DEFAULT_CLASSIFIER_FILENAME,
    DEFAULT_FALLBACK_LABEL,
    get_label_names,
    load_classifier,
    predict_monster,
)
from literary_monsters.utils.common import get_logger, load_app_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Predict the monster type of a text."
    )
    parser.add_argument("text", type=str, help="Text to classify.")
    parser.add_argument(
        "--app-config",
        type=str,
        default="config/app.yaml",
        help="Path to app config YAML (default: config/app.yaml).",
    )
    parser.add_argument(
        "--vectorizer",
        type=str,
        default=DEFAULT_VECTORIZER_FILENAME,
        help="File name of the saved vectorizer in the artifacts directory.",
    )
    parser.add_argument(
        "--classifier",
        type=str,
        default=DEFAULT_CLASSIFIER_FILENAME,
        help="File name of the saved classifier in the artifacts directory.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    app_cfg = load_app_config(args.app_config)
    logger = get_logger(name="classify_text", config=app_cfg, log_file_suffix="classify")
    artifacts_dir = (app_cfg.get("paths", {}) or {}).get("artifacts_dir", "models")
    clf_cfg = app_cfg.get("classifier", {}) or {}

    vectorizer = load_vectorizer(artifacts_dir=artifacts_dir, filename=args.vectorizer)
    classifier = load_classifier(artifacts_dir=artifacts_dir, filename=args.classifier)
    logger.debug("text: %s", args.text)

    prediction = predict_monster(
        args.text,
        vectorizer=vectorizer,
        classifier=classifier,
        label_names=get_label_names(args.app_config),
        fallback_label=str(clf_cfg.get("fallback_label", DEFAULT_FALLBACK_LABEL)),
    )
    logger.info(
        "Predicted %s (p=%.4f)",
        prediction["monster_type_prediction"],
        prediction["prediction_probability"],
    )
    print(json.dumps(prediction, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
