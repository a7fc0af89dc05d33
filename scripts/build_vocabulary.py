"""
Build the bag-of-words vocabulary from the configured book corpus.

This script is a convenience wrapper around
`literary_monsters.features.bow_vectorizer.fit_vectorizer_from_series`,
which:

- loads every corpus source listed in config/data.yaml
- splits the texts into paragraph documents
- ingests them into a TermVectorizer and trims it per the "trim" section
- saves the fitted vectorizer under the artifacts directory

Usage (from project root):

    python -m scripts.build_vocabulary
    # or
    python scripts/build_vocabulary.py --output text_vectorizer.joblib
"""

from __future__ import annotations

import argparse

from literary_monsters.data.corpus import load_corpus
from literary_monsters.features.bow_vectorizer import (
    DEFAULT_VECTORIZER_FILENAME,
    fit_vectorizer_from_series,
)
from literary_monsters.utils.common import get_logger, load_app_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build and save the bag-of-words vocabulary."
    )
    parser.add_argument(
        "--data-config",
        type=str,
        default="config/data.yaml",
        help="Path to data config YAML (default: config/data.yaml).",
    )
    parser.add_argument(
        "--app-config",
        type=str,
        default="config/app.yaml",
        help="Path to app config YAML (default: config/app.yaml).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=DEFAULT_VECTORIZER_FILENAME,
        help=f"File name of the saved vectorizer (default: {DEFAULT_VECTORIZER_FILENAME}).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    app_cfg = load_app_config(args.app_config)
    logger = get_logger(name="build_vocabulary", config=app_cfg, log_file_suffix="vocab")
    artifacts_dir = (app_cfg.get("paths", {}) or {}).get("artifacts_dir", "models")

    logger.info("Loading corpus from %s", args.data_config)
    corpus_df = load_corpus(config_path=args.data_config)
    logger.info(
        "Loaded %d paragraphs: %s",
        len(corpus_df),
        corpus_df["label"].value_counts().to_dict(),
    )

    vectorizer = fit_vectorizer_from_series(
        corpus_df["text"],
        config_path=args.data_config,
        artifacts_dir=artifacts_dir,
        save=True,
        filename=args.output,
    )
    logger.info("Vocabulary built with %d terms.", vectorizer.vocab_size)


if __name__ == "__main__":
    main()
