"""
Configuration and logging helpers.

This module centralizes common functionality used across the project:

- loading the application configuration (config/app.yaml)
- ensuring directories exist before writing files
- resolving the artifacts directory for persisted vectorizers/classifiers
- constructing loggers that respect config/logging settings

The feature, model, and script modules all rely on these utilities.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml


DEFAULT_APP_CONFIG_PATH = "config/app.yaml"
DEFAULT_ARTIFACTS_DIR = "models"


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------


def load_yaml(path: str, kind: str = "Config") -> Dict[str, Any]:
    """
    Read a YAML file into a dictionary.

    Parameters
    ----------
    path : str
        Path to the YAML file.
    kind : str
        Label used in error messages, e.g. "App config" or "Data config".

    Returns
    -------
    Dict[str, Any]
        Parsed YAML content.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML file is empty or cannot be parsed.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"{kind} file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    if cfg is None:
        raise ValueError(f"{kind} file is empty or invalid: {path}")

    return cfg


def load_app_config(config_path: str = DEFAULT_APP_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load config/app.yaml ("paths", "logging", "classifier" sections).

    Sections are not enforced; callers read what they need with defaults.
    """
    return load_yaml(config_path, kind="App config")


def resolve_artifacts_dir(
    artifacts_dir: Optional[str] = None,
    config_path: str = DEFAULT_APP_CONFIG_PATH,
) -> str:
    """
    Return `artifacts_dir` if given, otherwise the "paths.artifacts_dir"
    entry of the app config.
    """
    if artifacts_dir is not None:
        return artifacts_dir
    app_cfg = load_app_config(config_path)
    paths_cfg = app_cfg.get("paths", {}) or {}
    return str(paths_cfg.get("artifacts_dir", DEFAULT_ARTIFACTS_DIR))


# ---------------------------------------------------------------------------
# Filesystem utilities
# ---------------------------------------------------------------------------


def ensure_dir_exists(path: str) -> None:
    """Create `path` (and parents) unless it is empty or already there."""
    if path:
        os.makedirs(path, exist_ok=True)


# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------


_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)s - %(funcName)s()] %(message)s"


def _parse_log_level(level_str: Optional[str]) -> int:
    # getLevelName maps registered names to ints and anything else to a string.
    level = logging.getLevelName((level_str or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(
    name: str,
    config: Dict[str, Any],
    log_file_suffix: Optional[str] = None,
) -> logging.Logger:
    """
    Construct and return a logger that respects the logging section of
    the app config.

    Parameters
    ----------
    name : str
        Logger name.
    config : Dict[str, Any]
        Application configuration.
    log_file_suffix : Optional[str]
        Optional suffix appended to the log file name (e.g., "vocab").

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    # Already configured by an earlier call.
    if logger.handlers:
        return logger

    logging_cfg = config.get("logging", {}) or {}
    paths_cfg = config.get("paths", {}) or {}

    level = _parse_log_level(logging_cfg.get("level", "INFO"))
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if bool(logging_cfg.get("to_file", False)):
        logs_dir = paths_cfg.get("logs_dir", "logs")
        ensure_dir_exists(logs_dir)

        file_prefix = logging_cfg.get("file_prefix", "literary_monsters")
        if log_file_suffix:
            filename = f"{file_prefix}_{log_file_suffix}.log"
        else:
            filename = f"{file_prefix}.log"

        file_handler = logging.FileHandler(os.path.join(logs_dir, filename), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
