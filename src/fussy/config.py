"""Configuration for the fussy completion style.

Options can be built in code or loaded from a JSON file.
"""

import json
import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from fussy.logger import get_logger

logger = get_logger("config")

CONFIG_ENV_VAR = "FUSSY_CONFIG"


class FussyConfig(BaseModel):
    """Options recognised by the completion style."""

    max_query_length: int = Field(
        128, ge=0, description="Queries longer than this skip scoring; every candidate is shown highlighted"
    )
    max_candidate_limit: int = Field(
        1000, description="Pools at least this large are partitioned; only this many candidates are scored"
    )
    ignore_case: bool = Field(True, description="Match case-insensitively regardless of the host setting")
    max_word_length_to_score: int = Field(
        1000, ge=0, description="Candidates longer than this are never scored"
    )
    highlight: Literal["runs", "none"] = Field("runs", description="Highlighting for non-file pools")
    metadata_adjustment: Literal["fuzzy", "host"] = Field(
        "fuzzy", description="Install the score comparator, or keep the host's sort functions"
    )
    scorer: Literal["auto", "native", "python"] = Field(
        "auto", description="Scoring backend; auto prefers the native one when it is installed"
    )
    matched_style: str = Field("bold magenta", description="Rich style for matched runs")
    divergence_style: str = Field("bold underline", description="Rich style for the first divergence")

    class Config:
        """Pydantic configuration."""

        frozen = True


def load_config(config_path: Optional[str | Path] = None) -> FussyConfig:
    """
    Load the completion style configuration from a JSON file.

    Args:
        config_path: Path to the JSON configuration file. If None, the path in
            the FUSSY_CONFIG environment variable is used; without it the
            defaults are returned.

    Returns:
        FussyConfig: Parsed configuration object

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        json.JSONDecodeError: If the JSON file is invalid
        ValidationError: If an option has the wrong type or value
    """
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if not env_path:
            logger.debug("No configuration file given, using defaults")
            return FussyConfig()
        config_path = env_path

    config_path = Path(config_path)
    if not config_path.exists():
        error_msg = f"Configuration file not found: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading configuration from: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file {config_path}: {e}")
        raise

    try:
        config = FussyConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid configuration in {config_path}: {e}")
        raise

    logger.debug(f"Loaded configuration: {config}")
    return config
