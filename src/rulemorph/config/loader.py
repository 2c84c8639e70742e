"""
Configuration loader for RuleMorph.

Handles loading configuration from YAML files and environment variables.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from .models import BlockMatching, RuleMorphConfig


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""

    pass


ENV_BLOCK_MATCHING = "RULEMORPH_BLOCK_MATCHING"
ENV_PREFER_TEMPLATES = "RULEMORPH_PREFER_TEMPLATES"
ENV_LOG_LEVEL = "RULEMORPH_LOG_LEVEL"


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: '{value}'")


def apply_env_overrides(raw_config: dict[str, Any]) -> dict[str, Any]:
    """Overlay RULEMORPH_* environment variables onto a raw config dict."""
    load_dotenv()

    engine = dict(raw_config.get("engine") or {})
    logging_cfg = dict(raw_config.get("logging") or {})

    block_matching = os.environ.get(ENV_BLOCK_MATCHING)
    if block_matching:
        valid = [m.value for m in BlockMatching]
        if block_matching.lower() not in valid:
            raise ConfigurationError(
                f"Invalid {ENV_BLOCK_MATCHING} '{block_matching}'. Valid values: {valid}"
            )
        engine["block_matching"] = block_matching.lower()

    prefer_templates = os.environ.get(ENV_PREFER_TEMPLATES)
    if prefer_templates:
        engine["prefer_templates"] = _parse_bool(ENV_PREFER_TEMPLATES, prefer_templates)

    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        logging_cfg["level"] = log_level

    merged = dict(raw_config)
    merged["engine"] = engine
    merged["logging"] = logging_cfg
    return merged


def _build_config(raw_config: dict[str, Any]) -> RuleMorphConfig:
    try:
        return RuleMorphConfig(**apply_env_overrides(raw_config))
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed:\n{e}")


def load_config_from_yaml(config_path: Path) -> RuleMorphConfig:
    """Load configuration from a YAML file."""
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if raw_config is None:
        raise ConfigurationError("Configuration file is empty")
    if not isinstance(raw_config, dict):
        raise ConfigurationError("Configuration file must contain a mapping")

    return _build_config(raw_config)


def load_config(config_path: Path | None = None) -> RuleMorphConfig:
    """Load configuration from YAML if given, otherwise defaults plus environment."""
    if config_path is not None:
        return load_config_from_yaml(config_path)
    return _build_config({})


def generate_default_config(output_path: Path) -> None:
    """Generate a default configuration file."""
    default_config = {
        "engine": {
            "block_matching": BlockMatching.LOOKAHEAD.value,
            "prefer_templates": True,
            "max_source_lines": None,
        },
        "logging": {
            "level": "INFO",
        },
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        yaml.dump(default_config, f, default_flow_style=False, sort_keys=False)
