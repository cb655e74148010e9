"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import ExportConfig


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


def load_config(cli_path: str | None = None) -> ExportConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./vault-export.yaml"),
        Path.home() / ".vault-export" / "config.yaml",
    ]

    if cli_path and not Path(cli_path).exists():
        raise ConfigError(f"Config file not found: {cli_path}")

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ConfigError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return ExportConfig(**raw)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ConfigError(f"Invalid config in {path}: {e}") from e

    return ExportConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `vault-export config init`
DEFAULT_CONFIG_TEMPLATE = """\
# vault-export.yaml

# Value written to the `author` key by the add_author postprocessor
author: "Aadam"

# Tag policy for filter_by_tags (exclusion wins over inclusion)
filter:
  skip_tags: []                # e.g. [private, draft]
  only_tags: []                # empty = no inclusion restriction

# Postprocessors run on every note, in order
# available: add_author, remove_empty_aliases, softbreaks_to_hardbreaks,
#            add_embed_info, flat_hierarchy, filter_by_tags
postprocessors:
  - filter_by_tags
  - remove_empty_aliases
  - softbreaks_to_hardbreaks

# Postprocessors run on embedded notes only
embed_postprocessors:
  - add_embed_info

# Logging
log_level: "info"              # debug | info | warn | error
"""
