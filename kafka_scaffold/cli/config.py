"""CLI configuration management."""

import copy
import json
from dataclasses import is_dataclass
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from kafka_scaffold.config import Config, config as default_config
from kafka_scaffold.exceptions import ConfigurationError


def load_cli_config(config_path: Path) -> Dict[str, Any]:
    """Load per-project overrides from a JSON or YAML file.
    
    A missing file means no overrides.
    """
    if not config_path.exists():
        return {}
    
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            if config_path.suffix.lower() in ('.yml', '.yaml'):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config from {config_path}: {e}") from e
    
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    
    return data


def resolve_config(overrides: Dict[str, Any], base: Optional[Config] = None) -> Config:
    """Apply {section: {key: value}} overrides onto a copy of base."""
    resolved = copy.deepcopy(base or default_config)
    
    for section, values in overrides.items():
        target = getattr(resolved, section, None)
        if target is None or not is_dataclass(target):
            raise ConfigurationError(f"Unknown configuration section '{section}'", config_key=section)
        if not isinstance(values, dict):
            raise ConfigurationError(f"Section '{section}' must be a mapping", config_key=section)
        
        for key, value in values.items():
            if not hasattr(target, key):
                raise ConfigurationError(
                    f"Unknown configuration key '{section}.{key}'",
                    config_key=f"{section}.{key}"
                )
            setattr(target, key, value)
    
    return resolved
