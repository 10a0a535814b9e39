# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Configuration utilities for authdef.
Provides environment lookups and loading/saving of definition files.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors import ConfigError

ENV_PREFIX = "AUTHDEF_"


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = ENV_PREFIX) -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type.
    """
    env_key = f"{env_prefix}{key.upper()}"
    value = os.environ.get(env_key, default)

    if value is None or cast_type is None:
        return value

    try:
        if cast_type == bool:
            if isinstance(value, str):
                return value.lower() in ('true', '1', 'yes', 'on')
            return bool(value)
        return cast_type(value)
    except (ValueError, TypeError):
        return default


def get_int_config(key: str, default: int = 0,
                   env_prefix: str = ENV_PREFIX) -> int:
    """Get integer configuration value."""
    return get_config_value(key, default, int, env_prefix)


def detect_format(file_path: str) -> str:
    """Map a file extension onto 'json' or 'yaml'."""
    file_ext = Path(file_path).suffix.lower()

    if file_ext == '.json':
        return 'json'
    elif file_ext in ('.yaml', '.yml'):
        return 'yaml'
    raise ConfigError(f"Unsupported file format: {file_ext}", "file_path", file_path)


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load a document from a JSON or YAML file."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Definition file not found: {file_path}")

    format_type = detect_format(file_path)

    with open(file_path, 'r', encoding='utf-8') as f:
        if format_type == 'json':
            return json.load(f)
        return yaml.safe_load(f)


def dump_config(config: Dict[str, Any], format_type: str = 'json', indent: int = 2) -> str:
    """Render a document as JSON or YAML text."""
    if format_type == 'json':
        return json.dumps(config, indent=indent, separators=(',', ': '))
    elif format_type in ('yaml', 'yml'):
        return yaml.safe_dump(config, default_flow_style=False, indent=indent, sort_keys=False)
    raise ConfigError(f"Unsupported output format: {format_type}", "output_format", format_type)


def save_config_file(config: Dict[str, Any], file_path: str,
                     format_type: Optional[str] = None, indent: int = 2) -> None:
    """Save a document to a file."""
    if format_type is None:
        format_type = detect_format(file_path)

    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(dump_config(config, format_type, indent))
