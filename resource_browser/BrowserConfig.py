"""
BrowserConfig - JSON configuration loading.

The configuration is a plain dictionary, deep-merged over DEFAULT_CONFIG so
callers can rely on every key being present:

    {
        "browser": {"read_only": false, "refresh_rate": 2.0, "flash_delay": 5.0},
        "connection": {"server": "...", "token": null, "verify_ssl": true, "call_timeout": 15.0},
        "styles": {"dialog": {...}}
    }
"""
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG: Dict[str, Any] = {
    'browser': {
        'read_only': False,
        'refresh_rate': 2.0,
        'flash_delay': 5.0,
    },
    'connection': {
        'server': 'http://127.0.0.1:8001',
        'token': None,
        'verify_ssl': True,
        'call_timeout': 15.0,
    },
    'styles': {
        'dialog': {
            'bg_color': 'black',
            'fg_color': 'cadetblue',
            'button_bg_color': 'darkslateblue',
            'button_fg_color': 'black',
            'button_focus_bg_color': 'dodgerblue',
            'button_focus_fg_color': 'black',
            'label_fg_color': 'white',
            'field_fg_color': 'white',
        },
    },
}


def merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Returns a deep copy of `base` with `override` merged in recursively."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def load_config(path: Optional[Path]) -> Dict[str, Any]:
    """
    Load configuration from `path`, merged over defaults.

    Args:
        path: JSON file; a missing file yields the defaults

    Returns:
        Configuration dictionary

    Raises:
        ValueError: if the file is not a JSON object
    """
    if path is None or not path.exists():
        logging.info(f"Config file not found, using defaults: {path}")
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(path, encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {path}: expected a JSON object")

    logging.info(f"Loaded config: {path}")
    return merge(DEFAULT_CONFIG, data)


def is_read_only(config: Dict[str, Any]) -> bool:
    return bool(config['browser'].get('read_only', False))


def call_timeout(config: Dict[str, Any]) -> float:
    """Returns the API call timeout in seconds."""
    return float(config['connection']['call_timeout'])
