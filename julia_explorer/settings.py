"""
Settings for the Julia explorer.

Defaults live in settings.json next to this file. Values from a settings
file are merged over DEFAULT_SETTINGS, so a file only needs the keys it
changes.
"""

import copy
import json
import logging
import os


logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')

DEFAULT_SETTINGS = {
    'window': {
        'width': 800,
        'height': 800,
        'title': 'Julia Sets',
        'fps': 60,
    },
    'keys': {
        'exit': ['escape'],
        'zoom_in': ['z'],
        'zoom_out': ['x'],
        'pan_left': ['left'],
        'pan_right': ['right'],
        'pan_up': ['up'],
        'pan_down': ['down'],
        'param_a_dec': ['h'],
        'param_a_inc': ['j'],
        'param_b_dec': ['k'],
        'param_b_inc': ['l'],
        'reset': ['r'],
    },
}


def _merge(base, override):
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_settings(path=None):
    """
    Load settings from a JSON file.

    Args:
        path: Settings file (default: the packaged settings.json)

    Returns:
        Settings dict; DEFAULT_SETTINGS if the file can't be read
    """
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    path = path or SETTINGS_PATH
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not load %s: %s", path, e)
        return settings
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        return settings
    return _merge(settings, data)
