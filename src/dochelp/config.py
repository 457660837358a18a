"""Configuration management for dochelp.

Three-layer config resolution (highest priority wins):
  1. CLI flags: explicit on the command line
  2. Project config: .dochelp.json in the working directory or a parent
  3. Global config: ~/.dochelp/config.json

Missing keys fall back to DEFAULTS.
"""

import json
import os
from pathlib import Path

from dochelp.lib.log_lib import get_output


PROJECT_CONFIG_NAME = ".dochelp.json"

DEFAULTS = {
    "color": True,
    "program_name": None,       # None: basename of argv[0]
    "substitution_token": "$0",
    "indent": 2,
}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.dochelp/)."""
    return Path.home() / ".dochelp"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .dochelp.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning {} on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .dochelp.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def _cli_values(args):
    """Settings given explicitly on the command line."""
    if getattr(args, "no_color", False):
        return {"color": False}
    return {}


def resolve_settings(args=None, start_dir=None):
    """Resolve settings using three-layer precedence.

    Args:
        args: argparse namespace (may be None)
        start_dir: Where to start looking for .dochelp.json

    Returns:
        Dict with every key in DEFAULTS.
    """
    out = get_output()
    explicit = getattr(args, "config", None) if args is not None else None
    if explicit:
        project_cfg, project_path = load_json(explicit), Path(explicit)
    else:
        project_cfg, project_path = load_project_config(start_dir)
    global_cfg = load_global_config()
    cli_cfg = _cli_values(args)

    resolved = {}
    for key, default in DEFAULTS.items():
        json_key = key.replace("_", "-")
        for source, layer in (("cli", cli_cfg), ("project", project_cfg),
                              ("global", global_cfg)):
            value = layer.get(key, layer.get(json_key))
            if value is not None:
                resolved[key] = value
                out.emit(2, "config {key}={value!r} ({source})",
                         channel='config', key=key, value=value, source=source)
                break
        else:
            resolved[key] = default

    if project_path:
        out.emit(2, "project config: {path}", channel='config', path=project_path)
    return resolved
