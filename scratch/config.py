"""
Config management for the scratch CLI.

Stores credentials and per-command defaults in ~/.kilobytetools/config.json:

  {
    "api_key": "...",
    "endpoint": "https://...",
    "response": {"format": "text/plain"},
    "scratch-push": {"lifetime": "5m", "private": true, "burn": false, "prefix": "ci."}
  }

Written by `scratch bootstrap`; values here lose to command-line flags.
"""

import json
from pathlib import Path

CONFIG_DIR = Path.home() / '.kilobytetools'
CONFIG_FILE = CONFIG_DIR / 'config.json'

PUSH_SECTION = 'scratch-push'
RESPONSE_SECTION = 'response'


class OptionsError(Exception):
    """Bad or missing options; rendered as a one-line error by the CLI."""


def _path(path):
    return Path(path) if path else CONFIG_FILE


def load(path=None):
    """Load config from disk. Returns empty dict if missing."""
    p = _path(path)
    if not p.exists():
        return {}
    try:
        cfg = json.loads(p.read_text())
    except (OSError, ValueError) as e:
        raise OptionsError(f'malformed config file at {p}: {e}') from e
    if not isinstance(cfg, dict):
        raise OptionsError(f'malformed config file at {p}: expected an object')
    return cfg


def save(cfg, path=None):
    """Save config to disk, creating parent dirs if needed."""
    p = _path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(cfg, indent=2) + '\n')


def exists(path=None):
    return _path(path).exists()


def section(cfg, name):
    """Return a nested table from cfg, {} when absent."""
    value = cfg.get(name) or {}
    if not isinstance(value, dict):
        raise OptionsError(f'malformed config file: [{name}] must be an object')
    return value


def template(api_key, endpoint):
    """Minimal valid config written by bootstrap."""
    return {
        'api_key': api_key,
        'endpoint': endpoint,
        RESPONSE_SECTION: {'format': 'text/plain'},
        PUSH_SECTION: {'lifetime': '5m'},
    }
