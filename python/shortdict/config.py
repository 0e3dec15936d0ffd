"""Configuration loader for shortdict.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "dictionary": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
    "strategies": ["case", "leet"],
    "strict": False,
    "quiet": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/shortdict -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Drop the cached configuration so the next load() rereads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_dictionary() -> str:
    return get_default("dictionary", FALLBACK_DEFAULTS["dictionary"])


def default_strategies() -> list[str]:
    return list(get_default("strategies", FALLBACK_DEFAULTS["strategies"]))


def default_strict() -> bool:
    return bool(get_default("strict", FALLBACK_DEFAULTS["strict"]))


def default_quiet() -> bool:
    return bool(get_default("quiet", FALLBACK_DEFAULTS["quiet"]))
