"""
Config file loading for textbar.

Reads ~/.config/textbar/config.toml and returns the Bar defaults it sets.
Never raises — a missing file, parse errors, or bad shapes fall back to
the built-in defaults, key by key.

Example:
    start = "["
    end = "]"
    filled = "#"
    empty = "-"
    width = 24
    max = 1.0
"""

import logging
from pathlib import Path

from textbar.bar import Bar

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "textbar" / "config.toml"

_TOKEN_KEYS = ("start", "end")
_CELL_KEYS = ("filled", "empty")


def load_config(path: Path | None = None) -> dict:
    """
    Load and return textbar overrides from a TOML file.

    Returns only the keys that are present and well-typed, e.g.
    {"width": 24, "filled": "#"}. An unusable file returns {}.
    """
    config_path = path or _CONFIG_PATH

    if not config_path.is_file():
        return {}

    try:
        raw = config_path.read_bytes()
    except OSError as exc:
        logger.debug("cannot read %s: %s", config_path, exc)
        return {}

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return {}

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        logger.debug("ignoring malformed config %s: %s", config_path, exc)
        return {}

    overrides: dict = {}

    for key in _TOKEN_KEYS:
        if key in data:
            if isinstance(data[key], str):
                overrides[key] = data[key]
            else:
                _skip(key, data[key])

    for key in _CELL_KEYS:
        if key in data:
            if isinstance(data[key], str) and len(data[key]) == 1:
                overrides[key] = data[key]
            else:
                _skip(key, data[key])

    # bool is an int subclass; `width = true` is not a width
    width = data.get("width")
    if width is not None:
        if isinstance(width, int) and not isinstance(width, bool):
            overrides["width"] = width
        else:
            _skip("width", width)

    maximum = data.get("max")
    if maximum is not None:
        if isinstance(maximum, (int, float)) and not isinstance(maximum, bool):
            overrides["max"] = float(maximum)
        else:
            _skip("max", maximum)

    return overrides


def bar_from_config(config: dict) -> Bar:
    """Build a Bar from load_config() overrides; missing keys keep defaults."""
    return Bar(**config)


def _skip(key: str, value) -> None:
    logger.debug("ignoring config key %r: unusable value %r", key, value)
