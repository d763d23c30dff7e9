"""Configuration helpers: config directory discovery and settings."""

import os
import pathlib
import sys

DEFAULT_SETTINGS = {"import_from": "", "export_to": "", "seed": None}
PATH_SETTINGS = ("import_from", "export_to")


def get_config_dir() -> pathlib.Path:
    env_dir = os.environ.get("FLASHCARDS_CONFIG_DIR")
    if env_dir:
        return pathlib.Path(env_dir)
    return pathlib.Path.home() / ".config" / "flashcards"


def load_settings(config_dir: pathlib.Path | str | None = None) -> dict:
    if config_dir is None:
        config_dir = get_config_dir()
    settings_path = pathlib.Path(config_dir) / "settings.toml"
    settings = dict(DEFAULT_SETTINGS)
    if settings_path.exists():
        try:
            settings.update(_parse_toml_simple(settings_path.read_text()))
        except OSError as e:
            print(f"Warning: cannot read {settings_path}: {e}", file=sys.stderr)

    for key in PATH_SETTINGS:
        value = settings[key]
        if isinstance(value, int) and not isinstance(value, bool):
            # unquoted file names like 2024 parse as ints
            settings[key] = str(value)
        elif not isinstance(value, str):
            print(f"Warning: ignoring {key} = {value!r} in {settings_path}: expected a path",
                  file=sys.stderr)
            settings[key] = DEFAULT_SETTINGS[key]
    return settings


def _strip_comment(value: str) -> str:
    """Drop a trailing # comment that is not inside double quotes."""
    quoted = False
    for i, ch in enumerate(value):
        if ch == '"':
            quoted = not quoted
        elif ch == "#" and not quoted:
            return value[:i].rstrip()
    return value


def _parse_value(raw: str):
    if len(raw) >= 2 and raw[0] == raw[-1] == '"':
        return raw[1:-1]
    if raw in ("true", "false"):
        return raw == "true"
    try:
        return int(raw)
    except ValueError:
        return raw


def _parse_toml_simple(text: str) -> dict:
    """Minimal TOML parser for flat key = value files.

    Understands double-quoted strings, integers, true/false and # comments,
    including comments after a value. Anything else is kept as a bare string.
    """
    result = {}
    for line in text.splitlines():
        line = _strip_comment(line.strip())
        key, sep, raw = line.partition("=")
        if not sep:
            continue
        result[key.strip()] = _parse_value(raw.strip())
    return result
