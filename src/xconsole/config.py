"""Configuration management for xconsole.

Two-layer config resolution (highest priority wins):
  1. Explicit values: keyword arguments, a dict, or CLI flags
  2. Project config: .xconsole.json in the working directory or a parent

Anything left unset falls back to the ConsoleConfig defaults. Keys may be
written in snake_case, camelCase or with hyphens; they are normalized to
the dataclass field names before use, so ``usePrefix``, ``use-prefix``
and ``use_prefix`` are the same setting.

Custom methods are Python callables and can only be supplied explicitly,
never through the JSON file.
"""

import json
import os
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional


PROJECT_CONFIG_NAME = ".xconsole.json"

# PYTHON_ENV=development turns on dev mode when devMode is not given
DEV_MODE_ENV_VAR = "PYTHON_ENV"

DEFAULT_ICON_PACK_MODULE = "emoji_icons"


@dataclass
class ConsoleConfig:
    """Raw console configuration, consumed once by ExtendedConsole.

    Attributes:
        use_prefix: Master switch. False blanks every prefix.
        use_default_prefixes: Fall back to the built-in symbols.
        default_prefix: Last-resort prefix for methods with nothing else.
        prefix: Per-method overrides. An explicit "" is a real override.
        use_icon_pack: Try loading the external icon pack.
        icon_pack_module: Module imported by the default icon loader.
        dev_mode: Enables console.dev(). None derives it from PYTHON_ENV.
        custom_methods: Extra method names mapped to handler callables.
    """
    use_prefix: bool = True
    use_default_prefixes: bool = True
    default_prefix: str = ""
    prefix: Dict[str, Any] = field(default_factory=dict)
    use_icon_pack: bool = False
    icon_pack_module: str = DEFAULT_ICON_PACK_MODULE
    dev_mode: Optional[bool] = None
    custom_methods: Dict[str, Callable[..., Any]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ConsoleConfig":
        """Build a config from a mapping, normalizing key spellings.

        Unknown keys are dropped; see unknown_keys() to report them.
        """
        known = _field_names()
        values = {}
        for key, value in (raw or {}).items():
            name = normalize_key(key)
            if name in known:
                values[name] = value
        return cls(**values)


def _field_names():
    return {f.name for f in fields(ConsoleConfig)}


def normalize_key(key: str) -> str:
    """Map ``usePrefix`` / ``use-prefix`` / ``use_prefix`` to ``use_prefix``."""
    key = key.replace("-", "_")
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def unknown_keys(raw: Mapping[str, Any]) -> List[str]:
    """Return the keys of ``raw`` that match no ConsoleConfig field."""
    known = _field_names()
    return [key for key in (raw or {}) if normalize_key(key) not in known]


def default_dev_mode() -> bool:
    """Dev mode default: True when PYTHON_ENV is 'development'."""
    return os.environ.get(DEV_MODE_ENV_VAR) == "development"


# ---------------------------------------------------------------------------
# Config file location
# ---------------------------------------------------------------------------
def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .xconsole.json.

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
    """Load a JSON object file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, IsADirectoryError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_project_config(start_dir=None):
    """Load the nearest .xconsole.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(explicit=None, start_dir=None, path=None):
    """Resolve config values using two-layer precedence.

    For each key, checks (in order):
      1. ``explicit`` (values of None count as unset)
      2. The project file: ``path`` when given, else the nearest
         .xconsole.json above ``start_dir``

    ``prefix`` maps are merged per method rather than replaced, so a
    project file can set most prefixes and an explicit value just one.
    ``custom_methods`` in the file is ignored.

    Returns a dict keyed by normalized field names.
    """
    if path is not None:
        file_cfg = load_json(path)
    else:
        file_cfg, _ = load_project_config(start_dir)

    resolved = {}
    for key, value in file_cfg.items():
        name = normalize_key(key)
        if name == "custom_methods":
            continue
        resolved[name] = value

    for key, value in (explicit or {}).items():
        if value is None:
            continue
        name = normalize_key(key)
        if (name == "prefix" and isinstance(value, Mapping)
                and isinstance(resolved.get("prefix"), Mapping)):
            merged = dict(resolved["prefix"])
            merged.update(value)
            resolved["prefix"] = merged
        else:
            resolved[name] = value

    return resolved
