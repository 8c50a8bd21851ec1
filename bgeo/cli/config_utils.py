"""Load CLI defaults from a JSON/YAML config file.

A config file is a mapping, optionally split into named sections:

    {"query": {"eps": 1e-6, "legacy-gate": false}}

`config_to_argv` flattens the first matching section into argparse flags so
that config values act as defaults and explicit command-line flags win.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import yaml

ROOT = Path(__file__).resolve().parents[2]
CONFIG_DIR = ROOT / "configs"


def default_config_path(name: str) -> Path | None:
    """Return `configs/<name>` when it exists."""
    path = CONFIG_DIR / name
    return path if path.is_file() else None


def load_config(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".json":
        data = json.loads(text)
    elif suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    else:
        raise ValueError(f"Unsupported config type: {path}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}: {path}")
    return data


def _flag(key: str) -> str:
    return "--" + key.replace("_", "-")


def config_to_argv(path: Path, *, section_keys: Iterable[str] = ()) -> list[str]:
    """Translate a config mapping into argv tokens."""
    data = load_config(path)
    section: dict[str, Any] = data
    for key in section_keys:
        if isinstance(data.get(key), dict):
            section = data[key]
            break

    argv: list[str] = []
    for key, value in section.items():
        if isinstance(value, dict) or value is None:
            continue
        flag = _flag(key)
        if isinstance(value, bool):
            argv.append(flag if value else "--no-" + flag[2:])
            continue
        if isinstance(value, (list, tuple)):
            argv.append(flag)
            argv.extend(str(v) for v in value)
            continue
        argv.extend([flag, str(value)])
    return argv
