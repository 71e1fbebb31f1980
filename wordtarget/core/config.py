from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

DEFAULT_MARKDOWN_EXTENSIONS = [".md", ".markdown", ".mdown", ".mkd"]

DEFAULTS: Dict[str, Any] = {
    "status_template": "Section progress: {percent}% of {target} target",
    "selection_template": "{words} Words",
    "document_template": "{document_words} Words",
    "document_selection_template": " ({selection_words} words, {selection_lines} lines selected)",
    "markdown_extensions": list(DEFAULT_MARKDOWN_EXTENSIONS),
    "log_level": None,
    "log_json": None,
}

_ENV_KEYS = {
    "WT_STATUS_TEMPLATE": "status_template",
    "WT_SELECTION_TEMPLATE": "selection_template",
    "WT_DOCUMENT_TEMPLATE": "document_template",
    "WT_DOCUMENT_SELECTION_TEMPLATE": "document_selection_template",
    "WT_MARKDOWN_EXTENSIONS": "markdown_extensions",
}


class WordTargetError(Exception):
    """Base error for wordtarget."""


class ConfigError(WordTargetError):
    """Config file could not be read or is not a mapping."""


def load_config_file(path: Optional[Union[str, Path]]) -> Dict[str, Any]:
    """Load a YAML/JSON config file into a dict; a missing file gives ``{}``."""
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        return {}

    try:
        with p.open("r", encoding="utf-8") as f:
            if p.suffix.lower() in (".yml", ".yaml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config {p}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {p} must be a mapping, got {type(data).__name__}")
    return data


def _split_extensions(value: Any) -> List[str]:
    if isinstance(value, str):
        items = [v.strip() for v in value.split(",")]
    elif isinstance(value, (list, tuple)):
        items = [str(v).strip() for v in value]
    else:
        return list(DEFAULT_MARKDOWN_EXTENSIONS)
    out = []
    for item in items:
        if not item:
            continue
        out.append(item.lower() if item.startswith(".") else f".{item.lower()}")
    return out


def load_env() -> Dict[str, Any]:
    """Read ``WT_*`` overrides from the environment."""
    conf: Dict[str, Any] = {}
    for env_name, key in _ENV_KEYS.items():
        v = os.getenv(env_name)
        if v:
            conf[key] = v
    return conf


def merge_config(*layers: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge config layers on top of ``DEFAULTS``; later layers win, ``None`` values are skipped."""
    merged: Dict[str, Any] = dict(DEFAULTS)
    for layer in layers:
        if not layer:
            continue
        for k, v in layer.items():
            if v is None:
                continue
            merged[k] = v
    merged["markdown_extensions"] = _split_extensions(merged.get("markdown_extensions"))
    return merged
