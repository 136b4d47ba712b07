from __future__ import annotations
import copy
import os
from typing import Any, Dict, Optional
import yaml

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "configs", "default.yaml")


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: top-level YAML must be a mapping, got {type(cfg).__name__}")
    return cfg


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the packaged defaults, then overlay `path` if given."""
    cfg = _read_yaml(DEFAULT_CONFIG_PATH)
    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Config not found: {path}")
        cfg = _merge(cfg, _read_yaml(path))
    return cfg
