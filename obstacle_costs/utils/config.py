"""Config loading helpers built around OmegaConf."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from omegaconf import OmegaConf

T = TypeVar("T")


def load_config_any(path: str) -> Any:
    """Load a YAML/OMEGACONF file and return the resolved Python object."""
    return OmegaConf.to_container(OmegaConf.load(path), resolve=True)


def load_config_dict(path: str) -> Dict[str, Any]:
    """Load a config file and guarantee a `dict` result."""
    cfg = load_config_any(path)
    if not isinstance(cfg, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(cfg)}")
    return cfg


def load_structured(path: str, schema: Type[T], key: Optional[str] = None) -> T:
    """Merge a YAML section over the defaults of dataclass `schema`.

    Keys missing from the file keep the dataclass defaults; keys the dataclass
    does not declare raise. `key` selects a top-level section of the file.
    """
    cfg = load_config_dict(path)
    section = cfg.get(key) if key is not None else cfg
    if not isinstance(section, dict):
        raise TypeError(f"Expected mapping at {path}:{key}, got {type(section)}")
    merged = OmegaConf.merge(OmegaConf.structured(schema), section)
    return OmegaConf.to_object(merged)
