"""Client configuration handling.

Settings come from an optional YAML file, then ``YUQUE_*`` environment
variables on top::

    api:
      host: https://www.yuque.com/api/v2
      token: <personal token>
      user_agent: "@yuque/sdk"
    http:
      timeout: 30
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_ENV = "YUQUE_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/yuque/config.yaml")
DEFAULT_HOST = "https://www.yuque.com/api/v2"
DEFAULT_USER_AGENT = "@yuque/sdk"

# (section, key) in the YAML file -> Settings field
_YAML_FIELDS: Mapping[tuple[str, str], str] = {
    ("api", "host"): "host",
    ("api", "token"): "token",
    ("api", "user_agent"): "user_agent",
    ("http", "timeout"): "timeout",
}

_ENV_FIELDS: Mapping[str, str] = {
    "YUQUE_HOST": "host",
    "YUQUE_TOKEN": "token",
    "YUQUE_USER_AGENT": "user_agent",
    "YUQUE_TIMEOUT": "timeout",
}


class Settings(BaseModel):
    """Connection settings for one Yuque host."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    host: str = DEFAULT_HOST
    token: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> "Settings":
        """Load the YAML config and overlay env vars; fall back to defaults."""
        config_path = cls._resolve_config_path(path)
        data: dict[str, Any] = {}
        if config_path and config_path.exists():
            with config_path.open("r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            if not isinstance(raw, Mapping):
                raise ValueError(f"{config_path}: expected a mapping of sections")
            data.update(_read_sections(raw))
        data.update(_read_env())
        return cls(**data)

    @staticmethod
    def _resolve_config_path(path: Path | None) -> Path | None:
        if path is not None:
            return path.expanduser()
        env_path = os.environ.get(CONFIG_ENV)
        if env_path:
            return Path(env_path).expanduser()
        resolved_default = DEFAULT_CONFIG_PATH.expanduser()
        return resolved_default if resolved_default.exists() else None


def _read_sections(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the known ``section.key`` entries; anything else is ignored."""
    values: dict[str, Any] = {}
    for (section, key), field_name in _YAML_FIELDS.items():
        block = raw.get(section)
        if isinstance(block, Mapping) and key in block:
            values[field_name] = block[key]
    return values


def _read_env() -> dict[str, Any]:
    return {field: os.environ[name] for name, field in _ENV_FIELDS.items() if name in os.environ}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings accessor."""
    return Settings.from_yaml()


__all__ = ["Settings", "get_settings", "DEFAULT_HOST", "DEFAULT_USER_AGENT"]
