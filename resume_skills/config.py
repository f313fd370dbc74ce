from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "panel.yaml"

ENV_PREFIX = "RESUME_SKILLS_"


@dataclass
class Settings:
    base_url: str = "http://127.0.0.1:8001"
    difficulty: str = "intermediate"
    timeout: float | None = None  # None waits forever
    accepted_types: list[str] = field(default_factory=lambda: ["txt", "pdf"])
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict) -> Settings:
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


def _env_overrides() -> dict:
    overrides: dict = {}
    for key in ("base_url", "difficulty", "log_level"):
        value = os.environ.get(ENV_PREFIX + key.upper())
        if value:
            overrides[key] = value
    timeout = os.environ.get(ENV_PREFIX + "TIMEOUT")
    if timeout:
        overrides["timeout"] = float(timeout)
    return overrides


def load_settings(path: Path | str | None = None) -> Settings:
    """Defaults, then the YAML file, then RESUME_SKILLS_* environment variables."""
    data = _load_yaml(Path(path) if path else DEFAULT_CONFIG_PATH)
    data.update(_env_overrides())
    settings = Settings.from_dict(data)
    settings.base_url = settings.base_url.rstrip("/")
    return settings
