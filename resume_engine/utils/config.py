"""
Configuration for the resume engine.

Values come from three layers, later ones winning: DEFAULT_CONFIG, the JSON
config file, and RESUME_ENGINE_* environment variables.
"""

from pathlib import Path
from typing import Optional
import copy
import json
import os


def merge_settings(base: dict, override: dict) -> dict:
    """Return base with override applied section by section."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = value
    return merged


class Config:
    """Engine settings read from a JSON file and the environment."""

    ENV_PREFIX = "RESUME_ENGINE"

    DEFAULT_CONFIG = {
        "matching": {
            "default_limit": 20,
            "max_workers": 8,
            "parallel": True,
        },
        "vocabulary": {
            "extra_skills": [],
            "extra_industry_keywords": [],
        },
        "logging": {
            "level": "WARNING",
            "format": "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Load settings.

        Args:
            config_path: JSON settings file, ~/.resume_engine/config.json if omitted
        """
        self.config_path = (
            Path(config_path) if config_path
            else Path.home() / ".resume_engine" / "config.json"
        )
        self.config = self._read()

    def _read(self) -> dict:
        settings = copy.deepcopy(self.DEFAULT_CONFIG)
        if not self.config_path.exists():
            return settings

        with open(self.config_path, 'r', encoding='utf-8') as f:
            return merge_settings(settings, json.load(f))

    def save(self) -> None:
        """Write the current settings to the config file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=2)

    def env_var(self, key: str) -> str:
        """Environment variable overriding a key, e.g. RESUME_ENGINE_MATCHING_MAX_WORKERS."""
        return "_".join([self.ENV_PREFIX] + [part.upper() for part in key.split('.')])

    def get(self, key: str, default=None):
        """
        Look up a dotted key such as "matching.max_workers".

        An environment override is converted to the type of the value it
        replaces, so "false" overrides a bool and "4" an int.
        """
        node = self.config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                node = default
                break
            node = node[part]

        raw = os.environ.get(self.env_var(key))
        return node if raw is None else self._coerce(raw, node)

    def set(self, key: str, value) -> None:
        """Assign a dotted key, creating intermediate sections."""
        *sections, leaf = key.split('.')
        node = self.config
        for part in sections:
            node = node.setdefault(part, {})
        node[leaf] = value

    @staticmethod
    def _coerce(raw: str, current):
        if isinstance(current, bool):
            return raw.strip().lower() in ("1", "true", "yes", "on")
        if isinstance(current, int):
            return int(raw)
        if isinstance(current, list):
            return [item.strip() for item in raw.split(",") if item.strip()]
        return raw

    def get_log_level(self) -> str:
        return str(self.get("logging.level", "WARNING")).upper()

    def print_config(self) -> None:
        print(json.dumps(self.config, indent=2))

    @classmethod
    def create_default_config(cls, path: Optional[str] = None) -> 'Config':
        """Write a settings file holding the defaults."""
        config = cls(path)
        config.save()
        return config
