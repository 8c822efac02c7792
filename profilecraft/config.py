# Copyright 2026 Firefly Software Solutions Inc
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Configuration management for ProfileCraft.

Settings come from environment variables (``PROFILECRAFT_`` prefix), from a
YAML/JSON file, or programmatically. The engine itself never reads them;
they drive the command-line tool.

Example:
    >>> from profilecraft.config import EngineSettings
    >>> settings = EngineSettings()  # Loads from environment
    >>> settings.log_format
    'json'

This module also loads and saves the settings *documents* the CLI validates
and rewrites (``load_document`` / ``save_document``), using the same
YAML/JSON handling.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from profilecraft.engine.catalogs import PlatformFamily
from profilecraft.utils.logger import LogFormat

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


class EngineSettings(BaseSettings):
    """Tool configuration loaded from environment variables.

    Environment variables are prefixed with PROFILECRAFT_ and case-insensitive.

    Example:
        PROFILECRAFT_LOG_LEVEL=DEBUG
        PROFILECRAFT_LOG_FORMAT=human
        PROFILECRAFT_DEFAULT_PLATFORM=macos
        PROFILECRAFT_DEFAULT_SEED=1234
    """

    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: LogFormat = Field(default=LogFormat.JSON, description="Log format: json, human or text")
    default_platform: Optional[PlatformFamily] = Field(
        default=None,
        description="Platform family used when --platform is not given",
    )
    default_seed: Optional[int] = Field(
        default=None,
        ge=0,
        le=0xFFFFFFFF,
        description="Seed used when --seed is not given (unset means non-deterministic)",
    )
    strict: bool = Field(default=False, description="Treat warnings as failures in validate")

    model_config = {
        "env_prefix": "PROFILECRAFT_",
        "case_sensitive": False,
        "use_enum_values": True,
    }

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("default_platform", mode="before")
    @classmethod
    def _normalize_platform(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value


# Global settings instance
_settings: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    """Get the global settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = EngineSettings()
    return _settings


def reload_settings() -> EngineSettings:
    """Reload settings from the environment."""
    global _settings
    _settings = EngineSettings()
    return _settings


def load_document(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON document.

    Args:
        path: Path to a .yaml, .yml or .json file

    Returns:
        The parsed mapping (empty for an empty file)

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the format is unsupported, the content does not parse,
            or the top level is not a mapping
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")

    lowered = path.lower()
    with open(path, "r", encoding="utf-8") as f:
        if lowered.endswith(YAML_SUFFIXES):
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
        elif lowered.endswith(JSON_SUFFIXES):
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {path}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {path}")
    return data


def save_document(data: Dict[str, Any], path: str) -> None:
    """Save a mapping as YAML or JSON, chosen by file extension."""
    lowered = path.lower()
    if not lowered.endswith(YAML_SUFFIXES + JSON_SUFFIXES):
        raise ValueError(f"Unsupported file format: {path}")

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        if lowered.endswith(YAML_SUFFIXES):
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
            f.write("\n")


def load_settings_from_file(path: str) -> EngineSettings:
    """Load settings from a YAML or JSON file and make them global.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is invalid
    """
    global _settings
    _settings = EngineSettings(**load_document(path))
    return _settings


def save_settings_to_file(settings: EngineSettings, path: str) -> None:
    """Save settings to a YAML or JSON file."""
    save_document(settings.model_dump(mode="json"), path)
