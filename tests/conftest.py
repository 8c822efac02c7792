# Copyright 2026 Firefly Software Solutions Inc
# SPDX-License-Identifier: Apache-2.0

"""
Shared test fixtures for the ProfileCraft test suite.

This module provides common fixtures used across all test categories:
- Scripted random sources
- Settings documents on disk
- A clean PROFILECRAFT_* environment
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Iterable, List

import pytest
import yaml


# ==================== Environment Setup ====================

@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    os.environ.setdefault("PROFILECRAFT_LOG_LEVEL", "warning")
    yield


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every PROFILECRAFT_* variable for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("PROFILECRAFT_"):
            monkeypatch.delenv(key, raising=False)
    yield monkeypatch


# ==================== Random Sources ====================

class ScriptedRandom:
    """Random source that replays a fixed list of values."""

    def __init__(self, values: Iterable[float]):
        self.values: List[float] = list(values)
        self.calls = 0

    def __call__(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandom


# ==================== Settings Documents ====================

@pytest.fixture
def coherent_settings() -> Dict[str, Any]:
    """A settings document describing a plausible Windows machine."""
    return {
        "webgl": {
            "enabled": True,
            "vendor": "Google Inc. (NVIDIA)",
            "renderer": "ANGLE (NVIDIA, NVIDIA GeForce RTX 3060 Direct3D11 vs_5_0 ps_5_0, D3D11)",
        },
        "navigator": {
            "enabled": True,
            "userAgent": (
                "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
            ),
            "platform": "Win32",
            "language": "en-US",
            "languages": ["en-US", "en"],
            "hardwareConcurrency": 8,
            "deviceMemory": 16,
            "maxTouchPoints": 0,
        },
        "screen": {"enabled": True, "width": 1920, "height": 1080, "colorDepth": 24, "pixelRatio": 1},
        "timezone": {"enabled": True, "timezone": "America/New_York", "offset": -300},
        "canvas": {"enabled": True, "noise": 0.1},
    }


@pytest.fixture
def incoherent_settings(coherent_settings) -> Dict[str, Any]:
    """The coherent document with an Apple GPU on Windows."""
    doc = json.loads(json.dumps(coherent_settings))
    doc["webgl"]["vendor"] = "Apple Inc."
    doc["webgl"]["renderer"] = "Apple M2"
    return doc


@pytest.fixture
def write_document(tmp_path):
    """Write a mapping to ``tmp_path`` as JSON or YAML and return the path."""

    def _write(data: Dict[str, Any], name: str = "settings.json") -> str:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            if name.endswith((".yaml", ".yml")):
                yaml.safe_dump(data, f)
            else:
                json.dump(data, f)
        return str(path)

    return _write
