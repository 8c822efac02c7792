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
Conversion between profiles and the external settings document.

The settings document is the JSON shape the spoofing settings store keeps.
Only four groups are relevant here::

    {
        "webgl":     {"enabled", "vendor", "renderer"},
        "navigator": {"enabled", "userAgent", "platform", "language",
                      "languages", "hardwareConcurrency", "deviceMemory",
                      "maxTouchPoints"},
        "screen":    {"enabled", "width", "height", "colorDepth", "pixelRatio"},
        "timezone":  {"enabled", "timezone", "offset"},
    }

Both directions are pure: inputs are never mutated and nothing is stored.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from profilecraft.engine.generator import CoherentProfile
from profilecraft.engine.validator import ProfileAttributes

SettingsFragment = Dict[str, Any]


def _group_values(profile: CoherentProfile) -> Dict[str, Dict[str, Any]]:
    return {
        "webgl": {
            "vendor": profile.gpu_vendor,
            "renderer": profile.gpu_renderer,
        },
        "navigator": {
            "userAgent": profile.user_agent,
            "platform": profile.platform,
            "language": profile.language,
            "languages": list(profile.languages),
            "hardwareConcurrency": profile.hardware_concurrency,
            "deviceMemory": profile.device_memory,
            "maxTouchPoints": profile.max_touch_points,
        },
        "screen": {
            "width": profile.screen_width,
            "height": profile.screen_height,
            "colorDepth": profile.color_depth,
            "pixelRatio": profile.pixel_ratio,
        },
        "timezone": {
            "timezone": profile.timezone,
            "offset": profile.timezone_offset,
        },
    }


def to_settings_fragment(
    profile: CoherentProfile,
    existing: Optional[Mapping[str, Any]] = None,
) -> SettingsFragment:
    """
    Overlay a profile onto a settings document.

    Args:
        profile: Profile to apply.
        existing: Current settings. Copied, never modified.

    Returns:
        New settings dict. Profile values replace the matching fields of the
        webgl/navigator/screen/timezone groups; other keys are kept. Each
        group's ``enabled`` flag keeps its existing value and defaults to
        True only when absent.
    """
    merged: SettingsFragment = copy.deepcopy(dict(existing)) if existing else {}

    for group_name, values in _group_values(profile).items():
        current = merged.get(group_name)
        group = dict(current) if isinstance(current, Mapping) else {}
        group.setdefault("enabled", True)
        group.update(values)
        merged[group_name] = group

    return merged


def _group(settings: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = settings.get(name)
    return value if isinstance(value, Mapping) else {}


def _text(group: Mapping[str, Any], key: str) -> Optional[str]:
    value = group.get(key)
    return value if isinstance(value, str) else None


def _number(group: Mapping[str, Any], key: str) -> Optional[Union[int, float]]:
    value = group.get(key)
    # bool is an int subclass but never a valid metric
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _languages(group: Mapping[str, Any]) -> Optional[Tuple[str, ...]]:
    value = group.get("languages")
    if not isinstance(value, (list, tuple)):
        return None
    return tuple(item for item in value if isinstance(item, str))


def from_settings(settings: Optional[Mapping[str, Any]]) -> ProfileAttributes:
    """
    Project a settings document onto a validator attribute bag.

    Missing groups or fields stay ``None``; nothing is defaulted. Fields of
    the wrong type (a quoted number, a numeric platform) are dropped to
    ``None`` as well, so the rules that need them skip instead of failing.
    """
    if not isinstance(settings, Mapping):
        return ProfileAttributes()

    webgl = _group(settings, "webgl")
    navigator = _group(settings, "navigator")
    screen = _group(settings, "screen")
    timezone = _group(settings, "timezone")

    return ProfileAttributes(
        platform=_text(navigator, "platform"),
        user_agent=_text(navigator, "userAgent"),
        gpu_vendor=_text(webgl, "vendor"),
        gpu_renderer=_text(webgl, "renderer"),
        hardware_concurrency=_number(navigator, "hardwareConcurrency"),
        device_memory=_number(navigator, "deviceMemory"),
        max_touch_points=_number(navigator, "maxTouchPoints"),
        screen_width=_number(screen, "width"),
        screen_height=_number(screen, "height"),
        color_depth=_number(screen, "colorDepth"),
        pixel_ratio=_number(screen, "pixelRatio"),
        timezone=_text(timezone, "timezone"),
        timezone_offset=_number(timezone, "offset"),
        language=_text(navigator, "language"),
        languages=_languages(navigator),
    )
