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
Named preset profiles.

Fixed, hand-picked identities for common browser/OS combinations. Unlike
generated profiles, presets also cover mobile devices whose platform labels
(``Linux armv8l``, ``iPhone``) fall outside the three desktop families.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from profilecraft.engine.exceptions import UnknownPresetError
from profilecraft.engine.generator import CoherentProfile
from profilecraft.engine.sampler import RandomSource, default_random_source, pick


@dataclass(frozen=True)
class ProfilePreset:
    """A named, fixed profile."""
    id: str
    name: str
    description: str
    profile: CoherentProfile


PRESETS: Tuple[ProfilePreset, ...] = (
    ProfilePreset(
        id="windows-chrome",
        name="Windows 10 + Chrome",
        description="Common Windows 10 Chrome configuration",
        profile=CoherentProfile(
            platform="Win32",
            user_agent="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
            gpu_vendor="Google Inc. (Intel)",
            gpu_renderer="ANGLE (Intel, Intel(R) UHD Graphics 620 Direct3D11 vs_5_0 ps_5_0, D3D11)",
            hardware_concurrency=8,
            device_memory=8,
            max_touch_points=0,
            screen_width=1920,
            screen_height=1080,
            color_depth=24,
            pixel_ratio=1,
            timezone="America/New_York",
            timezone_offset=-300,
            language="en-US",
            languages=("en-US", "en"),
        ),
    ),
    ProfilePreset(
        id="macos-chrome",
        name="macOS + Chrome",
        description="Common macOS Chrome configuration",
        profile=CoherentProfile(
            platform="MacIntel",
            user_agent="Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
            gpu_vendor="Google Inc. (Apple)",
            gpu_renderer="ANGLE (Apple, Apple M1, OpenGL 4.1)",
            hardware_concurrency=8,
            device_memory=8,
            max_touch_points=0,
            screen_width=1440,
            screen_height=900,
            color_depth=30,
            pixel_ratio=2,
            timezone="America/Los_Angeles",
            timezone_offset=-480,
            language="en-US",
            languages=("en-US", "en"),
        ),
    ),
    ProfilePreset(
        id="linux-firefox",
        name="Linux + Firefox",
        description="Common Linux Firefox configuration",
        profile=CoherentProfile(
            platform="Linux x86_64",
            user_agent="Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0",
            gpu_vendor="Mesa/AMD",
            gpu_renderer="AMD Radeon Graphics (renoir, LLVM 15.0.7, DRM 3.49, 6.1.0-17-amd64)",
            hardware_concurrency=8,
            device_memory=8,
            max_touch_points=0,
            screen_width=1920,
            screen_height=1080,
            color_depth=24,
            pixel_ratio=1,
            timezone="Europe/London",
            timezone_offset=0,
            language="en-US",
            languages=("en-US", "en"),
        ),
    ),
    ProfilePreset(
        id="android-chrome",
        name="Android + Chrome Mobile",
        description="Common Android Chrome Mobile configuration",
        profile=CoherentProfile(
            platform="Linux armv8l",
            user_agent="Mozilla/5.0 (Linux; Android 13; Pixel 7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36",
            gpu_vendor="Qualcomm",
            gpu_renderer="Adreno (TM) 730",
            hardware_concurrency=8,
            device_memory=8,
            max_touch_points=5,
            screen_width=412,
            screen_height=915,
            color_depth=24,
            pixel_ratio=2.625,
            timezone="America/New_York",
            timezone_offset=-300,
            language="en-US",
            languages=("en-US", "en"),
        ),
    ),
    ProfilePreset(
        id="iphone-safari",
        name="iPhone + Safari",
        description="Common iPhone Safari configuration",
        profile=CoherentProfile(
            platform="iPhone",
            user_agent="Mozilla/5.0 (iPhone; CPU iPhone OS 17_2 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Mobile/15E148 Safari/604.1",
            gpu_vendor="Apple Inc.",
            gpu_renderer="Apple GPU",
            hardware_concurrency=6,
            device_memory=4,
            max_touch_points=5,
            screen_width=390,
            screen_height=844,
            color_depth=32,
            pixel_ratio=3,
            timezone="America/Los_Angeles",
            timezone_offset=-480,
            language="en-US",
            languages=("en-US", "en"),
        ),
    ),
)


def find_preset(preset_id: str) -> Optional[ProfilePreset]:
    """Get a preset by id, or None."""
    for preset in PRESETS:
        if preset.id == preset_id:
            return preset
    return None


def get_preset(preset_id: str) -> ProfilePreset:
    """
    Get a preset by id.

    Raises:
        UnknownPresetError: If no preset has this id.
    """
    preset = find_preset(preset_id)
    if preset is None:
        raise UnknownPresetError(preset_id)
    return preset


def random_preset(random_source: Optional[RandomSource] = None) -> ProfilePreset:
    """Pick a preset uniformly."""
    return pick(PRESETS, random_source or default_random_source())
