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
Coherent profile generation.

Builds complete device identities whose attributes always agree with each
other: the GPU, hardware, screen and touch values come from one platform
catalog, hardware and screen are narrowed to the GPU's tier, and the
timezone is drawn from the same locale group as the language.

Draw order (one random value per step, both variants):
    1. platform family (only when not supplied)
    2. GPU
    3. hardware spec (tier-constrained)
    4. screen spec (tier-constrained)
    5. locale group
    6. timezone within the locale group
    7. user agent
    8. touch points

Example:
    >>> from profilecraft.engine.generator import generate, generate_seeded
    >>>
    >>> profile = generate("macos")
    >>> profile.platform
    'MacIntel'
    >>>
    >>> generate_seeded(1234, "linux") == generate_seeded(1234, "linux")
    True
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Union

from profilecraft.engine.catalogs import (
    LOCALE_GROUPS,
    PLATFORM_CATALOGS,
    PLATFORM_FAMILIES,
    PlatformFamily,
    resolve_family,
)
from profilecraft.engine.sampler import (
    RandomSource,
    SeededRandom,
    default_random_source,
    pick,
    sample_hardware,
    sample_screen,
)

if TYPE_CHECKING:
    from profilecraft.engine.validator import ProfileAttributes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoherentProfile:
    """
    One complete, internally consistent device identity.

    Field names follow the browser properties they stand for
    (``navigator.hardwareConcurrency`` -> ``hardware_concurrency``).
    ``timezone_offset`` is in minutes east of UTC.
    """
    # Platform identity
    platform: str
    user_agent: str

    # GPU
    gpu_vendor: str
    gpu_renderer: str

    # Hardware
    hardware_concurrency: int
    device_memory: int
    max_touch_points: int

    # Screen
    screen_width: int
    screen_height: int
    color_depth: int
    pixel_ratio: float

    # Locale
    timezone: str
    timezone_offset: int
    language: str
    languages: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert profile to a JSON-ready dictionary (camelCase keys)."""
        return {
            "platform": self.platform,
            "userAgent": self.user_agent,
            "gpuVendor": self.gpu_vendor,
            "gpuRenderer": self.gpu_renderer,
            "hardwareConcurrency": self.hardware_concurrency,
            "deviceMemory": self.device_memory,
            "maxTouchPoints": self.max_touch_points,
            "screenWidth": self.screen_width,
            "screenHeight": self.screen_height,
            "colorDepth": self.color_depth,
            "pixelRatio": self.pixel_ratio,
            "timezone": self.timezone,
            "timezoneOffset": self.timezone_offset,
            "language": self.language,
            "languages": list(self.languages),
        }

    def to_attributes(self) -> "ProfileAttributes":
        """View this profile as a validator attribute bag."""
        from profilecraft.engine.validator import ProfileAttributes

        return ProfileAttributes.from_profile(self)

    def fingerprint_hash(self) -> str:
        """Get a short hash of this profile for comparison and display."""
        data = json.dumps(self.to_dict(), sort_keys=True)
        return hashlib.sha256(data.encode()).hexdigest()[:16]


class ProfileGenerator:
    """
    Generates coherent profiles from a pluggable random source.

    Example:
        >>> generator = ProfileGenerator()
        >>> profile = generator.generate(platform_family="windows")
        >>>
        >>> # Reproducible
        >>> seeded = ProfileGenerator(SeededRandom(7))
        >>> seeded.generate().platform in ("Win32", "MacIntel", "Linux x86_64")
        True
    """

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Initialize the generator.

        Args:
            random_source: Callable returning floats in [0, 1). Defaults to
                ``random.random``. Its quality is the caller's concern.
        """
        self._random = random_source or default_random_source()

    def generate(
        self,
        platform_family: Optional[Union[PlatformFamily, str]] = None,
    ) -> CoherentProfile:
        """
        Generate a complete coherent profile.

        Args:
            platform_family: windows, macos or linux. Picked uniformly when
                omitted.

        Returns:
            A fresh CoherentProfile.
        """
        rng = self._random

        if platform_family is None:
            family = pick(PLATFORM_FAMILIES, rng)
        else:
            family = resolve_family(platform_family)
        catalog = PLATFORM_CATALOGS[family]

        # The GPU tier decides how far up the hardware/screen pools we may go
        gpu = pick(catalog.gpus, rng)
        hardware = sample_hardware(catalog.hardware_specs, gpu.tier, rng)
        screen = sample_screen(catalog.screens, gpu.tier, rng)

        locale = pick(LOCALE_GROUPS, rng)
        tz = pick(locale.timezones, rng)

        user_agent = pick(catalog.user_agents, rng)
        touch_points = pick(catalog.touch_points, rng)

        logger.debug(
            "Generated %s profile: tier=%s cores=%d memory=%d screen=%dx%d@%s locale=%s/%s",
            family.value,
            gpu.tier.value,
            hardware.cores,
            hardware.memory_gib,
            screen.width,
            screen.height,
            screen.pixel_ratio,
            locale.language,
            tz.timezone,
        )

        return CoherentProfile(
            platform=catalog.platform,
            user_agent=user_agent,
            gpu_vendor=gpu.vendor,
            gpu_renderer=gpu.renderer,
            hardware_concurrency=hardware.cores,
            device_memory=hardware.memory_gib,
            max_touch_points=touch_points,
            screen_width=screen.width,
            screen_height=screen.height,
            color_depth=screen.color_depth,
            pixel_ratio=screen.pixel_ratio,
            timezone=tz.timezone,
            timezone_offset=tz.offset_minutes,
            language=locale.language,
            languages=locale.languages,
        )


_default_generator = ProfileGenerator()


def generate(platform_family: Optional[Union[PlatformFamily, str]] = None) -> CoherentProfile:
    """Generate a coherent profile from the non-deterministic source."""
    return _default_generator.generate(platform_family)


def generate_seeded(
    seed: int,
    platform_family: Optional[Union[PlatformFamily, str]] = None,
) -> CoherentProfile:
    """
    Generate a coherent profile deterministically.

    Args:
        seed: Unsigned 32-bit seed; larger or negative values are reduced
            modulo 2**32.
        platform_family: Optional fixed family. When given, no value is
            consumed for the family draw.

    Returns:
        The same CoherentProfile for the same (seed, platform_family),
        on every run.
    """
    return ProfileGenerator(SeededRandom(seed)).generate(platform_family)
