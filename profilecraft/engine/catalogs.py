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
Attribute catalogs for coherent profile generation.

Every value a generated profile can take comes from the tables in this
module. Each platform family owns its own catalog, so a GPU, a hardware
spec, a screen and a touch-point value drawn from the same catalog are
always mutually plausible.

Ordering matters:
- ``hardware_specs`` and ``screens`` run from low to high capability; the
  tier sampler slices them by position.
- ``touch_points`` repeats values to weight the draw (four zeros out of six
  entries means "mostly no touchscreen").
- ``PlatformFamily`` declaration order is what the seeded generator indexes.

Example:
    >>> from profilecraft.engine.catalogs import PlatformFamily, get_catalog
    >>> catalog = get_catalog(PlatformFamily.MACOS)
    >>> catalog.platform
    'MacIntel'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class PlatformFamily(str, Enum):
    """Supported platform families."""
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


class GPUTier(str, Enum):
    """Coarse GPU capability class used to keep hardware and screen coherent."""
    INTEGRATED = "integrated"
    MID = "mid"
    HIGH = "high"


@dataclass(frozen=True)
class GPUDescriptor:
    """WebGL vendor/renderer pair with its capability tier."""
    vendor: str
    renderer: str
    tier: GPUTier


@dataclass(frozen=True)
class HardwareSpec:
    """CPU core count and device memory (GiB)."""
    cores: int
    memory_gib: int


@dataclass(frozen=True)
class ScreenSpec:
    """Screen resolution, device pixel ratio and color depth."""
    width: int
    height: int
    pixel_ratio: float
    color_depth: int


@dataclass(frozen=True)
class TimezoneOption:
    """IANA timezone with its offset in minutes east of UTC."""
    timezone: str
    offset_minutes: int


@dataclass(frozen=True)
class LocaleGroup:
    """Language, Accept-Language list and the timezones that go with them."""
    language: str
    languages: Tuple[str, ...]
    timezones: Tuple[TimezoneOption, ...]


@dataclass(frozen=True)
class PlatformCatalog:
    """Everything the generator may draw for one platform family."""
    family: PlatformFamily
    platform: str
    user_agents: Tuple[str, ...]
    gpus: Tuple[GPUDescriptor, ...]
    hardware_specs: Tuple[HardwareSpec, ...]
    screens: Tuple[ScreenSpec, ...]
    touch_points: Tuple[int, ...]


# ============================================================================
# Platform labels (navigator.platform)
# ============================================================================

WINDOWS_PLATFORM = "Win32"
MACOS_PLATFORM = "MacIntel"
LINUX_PLATFORM = "Linux x86_64"


def _angle_d3d11(vendor: str, name: str) -> str:
    return f"ANGLE ({vendor}, {name} Direct3D11 vs_5_0 ps_5_0, D3D11)"


# ============================================================================
# Windows
# ============================================================================

WINDOWS_CATALOG = PlatformCatalog(
    family=PlatformFamily.WINDOWS,
    platform=WINDOWS_PLATFORM,
    user_agents=(
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:122.0) Gecko/20100101 Firefox/122.0",
    ),
    gpus=(
        # Integrated
        GPUDescriptor("Google Inc. (Intel)", _angle_d3d11("Intel", "Intel(R) UHD Graphics 620"), GPUTier.INTEGRATED),
        GPUDescriptor("Google Inc. (Intel)", _angle_d3d11("Intel", "Intel(R) UHD Graphics 630"), GPUTier.INTEGRATED),
        GPUDescriptor("Google Inc. (Intel)", _angle_d3d11("Intel", "Intel(R) UHD Graphics 770"), GPUTier.INTEGRATED),
        GPUDescriptor("Google Inc. (Intel)", _angle_d3d11("Intel", "Intel(R) Iris Plus Graphics 640"), GPUTier.INTEGRATED),
        GPUDescriptor("Google Inc. (Intel)", _angle_d3d11("Intel", "Intel(R) Iris Xe Graphics"), GPUTier.INTEGRATED),
        # Mid-range dedicated
        GPUDescriptor("Google Inc. (NVIDIA)", _angle_d3d11("NVIDIA", "NVIDIA GeForce GTX 1060"), GPUTier.MID),
        GPUDescriptor("Google Inc. (NVIDIA)", _angle_d3d11("NVIDIA", "NVIDIA GeForce GTX 1070"), GPUTier.MID),
        GPUDescriptor("Google Inc. (NVIDIA)", _angle_d3d11("NVIDIA", "NVIDIA GeForce GTX 1650"), GPUTier.MID),
        GPUDescriptor("Google Inc. (NVIDIA)", _angle_d3d11("NVIDIA", "NVIDIA GeForce RTX 2060"), GPUTier.MID),
        GPUDescriptor("Google Inc. (AMD)", _angle_d3d11("AMD", "AMD Radeon RX 580 Series"), GPUTier.MID),
        GPUDescriptor("Google Inc. (AMD)", _angle_d3d11("AMD", "AMD Radeon RX 5600 XT"), GPUTier.MID),
        # High-end dedicated
        GPUDescriptor("Google Inc. (NVIDIA)", _angle_d3d11("NVIDIA", "NVIDIA GeForce RTX 3060"), GPUTier.HIGH),
        GPUDescriptor("Google Inc. (NVIDIA)", _angle_d3d11("NVIDIA", "NVIDIA GeForce RTX 3070"), GPUTier.HIGH),
        GPUDescriptor("Google Inc. (NVIDIA)", _angle_d3d11("NVIDIA", "NVIDIA GeForce RTX 3080"), GPUTier.HIGH),
        GPUDescriptor("Google Inc. (NVIDIA)", _angle_d3d11("NVIDIA", "NVIDIA GeForce RTX 4070"), GPUTier.HIGH),
        GPUDescriptor("Google Inc. (AMD)", _angle_d3d11("AMD", "AMD Radeon RX 6700 XT"), GPUTier.HIGH),
        GPUDescriptor("Google Inc. (AMD)", _angle_d3d11("AMD", "AMD Radeon RX 6800 XT"), GPUTier.HIGH),
    ),
    hardware_specs=(
        HardwareSpec(4, 8),
        HardwareSpec(4, 16),
        HardwareSpec(6, 8),
        HardwareSpec(6, 16),
        HardwareSpec(8, 16),
        HardwareSpec(8, 32),
        HardwareSpec(12, 32),
        HardwareSpec(16, 32),
        HardwareSpec(16, 64),
    ),
    screens=(
        ScreenSpec(1366, 768, 1, 24),
        ScreenSpec(1536, 864, 1.25, 24),
        ScreenSpec(1920, 1080, 1, 24),
        ScreenSpec(1920, 1080, 1.25, 24),
        ScreenSpec(1920, 1080, 1.5, 24),
        ScreenSpec(2560, 1440, 1, 24),
        ScreenSpec(2560, 1440, 1.25, 24),
        ScreenSpec(3840, 2160, 1, 30),
        ScreenSpec(3840, 2160, 1.5, 30),
    ),
    touch_points=(0, 0, 0, 0, 5, 10),
)


# ============================================================================
# macOS
# ============================================================================

MACOS_CATALOG = PlatformCatalog(
    family=PlatformFamily.MACOS,
    platform=MACOS_PLATFORM,
    user_agents=(
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.3 Safari/605.1.15",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:122.0) Gecko/20100101 Firefox/122.0",
    ),
    gpus=(
        # Apple Silicon
        GPUDescriptor("Google Inc. (Apple)", "ANGLE (Apple, Apple M1, OpenGL 4.1)", GPUTier.MID),
        GPUDescriptor("Google Inc. (Apple)", "ANGLE (Apple, Apple M2, OpenGL 4.1)", GPUTier.MID),
        GPUDescriptor("Google Inc. (Apple)", "ANGLE (Apple, Apple M3, OpenGL 4.1)", GPUTier.HIGH),
        GPUDescriptor("Apple Inc.", "Apple M1", GPUTier.MID),
        GPUDescriptor("Apple Inc.", "Apple M2", GPUTier.MID),
        GPUDescriptor("Apple Inc.", "Apple M3", GPUTier.HIGH),
        # Intel Macs
        GPUDescriptor("Google Inc. (Intel)", "ANGLE (Intel, Intel(R) Iris Plus Graphics 640, OpenGL 4.1)", GPUTier.INTEGRATED),
        GPUDescriptor("Google Inc. (Intel)", "ANGLE (Intel, Intel(R) UHD Graphics 630, OpenGL 4.1)", GPUTier.INTEGRATED),
    ),
    hardware_specs=(
        HardwareSpec(8, 8),
        HardwareSpec(8, 16),
        HardwareSpec(10, 16),
        HardwareSpec(10, 32),
        HardwareSpec(12, 32),
        HardwareSpec(12, 64),
        HardwareSpec(14, 64),
        HardwareSpec(16, 64),
    ),
    screens=(
        # Retina only
        ScreenSpec(1440, 900, 2, 30),
        ScreenSpec(1512, 982, 2, 30),
        ScreenSpec(1680, 1050, 2, 30),
        ScreenSpec(1728, 1117, 2, 30),
        ScreenSpec(2560, 1600, 2, 30),
        ScreenSpec(2880, 1800, 2, 30),
        ScreenSpec(3024, 1964, 2, 30),
    ),
    touch_points=(0,),
)


# ============================================================================
# Linux
# ============================================================================

LINUX_CATALOG = PlatformCatalog(
    family=PlatformFamily.LINUX,
    platform=LINUX_PLATFORM,
    user_agents=(
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0",
        "Mozilla/5.0 (X11; Linux x86_64; rv:122.0) Gecko/20100101 Firefox/122.0",
        "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:122.0) Gecko/20100101 Firefox/122.0",
    ),
    gpus=(
        # Mesa
        GPUDescriptor("Mesa/X.org", "Mesa Intel(R) UHD Graphics 620 (KBL GT2)", GPUTier.INTEGRATED),
        GPUDescriptor("Mesa/X.org", "Mesa Intel(R) HD Graphics 530 (SKL GT2)", GPUTier.INTEGRATED),
        GPUDescriptor("Mesa/X.org", "Mesa Intel(R) Iris Xe Graphics (TGL GT2)", GPUTier.INTEGRATED),
        GPUDescriptor("Mesa/AMD", "AMD Radeon Graphics (renoir, LLVM 15.0.7, DRM 3.49, 6.1.0-17-amd64)", GPUTier.MID),
        GPUDescriptor("Mesa/AMD", "AMD Radeon RX 580 Series (polaris10, LLVM 15.0.7, DRM 3.49, 6.1.0)", GPUTier.MID),
        # NVIDIA proprietary
        GPUDescriptor("NVIDIA Corporation", "NVIDIA GeForce GTX 1060/PCIe/SSE2", GPUTier.MID),
        GPUDescriptor("NVIDIA Corporation", "NVIDIA GeForce GTX 1080/PCIe/SSE2", GPUTier.MID),
        GPUDescriptor("NVIDIA Corporation", "NVIDIA GeForce RTX 2070/PCIe/SSE2", GPUTier.HIGH),
        GPUDescriptor("NVIDIA Corporation", "NVIDIA GeForce RTX 3070/PCIe/SSE2", GPUTier.HIGH),
    ),
    hardware_specs=(
        HardwareSpec(4, 8),
        HardwareSpec(6, 8),
        HardwareSpec(8, 8),
        HardwareSpec(8, 16),
        HardwareSpec(12, 16),
        HardwareSpec(16, 32),
        HardwareSpec(24, 64),
    ),
    screens=(
        ScreenSpec(1366, 768, 1, 24),
        ScreenSpec(1920, 1080, 1, 24),
        ScreenSpec(1920, 1080, 1.25, 24),
        ScreenSpec(2560, 1440, 1, 24),
        ScreenSpec(3840, 2160, 1, 24),
        ScreenSpec(3840, 2160, 2, 24),
    ),
    touch_points=(0, 0, 0, 0, 5, 10),
)


PLATFORM_CATALOGS: Dict[PlatformFamily, PlatformCatalog] = {
    PlatformFamily.WINDOWS: WINDOWS_CATALOG,
    PlatformFamily.MACOS: MACOS_CATALOG,
    PlatformFamily.LINUX: LINUX_CATALOG,
}

PLATFORM_FAMILIES: Tuple[PlatformFamily, ...] = tuple(PlatformFamily)


# ============================================================================
# Locales (language + geographically matching timezones)
# ============================================================================

def _locale(language: str, languages: Tuple[str, ...], *timezones: Tuple[str, int]) -> LocaleGroup:
    return LocaleGroup(
        language=language,
        languages=languages,
        timezones=tuple(TimezoneOption(tz, offset) for tz, offset in timezones),
    )


LOCALE_GROUPS: Tuple[LocaleGroup, ...] = (
    _locale(
        "en-US", ("en-US", "en"),
        ("America/New_York", -300),
        ("America/Chicago", -360),
        ("America/Denver", -420),
        ("America/Los_Angeles", -480),
        ("America/Phoenix", -420),
    ),
    _locale("en-GB", ("en-GB", "en"), ("Europe/London", 0)),
    _locale(
        "de-DE", ("de-DE", "de", "en"),
        ("Europe/Berlin", 60),
        ("Europe/Vienna", 60),
        ("Europe/Zurich", 60),
    ),
    _locale("fr-FR", ("fr-FR", "fr", "en"), ("Europe/Paris", 60)),
    _locale("es-ES", ("es-ES", "es", "en"), ("Europe/Madrid", 60)),
    _locale(
        "pt-BR", ("pt-BR", "pt", "en"),
        ("America/Sao_Paulo", -180),
        ("America/Fortaleza", -180),
    ),
    _locale("ja-JP", ("ja-JP", "ja", "en"), ("Asia/Tokyo", 540)),
    _locale("ko-KR", ("ko-KR", "ko", "en"), ("Asia/Seoul", 540)),
    _locale(
        "zh-CN", ("zh-CN", "en"),
        ("Asia/Shanghai", 480),
        ("Asia/Hong_Kong", 480),
    ),
    _locale(
        "ru-RU", ("ru-RU", "ru", "en"),
        ("Europe/Moscow", 180),
        ("Europe/Kaliningrad", 120),
    ),
    _locale("nl-NL", ("nl-NL", "nl", "en"), ("Europe/Amsterdam", 60)),
    _locale("it-IT", ("it-IT", "it", "en"), ("Europe/Rome", 60)),
    _locale("pl-PL", ("pl-PL", "pl", "en"), ("Europe/Warsaw", 60)),
    _locale(
        "en-AU", ("en-AU", "en"),
        ("Australia/Sydney", 660),
        ("Australia/Melbourne", 660),
        ("Australia/Perth", 480),
    ),
    _locale(
        "en-CA", ("en-CA", "en", "fr"),
        ("America/Toronto", -300),
        ("America/Vancouver", -480),
    ),
)


def resolve_family(family: Union[PlatformFamily, str]) -> PlatformFamily:
    """
    Map a family name to its enum member.

    Accepts the enum itself or its value in any case ("macOS", "LINUX").

    Raises:
        ValueError: If the name is not a known platform family.
    """
    if isinstance(family, PlatformFamily):
        return family
    try:
        return PlatformFamily(str(family).strip().lower())
    except ValueError:
        valid = ", ".join(f.value for f in PlatformFamily)
        raise ValueError(f"Unknown platform family: {family!r} (expected one of: {valid})") from None


def get_catalog(family: Union[PlatformFamily, str]) -> PlatformCatalog:
    """Get the catalog for a platform family."""
    return PLATFORM_CATALOGS[resolve_family(family)]


def family_for_platform(platform: str) -> Optional[PlatformFamily]:
    """Reverse lookup from a navigator.platform label to its family, if any."""
    for catalog in PLATFORM_CATALOGS.values():
        if catalog.platform == platform:
            return catalog.family
    return None
