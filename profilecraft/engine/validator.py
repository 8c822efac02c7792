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
Profile coherence validation.

Inspects an attribute bag (possibly hand-edited, possibly incomplete) and
reports combinations that give spoofing away, such as an Apple GPU on a
Windows platform or a Windows user agent on a Mac.

Each rule is a plain function taking a ``ProfileAttributes`` and returning
at most one ``CoherenceFinding``. Rules never flag a missing field; they
simply skip when the fields they need are absent.

Example:
    >>> from profilecraft.engine.validator import ProfileAttributes, validate
    >>> findings = validate(ProfileAttributes(platform="Win32", gpu_renderer="Apple M2"))
    >>> [(f.id, f.severity.value) for f in findings]
    [('gpu-platform-apple', 'error')]
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, FrozenSet, List, Optional, Pattern, Sequence, Tuple, Union

from profilecraft.engine.catalogs import LINUX_PLATFORM, MACOS_PLATFORM, WINDOWS_PLATFORM

if TYPE_CHECKING:
    from profilecraft.engine.generator import CoherentProfile

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Finding severity."""
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ProfileAttributes:
    """
    Attribute bag checked by the validator.

    Same fields as ``CoherentProfile``, all optional. ``None`` means "not
    set" and is never itself reported.
    """
    platform: Optional[str] = None
    user_agent: Optional[str] = None
    gpu_vendor: Optional[str] = None
    gpu_renderer: Optional[str] = None
    hardware_concurrency: Optional[int] = None
    device_memory: Optional[float] = None
    max_touch_points: Optional[int] = None
    screen_width: Optional[int] = None
    screen_height: Optional[int] = None
    color_depth: Optional[int] = None
    pixel_ratio: Optional[float] = None
    timezone: Optional[str] = None
    timezone_offset: Optional[int] = None
    language: Optional[str] = None
    languages: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_profile(cls, profile: "CoherentProfile") -> "ProfileAttributes":
        """Build a fully populated bag from a generated profile."""
        return cls(**{f.name: getattr(profile, f.name) for f in fields(cls)})

    def is_empty(self) -> bool:
        """True when no attribute is set."""
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class CoherenceFinding:
    """One diagnostic produced by a coherence rule."""
    id: str
    severity: Severity
    title: str
    message: str
    affected_fields: FrozenSet[str] = field(default_factory=frozenset)
    suggestion: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert finding to dictionary."""
        return {
            "id": self.id,
            "severity": self.severity.value,
            "title": self.title,
            "message": self.message,
            "affectedFields": sorted(self.affected_fields),
            "suggestion": self.suggestion,
        }


Rule = Callable[[ProfileAttributes], Optional[CoherenceFinding]]


# ============================================================================
# Reference tables
# ============================================================================

PLATFORM_UA_PATTERNS: Dict[str, Tuple[Pattern[str], ...]] = {
    WINDOWS_PLATFORM: (
        re.compile(r"Windows NT", re.IGNORECASE),
        re.compile(r"Win64", re.IGNORECASE),
        re.compile(r"WOW64", re.IGNORECASE),
    ),
    MACOS_PLATFORM: (
        re.compile(r"Macintosh", re.IGNORECASE),
        re.compile(r"Mac OS X", re.IGNORECASE),
        re.compile(r"Intel Mac", re.IGNORECASE),
    ),
    LINUX_PLATFORM: (
        re.compile(r"Linux", re.IGNORECASE),
        re.compile(r"X11", re.IGNORECASE),
        re.compile(r"Ubuntu", re.IGNORECASE),
        re.compile(r"Fedora", re.IGNORECASE),
    ),
}

# Core counts seen in the wild per platform; values outside [2, 24] are only
# flagged when they are not listed here.
TYPICAL_CORES: Dict[str, Tuple[int, ...]] = {
    WINDOWS_PLATFORM: (4, 6, 8, 12, 16),
    MACOS_PLATFORM: (4, 6, 8, 10, 12, 14, 16),
    LINUX_PLATFORM: (2, 4, 6, 8, 12, 16, 24, 32),
}

MIN_PLAUSIBLE_CORES = 2
MAX_PLAUSIBLE_CORES = 24

# Platforms the screen rule knows about
SCREEN_RULE_PLATFORMS = frozenset({WINDOWS_PLATFORM, MACOS_PLATFORM, LINUX_PLATFORM})

HIGH_END_GPUS = ("rtx 4090", "rtx 4080", "rtx 3090", "rtx 3080", "rx 7900", "rx 6900")
INTEGRATED_GPUS = ("uhd graphics", "hd graphics", "iris", "vega 8", "vega 6")

LANGUAGE_TIMEZONES: Dict[str, Tuple[str, ...]] = {
    "en-US": ("America/New_York", "America/Chicago", "America/Denver", "America/Los_Angeles", "America/Phoenix"),
    "en-GB": ("Europe/London",),
    "de-DE": ("Europe/Berlin", "Europe/Vienna", "Europe/Zurich"),
    "fr-FR": ("Europe/Paris",),
    "es-ES": ("Europe/Madrid",),
    "ja-JP": ("Asia/Tokyo",),
    "zh-CN": ("Asia/Shanghai", "Asia/Hong_Kong"),
    "ko-KR": ("Asia/Seoul",),
    "pt-BR": ("America/Sao_Paulo", "America/Fortaleza"),
    "ru-RU": ("Europe/Moscow", "Europe/Kaliningrad"),
}

GPU_FIELDS = frozenset({"gpu_vendor", "gpu_renderer", "platform"})


# ============================================================================
# Rules
# ============================================================================

def check_gpu_platform(attrs: ProfileAttributes) -> Optional[CoherenceFinding]:
    """GPU driver/API strings that only exist on one platform."""
    if not attrs.platform or not (attrs.gpu_vendor or attrs.gpu_renderer):
        return None

    platform = attrs.platform
    gpu = f"{attrs.gpu_vendor or ''} {attrs.gpu_renderer or ''}"

    if ("Apple M" in gpu or "Apple GPU" in gpu) and platform != MACOS_PLATFORM:
        return CoherenceFinding(
            id="gpu-platform-apple",
            severity=Severity.ERROR,
            title="Apple GPU on Non-Mac Platform",
            message=(
                f"Apple Silicon (M1/M2/M3) GPUs are exclusive to macOS. Using this GPU "
                f'with "{platform}" platform is easily detectable.'
            ),
            affected_fields=GPU_FIELDS,
            suggestion=f'Change platform to "{MACOS_PLATFORM}" or select a different GPU.',
        )

    if "Mesa" in gpu and "Linux" not in platform:
        return CoherenceFinding(
            id="gpu-platform-mesa",
            severity=Severity.ERROR,
            title="Mesa Driver on Non-Linux Platform",
            message=(
                f'Mesa graphics drivers are Linux-specific. Using Mesa with "{platform}" '
                "is a clear indicator of spoofing."
            ),
            affected_fields=GPU_FIELDS,
            suggestion="Change platform to a Linux variant or select a different GPU.",
        )

    if any(api in gpu for api in ("Direct3D", "D3D11", "D3D12")) and platform != WINDOWS_PLATFORM:
        return CoherenceFinding(
            id="gpu-platform-d3d",
            severity=Severity.ERROR,
            title="Direct3D on Non-Windows Platform",
            message=(
                f'Direct3D is a Windows-only graphics API. Using D3D with "{platform}" '
                "is impossible in reality."
            ),
            affected_fields=GPU_FIELDS,
            suggestion=f'Change platform to "{WINDOWS_PLATFORM}" or select a GPU that uses OpenGL.',
        )

    return None


def _platform_suggested_by(user_agent: str) -> str:
    for platform, patterns in PLATFORM_UA_PATTERNS.items():
        if any(p.search(user_agent) for p in patterns):
            return platform
    return "unknown"


def check_user_agent_platform(attrs: ProfileAttributes) -> Optional[CoherenceFinding]:
    """User agent must name the declared platform."""
    if not attrs.platform or not attrs.user_agent:
        return None

    patterns = PLATFORM_UA_PATTERNS.get(attrs.platform)
    if not patterns or any(p.search(attrs.user_agent) for p in patterns):
        return None

    suggested = _platform_suggested_by(attrs.user_agent)
    return CoherenceFinding(
        id="ua-platform-mismatch",
        severity=Severity.ERROR,
        title="User Agent / Platform Mismatch",
        message=(
            f'Your User Agent suggests "{suggested}" but platform is set to '
            f'"{attrs.platform}". This mismatch is easily detected.'
        ),
        affected_fields=frozenset({"platform", "user_agent"}),
        suggestion=f"Either update the User Agent to match {attrs.platform} or change the platform.",
    )


def check_hardware(attrs: ProfileAttributes) -> Optional[CoherenceFinding]:
    """Core count and memory that real machines of this platform rarely report."""
    if not attrs.platform or attrs.platform not in TYPICAL_CORES:
        return None

    cores = attrs.hardware_concurrency
    memory = attrs.device_memory
    issues: List[str] = []

    if cores is not None and cores not in TYPICAL_CORES[attrs.platform]:
        if cores > MAX_PLAUSIBLE_CORES or cores < MIN_PLAUSIBLE_CORES:
            issues.append(f"{cores} CPU cores is unusual")

    if attrs.platform == MACOS_PLATFORM and memory == 2:
        issues.append("2GB RAM is unrealistic for macOS devices")

    if cores is not None and cores >= 12 and memory is not None and memory <= 4:
        issues.append("High core count with very low RAM is unusual")

    if not issues:
        return None

    return CoherenceFinding(
        id="hardware-unusual",
        severity=Severity.WARNING,
        title="Unusual Hardware Configuration",
        message=". ".join(issues) + ".",
        affected_fields=frozenset({"hardware_concurrency", "device_memory"}),
        suggestion="Consider using more common hardware specifications for your platform.",
    )


def check_screen(attrs: ProfileAttributes) -> Optional[CoherenceFinding]:
    """Screen metrics that do not fit the platform or the memory."""
    if not attrs.platform or attrs.platform not in SCREEN_RULE_PLATFORMS:
        return None

    is_mac = attrs.platform == MACOS_PLATFORM
    ratio = attrs.pixel_ratio
    width = attrs.screen_width
    memory = attrs.device_memory
    issues: List[str] = []

    if is_mac and ratio is not None and ratio < 2:
        issues.append(
            f"Pixel ratio of {ratio:g}x is unusual for Mac (Retina displays are typically 2x+)"
        )

    if is_mac and width is not None and width >= 3840 and ratio == 1:
        issues.append("4K resolution with 1x pixel ratio is uncommon on Mac")

    if width is not None and width >= 3840 and memory is not None and memory <= 4:
        issues.append("4K display with only 4GB RAM is an unusual combination")

    if not issues:
        return None

    return CoherenceFinding(
        id="screen-unusual",
        severity=Severity.WARNING,
        title="Unusual Screen Configuration",
        message=". ".join(issues) + ".",
        affected_fields=frozenset({"screen_width", "screen_height", "pixel_ratio"}),
        suggestion="Consider using screen settings typical for your selected platform.",
    )


def check_touch_points(attrs: ProfileAttributes) -> Optional[CoherenceFinding]:
    """No Mac ships with a touchscreen."""
    if not attrs.platform or attrs.max_touch_points is None:
        return None

    if attrs.platform == MACOS_PLATFORM and attrs.max_touch_points > 0:
        return CoherenceFinding(
            id="touch-mac",
            severity=Severity.WARNING,
            title="Touch Points on Mac",
            message=(
                f"macOS devices don't have touchscreens. Reporting {attrs.max_touch_points} "
                f"touch points on {MACOS_PLATFORM} is suspicious."
            ),
            affected_fields=frozenset({"max_touch_points", "platform"}),
            suggestion="Set touch points to 0 for Mac platform.",
        )

    return None


def check_gpu_specs(attrs: ProfileAttributes) -> Optional[CoherenceFinding]:
    """GPU class against CPU cores and memory."""
    if not attrs.gpu_renderer or attrs.hardware_concurrency is None:
        return None

    gpu = attrs.gpu_renderer.lower()
    cores = attrs.hardware_concurrency
    memory = attrs.device_memory
    affected = frozenset({"gpu_renderer", "hardware_concurrency", "device_memory"})

    is_high_end = any(name in gpu for name in HIGH_END_GPUS)
    if is_high_end and (cores <= 4 or (memory is not None and memory <= 4)):
        memory_text = f"{memory:g}GB" if memory is not None else "unknown"
        return CoherenceFinding(
            id="gpu-specs-mismatch",
            severity=Severity.WARNING,
            title="GPU / System Specs Mismatch",
            message=(
                "A high-end GPU like this is typically paired with more powerful system "
                f"specs. {cores} cores and {memory_text} RAM is unusual."
            ),
            affected_fields=affected,
            suggestion="Consider using higher system specs or a more modest GPU.",
        )

    is_integrated = any(name in gpu for name in INTEGRATED_GPUS)
    if is_integrated and cores >= 16 and memory is not None and memory >= 32:
        return CoherenceFinding(
            id="gpu-specs-mismatch-2",
            severity=Severity.WARNING,
            title="Integrated GPU with High-End Specs",
            message=(
                "Systems with 16+ cores and 32GB+ RAM typically have dedicated GPUs, "
                "not integrated graphics."
            ),
            affected_fields=affected,
            suggestion="Consider using a dedicated GPU or lower system specs.",
        )

    return None


def _is_obvious_mismatch(language: str, timezone: str) -> bool:
    in_asia = timezone.startswith("Asia/")
    in_europe = timezone.startswith("Europe/")
    return (
        (language.startswith("en-US") and in_asia)
        or (language.startswith("ja-JP") and not in_asia)
        or (language.startswith("zh-CN") and not in_asia)
        or (language.startswith("de-DE") and not in_europe)
        or (language.startswith("ru-RU") and not in_europe)
    )


def check_timezone_language(attrs: ProfileAttributes) -> Optional[CoherenceFinding]:
    """Language and timezone on different continents."""
    if not attrs.timezone or not attrs.language:
        return None

    expected = LANGUAGE_TIMEZONES.get(attrs.language)
    if expected is None or attrs.timezone in expected:
        return None

    if not _is_obvious_mismatch(attrs.language, attrs.timezone):
        return None

    return CoherenceFinding(
        id="tz-language-mismatch",
        severity=Severity.WARNING,
        title="Timezone / Language Mismatch",
        message=f'Language "{attrs.language}" with timezone "{attrs.timezone}" is an unusual combination.',
        affected_fields=frozenset({"timezone", "language"}),
        suggestion="Consider matching the timezone to a region where the language is commonly spoken.",
    )


RULES: Tuple[Rule, ...] = (
    check_gpu_platform,
    check_user_agent_platform,
    check_hardware,
    check_screen,
    check_touch_points,
    check_gpu_specs,
    check_timezone_language,
)


def validate(
    attrs: Union[ProfileAttributes, "CoherentProfile"],
    rules: Optional[Sequence[Rule]] = None,
) -> List[CoherenceFinding]:
    """
    Run every coherence rule against an attribute bag.

    Args:
        attrs: Attribute bag, or a generated profile.
        rules: Rules to run instead of the default battery.

    Returns:
        Findings in rule order. Empty when nothing looks off.
    """
    if not isinstance(attrs, ProfileAttributes):
        attrs = ProfileAttributes.from_profile(attrs)

    findings: List[CoherenceFinding] = []
    for rule in RULES if rules is None else rules:
        finding = rule(attrs)
        if finding is not None:
            findings.append(finding)

    logger.debug("Coherence check produced %d finding(s)", len(findings))
    return findings
