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
Coherent Profile Engine.

This package generates and validates device identity profiles:
- Attribute catalogs per platform family (GPU, hardware, screen, UA, touch)
- Tier-constrained sampling so hardware and screen match the GPU
- Plain and seeded (reproducible) profile generation
- Rule-based coherence validation with graded findings
- Conversion to and from the external settings document

The engine is pure: no I/O, no persistence, no shared mutable state.

Example:
    >>> from profilecraft.engine import generate_seeded, summarize, validate
    >>>
    >>> profile = generate_seeded(20240101, "windows")
    >>> summarize(validate(profile)).status.value
    'ok'
"""

from profilecraft.engine.catalogs import (
    LOCALE_GROUPS,
    PLATFORM_CATALOGS,
    GPUDescriptor,
    GPUTier,
    HardwareSpec,
    LocaleGroup,
    PlatformCatalog,
    PlatformFamily,
    ScreenSpec,
    TimezoneOption,
    get_catalog,
)
from profilecraft.engine.exceptions import CatalogError, ProfileEngineError, UnknownPresetError
from profilecraft.engine.generator import CoherentProfile, ProfileGenerator, generate, generate_seeded
from profilecraft.engine.presets import PRESETS, ProfilePreset, find_preset, get_preset, random_preset
from profilecraft.engine.sampler import SeededRandom
from profilecraft.engine.settings_bridge import from_settings, to_settings_fragment
from profilecraft.engine.summary import CoherenceStatus, CoherenceSummary, summarize
from profilecraft.engine.validator import (
    RULES,
    CoherenceFinding,
    ProfileAttributes,
    Severity,
    validate,
)

__all__ = [
    # Catalogs
    "PlatformFamily",
    "GPUTier",
    "GPUDescriptor",
    "HardwareSpec",
    "ScreenSpec",
    "TimezoneOption",
    "LocaleGroup",
    "PlatformCatalog",
    "PLATFORM_CATALOGS",
    "LOCALE_GROUPS",
    "get_catalog",

    # Generation
    "CoherentProfile",
    "ProfileGenerator",
    "SeededRandom",
    "generate",
    "generate_seeded",

    # Validation
    "ProfileAttributes",
    "CoherenceFinding",
    "Severity",
    "RULES",
    "validate",
    "CoherenceStatus",
    "CoherenceSummary",
    "summarize",

    # Settings bridge
    "to_settings_fragment",
    "from_settings",

    # Presets
    "ProfilePreset",
    "PRESETS",
    "find_preset",
    "get_preset",
    "random_preset",

    # Errors
    "ProfileEngineError",
    "CatalogError",
    "UnknownPresetError",
]
