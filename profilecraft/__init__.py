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
ProfileCraft - coherent browser device identities.

Generate plausible device profiles (platform, GPU, hardware, screen, locale)
and check hand-edited ones for combinations that give spoofing away.

Example:
    >>> from profilecraft import generate, summarize, validate
    >>> profile = generate("linux")
    >>> summarize(validate(profile)).error_count
    0
"""

__version__ = "26.10.0"
__author__ = "Firefly Software Solutions Inc"
__license__ = "Apache-2.0"

from profilecraft.engine import (
    CoherenceFinding,
    CoherenceStatus,
    CoherenceSummary,
    CoherentProfile,
    PlatformFamily,
    ProfileAttributes,
    ProfileGenerator,
    Severity,
    from_settings,
    generate,
    generate_seeded,
    summarize,
    to_settings_fragment,
    validate,
)

__all__ = [
    "__version__",
    "CoherentProfile",
    "ProfileAttributes",
    "ProfileGenerator",
    "PlatformFamily",
    "CoherenceFinding",
    "CoherenceStatus",
    "CoherenceSummary",
    "Severity",
    "generate",
    "generate_seeded",
    "validate",
    "summarize",
    "to_settings_fragment",
    "from_settings",
]
