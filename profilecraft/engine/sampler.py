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
Random sources and the tier-constrained sampler.

A random source is any zero-argument callable returning a float in
``[0, 1)``. ``random.random`` is the default; ``SeededRandom`` gives a
reproducible stream for "randomize with this seed" workflows.

Tier slicing keeps the hardware and screen draws in line with the GPU:

=============  ======================  ======================
Tier           Hardware pool           Screen pool
=============  ======================  ======================
integrated     first ceil(40%)         first ceil(50%)
mid            from floor(30%) on      whole pool
high           from floor(50%) on      from floor(40%) on
=============  ======================  ======================

The integrated and mid hardware ranges overlap on purpose; a mid-tier GPU
can land on hardware from the low end.
"""

from __future__ import annotations

import math
import random
from typing import Callable, Sequence, TypeVar

from profilecraft.engine.catalogs import GPUTier, HardwareSpec, ScreenSpec
from profilecraft.engine.exceptions import CatalogError

T = TypeVar("T")

RandomSource = Callable[[], float]

# Linear congruential generator constants
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

UINT32_MASK = 0xFFFFFFFF


class SeededRandom:
    """
    Deterministic random source.

    Each call advances ``state = (state * 9301 + 49297) % 233280`` and
    returns ``state / 233280``. The sequence for a given seed never changes.

    Example:
        >>> rng = SeededRandom(42)
        >>> first = rng()
        >>> SeededRandom(42)() == first
        True
    """

    __slots__ = ("seed", "_state")

    def __init__(self, seed: int):
        self.seed = int(seed) & UINT32_MASK
        self._state = self.seed

    def __call__(self) -> float:
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._state / LCG_MODULUS

    @property
    def state(self) -> int:
        return self._state

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed}, state={self._state})"


def default_random_source() -> RandomSource:
    """Non-deterministic source used when the caller supplies none."""
    return random.random


def pick(pool: Sequence[T], random_source: RandomSource) -> T:
    """
    Pick one element uniformly.

    Consumes exactly one value from ``random_source``.

    Raises:
        CatalogError: If ``pool`` is empty.
    """
    if not pool:
        raise CatalogError("Cannot pick from an empty pool")
    index = math.floor(random_source() * len(pool))
    # Guard against sources that return exactly 1.0
    return pool[min(index, len(pool) - 1)]


def hardware_pool_for_tier(specs: Sequence[HardwareSpec], tier: GPUTier) -> Sequence[HardwareSpec]:
    """Slice of an ordered hardware pool that suits a GPU tier."""
    count = len(specs)
    if tier == GPUTier.INTEGRATED:
        return specs[:math.ceil(count * 0.4)]
    if tier == GPUTier.MID:
        return specs[math.floor(count * 0.3):]
    return specs[math.floor(count * 0.5):]


def screen_pool_for_tier(screens: Sequence[ScreenSpec], tier: GPUTier) -> Sequence[ScreenSpec]:
    """Slice of an ordered screen pool that suits a GPU tier."""
    count = len(screens)
    if tier == GPUTier.INTEGRATED:
        return screens[:math.ceil(count * 0.5)]
    if tier == GPUTier.MID:
        return screens
    return screens[math.floor(count * 0.4):]


def sample_hardware(
    specs: Sequence[HardwareSpec],
    tier: GPUTier,
    random_source: RandomSource,
) -> HardwareSpec:
    """Draw a hardware spec compatible with ``tier``."""
    return pick(hardware_pool_for_tier(specs, tier), random_source)


def sample_screen(
    screens: Sequence[ScreenSpec],
    tier: GPUTier,
    random_source: RandomSource,
) -> ScreenSpec:
    """Draw a screen spec compatible with ``tier``."""
    return pick(screen_pool_for_tier(screens, tier), random_source)
