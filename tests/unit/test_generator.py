# Copyright 2026 Firefly Software Solutions Inc
# SPDX-License-Identifier: Apache-2.0

"""Tests for coherent profile generation."""

from __future__ import annotations

import dataclasses

import pytest

from profilecraft.engine.catalogs import LOCALE_GROUPS, PlatformFamily, get_catalog
from profilecraft.engine.generator import CoherentProfile, ProfileGenerator, generate, generate_seeded
from profilecraft.engine.sampler import SeededRandom, hardware_pool_for_tier, screen_pool_for_tier
from profilecraft.engine.validator import ProfileAttributes, Severity, validate


def _combination(profile: CoherentProfile):
    return (
        profile.platform,
        profile.gpu_renderer,
        profile.hardware_concurrency,
        profile.device_memory,
        profile.screen_width,
        profile.screen_height,
        profile.pixel_ratio,
        profile.language,
        profile.timezone,
    )


class TestProfileGenerator:
    """Tests for ProfileGenerator with scripted sources."""

    def test_all_zero_draws(self, scripted_random):
        """Drawing 0.0 everywhere picks the first entry of every pool."""
        rng = scripted_random([0.0])
        profile = ProfileGenerator(rng).generate()

        windows = get_catalog("windows")
        assert profile.platform == "Win32"
        assert profile.gpu_renderer == windows.gpus[0].renderer
        assert (profile.hardware_concurrency, profile.device_memory) == (4, 8)
        assert (profile.screen_width, profile.screen_height, profile.pixel_ratio) == (1366, 768, 1)
        assert profile.language == "en-US"
        assert profile.timezone == "America/New_York"
        assert profile.timezone_offset == -300
        assert profile.user_agent == windows.user_agents[0]
        assert profile.max_touch_points == 0
        assert rng.calls == 8

    def test_fixed_family_skips_family_draw(self, scripted_random):
        rng = scripted_random([0.0])
        profile = ProfileGenerator(rng).generate(PlatformFamily.LINUX)
        assert profile.platform == "Linux x86_64"
        assert rng.calls == 7

    def test_family_from_first_draw(self, scripted_random):
        """0.5 lands on the middle family."""
        rng = scripted_random([0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0])
        assert ProfileGenerator(rng).generate().platform == "MacIntel"

    def test_high_tier_gpu_pulls_high_hardware(self, scripted_random):
        """Last GPU (high tier) plus a 0.0 hardware draw starts at the high slice."""
        rng = scripted_random([0.999, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0])
        profile = ProfileGenerator(rng).generate("windows")
        assert profile.gpu_renderer.endswith("RX 6800 XT Direct3D11 vs_5_0 ps_5_0, D3D11)")
        assert (profile.hardware_concurrency, profile.device_memory) == (8, 16)
        assert profile.screen_width == 1920

    def test_unknown_family(self):
        with pytest.raises(ValueError):
            ProfileGenerator(SeededRandom(1)).generate("beos")

    def test_locale_fields_come_from_one_group(self):
        rng = SeededRandom(2024)
        for _ in range(100):
            profile = ProfileGenerator(rng).generate()
            group = next(g for g in LOCALE_GROUPS if g.language == profile.language)
            assert profile.languages == group.languages
            assert any(
                tz.timezone == profile.timezone and tz.offset_minutes == profile.timezone_offset
                for tz in group.timezones
            )


class TestGenerateFunctions:
    """Tests for the module-level entry points."""

    @pytest.mark.parametrize("family", ["windows", "macos", "linux"])
    def test_generate_family(self, family):
        profile = generate(family)
        assert profile.platform == get_catalog(family).platform
        assert validate(profile) == []

    def test_generate_random_family(self):
        platforms = {generate().platform for _ in range(200)}
        assert platforms <= {"Win32", "MacIntel", "Linux x86_64"}

    def test_seeded_is_reproducible(self):
        assert generate_seeded(42, "macos") == generate_seeded(42, "macos")
        assert generate_seeded(7) == generate_seeded(7)

    def test_seeded_calls_are_independent(self):
        """Each call starts a fresh stream from the seed."""
        first = generate_seeded(1000)
        generate_seeded(1001)
        assert generate_seeded(1000) == first

    def test_seeds_spread(self):
        """Seeds a prime stride apart yield distinct GPU/hardware/screen/locale combinations."""
        combos = {_combination(generate_seeded(seed)) for seed in range(0, 1000 * 7919, 7919)}
        assert len(combos) > 950

    def test_consecutive_seeds_spread(self):
        """Neighbouring seeds start on nearby LCG states, so they collide more often."""
        combos = {_combination(generate_seeded(seed)) for seed in range(1000)}
        assert len(combos) > 900

    @pytest.mark.parametrize("family", ["windows", "macos", "linux"])
    def test_repeated_generation_stays_coherent(self, family):
        catalog = get_catalog(family)
        gpus = {(g.vendor, g.renderer): g.tier for g in catalog.gpus}
        locales = {g.language: g for g in LOCALE_GROUPS}

        for _ in range(1000):
            profile = generate(family)

            assert profile.platform == catalog.platform
            assert profile.user_agent in catalog.user_agents
            assert profile.max_touch_points in catalog.touch_points

            tier = gpus[(profile.gpu_vendor, profile.gpu_renderer)]
            hardware = [(h.cores, h.memory_gib) for h in hardware_pool_for_tier(catalog.hardware_specs, tier)]
            assert (profile.hardware_concurrency, profile.device_memory) in hardware
            screens = [
                (s.width, s.height, s.pixel_ratio, s.color_depth)
                for s in screen_pool_for_tier(catalog.screens, tier)
            ]
            assert (profile.screen_width, profile.screen_height, profile.pixel_ratio, profile.color_depth) in screens

            group = locales[profile.language]
            assert profile.languages == group.languages
            assert (profile.timezone, profile.timezone_offset) in [
                (tz.timezone, tz.offset_minutes) for tz in group.timezones
            ]

            errors = [f.id for f in validate(profile) if f.severity == Severity.ERROR]
            assert errors == [], errors


class TestCoherentProfile:
    """Tests for the profile value type."""

    @pytest.fixture
    def profile(self) -> CoherentProfile:
        return generate_seeded(20240101, "windows")

    def test_frozen(self, profile):
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.platform = "MacIntel"

    def test_to_dict_keys(self, profile):
        data = profile.to_dict()
        assert set(data) == {
            "platform", "userAgent", "gpuVendor", "gpuRenderer", "hardwareConcurrency",
            "deviceMemory", "maxTouchPoints", "screenWidth", "screenHeight", "colorDepth",
            "pixelRatio", "timezone", "timezoneOffset", "language", "languages",
        }
        assert isinstance(data["languages"], list)

    def test_to_attributes(self, profile):
        attrs = profile.to_attributes()
        assert isinstance(attrs, ProfileAttributes)
        assert attrs.gpu_renderer == profile.gpu_renderer
        assert attrs.languages == profile.languages

    def test_fingerprint_hash(self, profile):
        digest = profile.fingerprint_hash()
        assert len(digest) == 16
        int(digest, 16)
        assert digest == generate_seeded(20240101, "windows").fingerprint_hash()
