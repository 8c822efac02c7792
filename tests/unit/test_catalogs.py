# Copyright 2026 Firefly Software Solutions Inc
# SPDX-License-Identifier: Apache-2.0

"""Tests for the platform and locale catalogs."""

from __future__ import annotations

import dataclasses

import pytest

from profilecraft.engine.catalogs import (
    LINUX_PLATFORM,
    LOCALE_GROUPS,
    MACOS_PLATFORM,
    PLATFORM_CATALOGS,
    PLATFORM_FAMILIES,
    WINDOWS_PLATFORM,
    GPUTier,
    PlatformFamily,
    family_for_platform,
    get_catalog,
    resolve_family,
)


class TestPlatformCatalogs:
    """Tests for the per-family attribute pools."""

    def test_families_in_order(self):
        """The family draw indexes windows, macos, linux in that order."""
        assert PLATFORM_FAMILIES == (PlatformFamily.WINDOWS, PlatformFamily.MACOS, PlatformFamily.LINUX)

    @pytest.mark.parametrize(
        "family, platform, sizes",
        [
            (PlatformFamily.WINDOWS, WINDOWS_PLATFORM, (5, 17, 9, 9, 6)),
            (PlatformFamily.MACOS, MACOS_PLATFORM, (6, 8, 8, 7, 1)),
            (PlatformFamily.LINUX, LINUX_PLATFORM, (6, 9, 7, 6, 6)),
        ],
    )
    def test_catalog_shape(self, family, platform, sizes):
        """Each catalog carries its platform label and non-empty pools."""
        catalog = PLATFORM_CATALOGS[family]
        assert catalog.family == family
        assert catalog.platform == platform
        assert (
            len(catalog.user_agents),
            len(catalog.gpus),
            len(catalog.hardware_specs),
            len(catalog.screens),
            len(catalog.touch_points),
        ) == sizes

    def test_hardware_ordered_by_capability(self):
        """Hardware pools are ordered low to high so tier slices make sense."""
        for catalog in PLATFORM_CATALOGS.values():
            keys = [(h.cores, h.memory_gib) for h in catalog.hardware_specs]
            assert keys == sorted(keys)

    def test_every_tier_present(self):
        """Each catalog has at least one GPU of every tier it can slice for."""
        for catalog in PLATFORM_CATALOGS.values():
            tiers = {gpu.tier for gpu in catalog.gpus}
            assert GPUTier.INTEGRATED in tiers
            assert GPUTier.MID in tiers
            assert GPUTier.HIGH in tiers

    def test_windows_gpus_use_direct3d(self):
        for gpu in get_catalog("windows").gpus:
            assert "D3D11" in gpu.renderer
            assert "Mesa" not in gpu.renderer

    def test_macos_has_only_retina_and_no_touch(self):
        catalog = get_catalog(PlatformFamily.MACOS)
        assert all(screen.pixel_ratio >= 2 for screen in catalog.screens)
        assert catalog.touch_points == (0,)

    def test_linux_gpus_avoid_platform_exclusive_apis(self):
        for gpu in get_catalog("linux").gpus:
            assert "Direct3D" not in gpu.renderer
            assert "Apple" not in gpu.renderer

    def test_catalogs_are_immutable(self):
        catalog = get_catalog("windows")
        with pytest.raises(dataclasses.FrozenInstanceError):
            catalog.platform = "Linux x86_64"
        assert isinstance(catalog.gpus, tuple)


class TestLocaleGroups:
    """Tests for the locale table."""

    def test_locale_order(self):
        assert [group.language for group in LOCALE_GROUPS] == [
            "en-US", "en-GB", "de-DE", "fr-FR", "es-ES", "pt-BR", "ja-JP", "ko-KR",
            "zh-CN", "ru-RU", "nl-NL", "it-IT", "pl-PL", "en-AU", "en-CA",
        ]

    def test_language_leads_its_list(self):
        for group in LOCALE_GROUPS:
            assert group.languages[0] == group.language
            assert group.timezones

    def test_known_offsets(self):
        offsets = {
            tz.timezone: tz.offset_minutes
            for group in LOCALE_GROUPS
            for tz in group.timezones
        }
        assert offsets["America/New_York"] == -300
        assert offsets["Europe/London"] == 0
        assert offsets["Asia/Tokyo"] == 540
        assert offsets["Europe/Kaliningrad"] == 120
        assert offsets["Australia/Sydney"] == 660


class TestFamilyLookup:
    """Tests for family name resolution."""

    @pytest.mark.parametrize("name", ["macos", "macOS", " MACOS ", PlatformFamily.MACOS])
    def test_resolve_family(self, name):
        assert resolve_family(name) is PlatformFamily.MACOS

    def test_resolve_unknown_family(self):
        with pytest.raises(ValueError, match="Unknown platform family"):
            resolve_family("amiga")

    def test_family_for_platform(self):
        assert family_for_platform("Win32") is PlatformFamily.WINDOWS
        assert family_for_platform("Linux x86_64") is PlatformFamily.LINUX
        assert family_for_platform("iPhone") is None
