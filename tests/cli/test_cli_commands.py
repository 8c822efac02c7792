# Copyright 2026 Firefly Software Solutions Inc
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the profilecraft command-line interface."""

from __future__ import annotations

import json
from typing import List, Tuple

import pytest
import yaml

from profilecraft import __version__
from profilecraft.cli.main import EXIT_FINDINGS, EXIT_OK, EXIT_USAGE, create_parser, main
from profilecraft.config import EngineSettings
from profilecraft.engine.generator import generate_seeded


def run_cli(capsys, argv: List[str]) -> Tuple[int, str, str]:
    """Run main() and return (exit code, stdout, stderr)."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    captured = capsys.readouterr()
    return exc_info.value.code, captured.out, captured.err


@pytest.fixture(autouse=True)
def _clean(clean_env):
    yield clean_env


class TestParser:
    """Tests for argument parsing."""

    def test_global_defaults_from_settings(self):
        parser = create_parser(EngineSettings(log_level="debug", log_format="text"))
        args = parser.parse_args(["version"])
        assert args.log_level == "DEBUG"
        assert args.log_format == "text"

    def test_generate_options(self):
        args = create_parser().parse_args(
            ["generate", "--platform", "linux", "--seed", "5", "--json", "--settings", "s.yaml", "--write"]
        )
        assert args.platform == "linux"
        assert args.seed == 5
        assert args.json and args.write
        assert args.settings == "s.yaml"

    def test_rejects_unknown_platform(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["generate", "--platform", "haiku"])
        assert exc_info.value.code == 2

    def test_no_command_prints_help(self, capsys):
        code, out, _ = run_cli(capsys, [])
        assert code == EXIT_OK
        assert "profilecraft" in out


class TestVersionCommand:
    """Tests for the version command."""

    def test_plain(self, capsys):
        code, out, _ = run_cli(capsys, ["version"])
        assert code == EXIT_OK
        assert out.strip() == f"ProfileCraft {__version__}"

    def test_json(self, capsys):
        code, out, _ = run_cli(capsys, ["version", "--json"])
        assert json.loads(out)["profilecraft"] == __version__


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_seeded_json(self, capsys):
        code, out, _ = run_cli(capsys, ["generate", "--platform", "macos", "--seed", "42", "--json"])
        assert code == EXIT_OK
        assert json.loads(out) == generate_seeded(42, "macos").to_dict()

    def test_table_output(self, capsys):
        code, out, _ = run_cli(capsys, ["generate", "--seed", "7"])
        profile = generate_seeded(7)
        assert code == EXIT_OK
        assert profile.fingerprint_hash() in out
        assert profile.user_agent in out

    def test_seed_and_platform_from_environment(self, capsys, clean_env):
        clean_env.setenv("PROFILECRAFT_DEFAULT_SEED", "99")
        clean_env.setenv("PROFILECRAFT_DEFAULT_PLATFORM", "linux")
        _, out, _ = run_cli(capsys, ["generate", "--json"])
        assert json.loads(out) == generate_seeded(99, "linux").to_dict()

    def test_unseeded(self, capsys):
        code, out, _ = run_cli(capsys, ["generate", "--platform", "windows", "--json"])
        assert code == EXIT_OK
        assert json.loads(out)["platform"] == "Win32"

    def test_overlay_prints_merged(self, capsys, write_document, coherent_settings):
        path = write_document(coherent_settings, "fp.json")
        code, out, _ = run_cli(capsys, ["generate", "--seed", "3", "--platform", "linux", "--settings", path])

        merged = json.loads(out)
        assert code == EXIT_OK
        assert merged["navigator"]["platform"] == "Linux x86_64"
        assert merged["canvas"] == coherent_settings["canvas"]
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == coherent_settings

    def test_overlay_write_yaml(self, capsys, write_document, coherent_settings):
        path = write_document(coherent_settings, "fp.yaml")
        code, out, _ = run_cli(capsys, ["generate", "--seed", "3", "--settings", path, "--write"])

        profile = generate_seeded(3)
        assert code == EXIT_OK
        assert profile.fingerprint_hash() in out
        with open(path, encoding="utf-8") as f:
            written = yaml.safe_load(f)
        assert written["webgl"]["renderer"] == profile.gpu_renderer
        assert written["canvas"] == coherent_settings["canvas"]

    def test_write_requires_settings(self, capsys):
        code, _, err = run_cli(capsys, ["generate", "--write"])
        assert code == EXIT_USAGE
        assert "--settings" in err

    def test_missing_settings_file(self, capsys, tmp_path):
        code, out, err = run_cli(capsys, ["generate", "--settings", str(tmp_path / "none.json")])
        assert code == EXIT_USAGE
        assert out == ""
        assert "File not found" in err

    def test_malformed_settings_yaml(self, capsys, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("webgl: {vendor: \"x\"\n")
        code, out, err = run_cli(capsys, ["generate", "--settings", str(path)])
        assert code == EXIT_USAGE
        assert out == ""
        assert "Invalid YAML" in err


class TestValidateCommand:
    """Tests for the validate command."""

    def test_coherent(self, capsys, write_document, coherent_settings):
        code, out, _ = run_cli(capsys, ["validate", write_document(coherent_settings)])
        assert code == EXIT_OK
        assert "[OK]" in out

    def test_error_finding(self, capsys, write_document, incoherent_settings):
        code, out, _ = run_cli(capsys, ["validate", write_document(incoherent_settings, "bad.yaml"), "--json"])
        report = json.loads(out)
        assert code == EXIT_FINDINGS
        assert report["summary"]["status"] == "error"
        assert [f["id"] for f in report["findings"]] == ["gpu-platform-apple"]

    def test_warning_passes_unless_strict(self, capsys, write_document, coherent_settings):
        coherent_settings["timezone"]["timezone"] = "Asia/Tokyo"
        path = write_document(coherent_settings)

        code, out, _ = run_cli(capsys, ["validate", path])
        assert code == EXIT_OK
        assert "tz-language-mismatch" in out

        code, _, _ = run_cli(capsys, ["validate", path, "--strict"])
        assert code == EXIT_FINDINGS

    def test_strict_from_environment(self, capsys, clean_env, write_document, coherent_settings):
        clean_env.setenv("PROFILECRAFT_STRICT", "true")
        coherent_settings["navigator"]["maxTouchPoints"] = 5
        coherent_settings["navigator"]["platform"] = "MacIntel"
        coherent_settings["navigator"]["userAgent"] = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)"
        coherent_settings["webgl"] = {"enabled": True}

        code, _, _ = run_cli(capsys, ["validate", write_document(coherent_settings)])
        assert code == EXIT_FINDINGS

    def test_empty_document(self, capsys, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("{}")
        code, out, _ = run_cli(capsys, ["validate", str(path), "--json"])
        assert code == EXIT_OK
        assert json.loads(out)["findings"] == []

    def test_missing_file(self, capsys, tmp_path):
        code, _, err = run_cli(capsys, ["validate", str(tmp_path / "nope.yaml")])
        assert code == EXIT_USAGE
        assert "File not found" in err

    def test_unsupported_format(self, capsys, tmp_path):
        path = tmp_path / "fp.ini"
        path.write_text("[navigator]")
        code, _, err = run_cli(capsys, ["validate", str(path)])
        assert code == EXIT_USAGE
        assert "Unsupported file format" in err

    def test_malformed_yaml(self, capsys, tmp_path):
        path = tmp_path / "fp.yaml"
        path.write_text("navigator: [unclosed\n")
        code, out, err = run_cli(capsys, ["validate", str(path)])
        assert code == EXIT_USAGE
        assert out == ""
        assert "Invalid YAML" in err
        assert "Traceback" not in err

    def test_wrongly_typed_fields(self, capsys, write_document, coherent_settings):
        coherent_settings["navigator"]["hardwareConcurrency"] = "8"
        coherent_settings["navigator"]["platform"] = 5
        code, out, _ = run_cli(capsys, ["validate", write_document(coherent_settings), "--json"])
        assert code == EXIT_OK
        assert json.loads(out)["findings"] == []


class TestPresetsCommand:
    """Tests for the presets command."""

    def test_list(self, capsys):
        code, out, _ = run_cli(capsys, ["presets"])
        assert code == EXIT_OK
        assert "windows-chrome" in out
        assert "iphone-safari" in out

    def test_list_json(self, capsys):
        _, out, _ = run_cli(capsys, ["presets", "--json"])
        presets = json.loads(out)
        assert len(presets) == 5
        families = {p["id"]: p["family"] for p in presets}
        assert families["macos-chrome"] == "macos"
        assert families["android-chrome"] is None

    def test_show_one(self, capsys):
        code, out, _ = run_cli(capsys, ["presets", "linux-firefox", "--json"])
        assert code == EXIT_OK
        assert json.loads(out)["profile"]["platform"] == "Linux x86_64"

    def test_unknown(self, capsys):
        code, _, err = run_cli(capsys, ["presets", "beos-netpositive"])
        assert code == EXIT_USAGE
        assert "Unknown preset profile" in err
