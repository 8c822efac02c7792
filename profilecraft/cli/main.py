#!/usr/bin/env python3
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
ProfileCraft Unified CLI.

Usage:
    profilecraft generate [OPTIONS]   # Generate a coherent profile
    profilecraft validate FILE        # Check a settings document
    profilecraft presets [ID]         # List or show preset profiles
    profilecraft version              # Show version information
    profilecraft --help               # Show help

Examples:
    # Reproducible macOS profile as JSON
    profilecraft generate --platform macos --seed 42 --json

    # Apply a fresh profile to an existing settings file
    profilecraft generate --settings fingerprint.yaml --write

    # Fail on warnings too
    profilecraft validate fingerprint.json --strict
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, List, Optional

from pydantic import ValidationError

from profilecraft.cli.output import CLIOutput
from profilecraft.config import EngineSettings, load_document, save_document
from profilecraft.engine.catalogs import PLATFORM_FAMILIES, family_for_platform
from profilecraft.engine.exceptions import UnknownPresetError
from profilecraft.engine.generator import generate, generate_seeded
from profilecraft.engine.presets import PRESETS, ProfilePreset, get_preset
from profilecraft.engine.settings_bridge import from_settings, to_settings_fragment
from profilecraft.engine.summary import CoherenceStatus, summarize
from profilecraft.engine.validator import validate
from profilecraft.utils.logger import LogFormat, configure_logging, logger

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


def get_version() -> str:
    """Get the ProfileCraft version."""
    import profilecraft
    return getattr(profilecraft, "__version__", "unknown")


# Global CLI output instance
cli_output = CLIOutput()


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return EXIT_USAGE


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    version = get_version()

    if args.json:
        import platform
        info = {
            "profilecraft": version,
            "python": platform.python_version(),
            "platform": platform.system(),
        }
        _print_json(info)
    else:
        print(f"ProfileCraft {version}")

    return EXIT_OK


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a profile, optionally overlaid onto a settings file."""
    settings: EngineSettings = args.engine_settings

    if args.write and not args.settings:
        return _error("--write requires --settings FILE")

    family = args.platform or settings.default_platform
    seed = args.seed if args.seed is not None else settings.default_seed

    if seed is not None:
        profile = generate_seeded(seed, family)
    else:
        profile = generate(family)

    logger.info(
        "Generated profile",
        extra={"platform": profile.platform, "seed": seed, "hash": profile.fingerprint_hash()},
    )

    if not args.settings:
        if args.json:
            _print_json(profile.to_dict())
        else:
            cli_output.print_profile(profile)
        return EXIT_OK

    try:
        existing = load_document(args.settings)
    except (FileNotFoundError, ValueError) as e:
        return _error(str(e))

    merged = to_settings_fragment(profile, existing)

    if args.write:
        save_document(merged, args.settings)
        logger.info("Settings written", extra={"path": args.settings})
        if args.json:
            _print_json({"path": args.settings, "profile": profile.to_dict()})
        else:
            print(f"Applied profile {profile.fingerprint_hash()} to {args.settings}")
    else:
        _print_json(merged)

    return EXIT_OK


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a settings document and report findings."""
    settings: EngineSettings = args.engine_settings

    try:
        document = load_document(args.file)
    except (FileNotFoundError, ValueError) as e:
        return _error(str(e))

    attrs = from_settings(document)
    if attrs.is_empty():
        logger.warning("No profile fields found", extra={"path": args.file})

    findings = validate(attrs)
    summary = summarize(findings)

    if args.json:
        _print_json({
            "file": args.file,
            "summary": summary.to_dict(),
            "findings": [f.to_dict() for f in findings],
        })
    else:
        cli_output.print_findings(findings, summary)

    strict = args.strict or settings.strict
    if summary.status == CoherenceStatus.ERROR:
        return EXIT_FINDINGS
    if strict and summary.status == CoherenceStatus.WARNING:
        return EXIT_FINDINGS
    return EXIT_OK


def _preset_dict(preset: ProfilePreset) -> dict:
    family = family_for_platform(preset.profile.platform)
    return {
        "id": preset.id,
        "name": preset.name,
        "description": preset.description,
        "family": family.value if family else None,
        "profile": preset.profile.to_dict(),
    }


def cmd_presets(args: argparse.Namespace) -> int:
    """List presets, or show one."""
    if args.preset_id:
        try:
            preset = get_preset(args.preset_id)
        except UnknownPresetError as e:
            return _error(str(e))

        if args.json:
            _print_json(_preset_dict(preset))
        else:
            cli_output.print_profile(preset.profile, title=f"{preset.name} ({preset.id})")
        return EXIT_OK

    if args.json:
        _print_json([_preset_dict(p) for p in PRESETS])
    else:
        cli_output.print_presets(PRESETS)
    return EXIT_OK


def create_parser(settings: Optional[EngineSettings] = None) -> argparse.ArgumentParser:
    """Create the main argument parser.

    Defaults for the global options come from ``settings``.
    """
    settings = settings or EngineSettings()

    parser = argparse.ArgumentParser(
        prog="profilecraft",
        description="ProfileCraft - Coherent browser device identities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  generate    Generate a coherent profile
  validate    Check a settings document for coherence
  presets     List or show preset profiles
  version     Show version information

Examples:
  profilecraft generate --platform windows --seed 7
  profilecraft validate fingerprint.yaml --json
""",
    )

    # Global logging options
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=settings.log_level,
        help=f"Set logging level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=[f.value for f in LogFormat],
        default=LogFormat(settings.log_format).value,
        help="Log output format (default: json)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a coherent profile",
    )
    generate_parser.add_argument(
        "--platform", "-p",
        choices=[f.value for f in PLATFORM_FAMILIES],
        help="Platform family (default: random)",
    )
    generate_parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Seed for reproducible output",
    )
    generate_parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    generate_parser.add_argument(
        "--settings",
        metavar="FILE",
        help="Overlay the profile onto this YAML/JSON settings file",
    )
    generate_parser.add_argument(
        "--write", "-w",
        action="store_true",
        help="Write the merged settings back to --settings FILE",
    )
    generate_parser.set_defaults(func=cmd_generate)

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a settings document for coherence",
    )
    validate_parser.add_argument("file", help="YAML or JSON settings file")
    validate_parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero on warnings too",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # presets command
    presets_parser = subparsers.add_parser(
        "presets",
        help="List or show preset profiles",
    )
    presets_parser.add_argument("preset_id", nargs="?", metavar="ID", help="Preset to show")
    presets_parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    presets_parser.set_defaults(func=cmd_presets)

    # version command
    version_parser = subparsers.add_parser(
        "version",
        help="Show version information",
    )
    version_parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    version_parser.set_defaults(func=cmd_version)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the unified CLI."""
    try:
        settings = EngineSettings()
    except ValidationError as e:
        print(f"Error: invalid PROFILECRAFT_* environment: {e}", file=sys.stderr)
        sys.exit(EXIT_USAGE)

    parser = create_parser(settings)
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, log_format=LogFormat(args.log_format))

    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_OK)

    args.engine_settings = settings
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
