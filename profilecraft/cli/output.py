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

"""CLI output formatting utilities for consistent command output."""

import sys
from typing import Any, Dict, Iterable, Optional

from profilecraft.engine.generator import CoherentProfile
from profilecraft.engine.presets import ProfilePreset
from profilecraft.engine.summary import CoherenceStatus, CoherenceSummary
from profilecraft.engine.validator import CoherenceFinding, Severity


class CLIOutput:
    """
    Terminal rendering for ProfileCraft commands.

    Colors are used only when stdout is a TTY.
    """

    # ANSI color codes
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    def __init__(self, use_colors: bool = True):
        """
        Initialize CLI output formatter.

        Args:
            use_colors: Whether to use ANSI colors (auto-detected if stdout is a TTY)
        """
        self.use_colors = use_colors and sys.stdout.isatty()

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if self.use_colors:
            return f"{color}{text}{self.RESET}"
        return text

    def _bold(self, text: str) -> str:
        return self._color(text, self.BOLD)

    def _dim(self, text: str) -> str:
        return self._color(text, self.DIM)

    def print_summary(
        self,
        title: str,
        items: Dict[str, Any],
        show_divider: bool = True,
    ) -> None:
        """
        Print a titled block of aligned key-value pairs.

        Args:
            title: Block title
            items: Dictionary of key-value pairs to display
            show_divider: Whether to show a divider line after the block
        """
        print(self._bold(f"> {title}"))
        print()

        max_key_len = max(len(str(k)) for k in items.keys()) if items else 0

        for key, value in items.items():
            key_str = str(key).ljust(max_key_len)
            value_str = str(value) if value is not None else "-"
            print(f"  {self._dim(key_str)}  {value_str}")

        print()
        if show_divider:
            self.print_divider()

    def print_divider(self, char: str = "─", width: int = 50) -> None:
        """Print a horizontal divider."""
        print(self._dim(char * width))

    def print_profile(self, profile: CoherentProfile, title: Optional[str] = None) -> None:
        """Print a profile as an aligned table."""
        self.print_summary(
            title or f"Profile {profile.fingerprint_hash()}",
            {
                "Platform": profile.platform,
                "User Agent": profile.user_agent,
                "GPU Vendor": profile.gpu_vendor,
                "GPU Renderer": profile.gpu_renderer,
                "CPU Cores": profile.hardware_concurrency,
                "Memory": f"{profile.device_memory} GB",
                "Touch Points": profile.max_touch_points,
                "Screen": f"{profile.screen_width}x{profile.screen_height} @{profile.pixel_ratio:g}x",
                "Color Depth": profile.color_depth,
                "Timezone": f"{profile.timezone} ({profile.timezone_offset:+d} min)",
                "Language": profile.language,
                "Languages": ", ".join(profile.languages),
            },
        )

    def print_finding(self, finding: CoherenceFinding) -> None:
        """Print one finding with its severity tag."""
        if finding.severity == Severity.ERROR:
            tag = self._color("[ERROR]", self.RED)
        else:
            tag = self._color("[WARN]", self.YELLOW)

        print(f"{tag} {self._bold(finding.title)} {self._dim(f'({finding.id})')}")
        print(f"    {finding.message}")
        if finding.suggestion:
            print(f"    {self._dim('Suggestion:')} {finding.suggestion}")

    def print_findings(self, findings: Iterable[CoherenceFinding], summary: CoherenceSummary) -> None:
        """Print all findings followed by the overall status line."""
        for finding in findings:
            self.print_finding(finding)
            print()

        colors = {
            CoherenceStatus.OK: self.GREEN,
            CoherenceStatus.WARNING: self.YELLOW,
            CoherenceStatus.ERROR: self.RED,
        }
        status = self._color(f"[{summary.status.value.upper()}]", colors[summary.status])
        print(f"{status} {summary.message}")

    def print_presets(self, presets: Iterable[ProfilePreset]) -> None:
        """Print preset ids with their names."""
        presets = list(presets)
        width = max((len(p.id) for p in presets), default=0)
        print(self._bold("> Presets"))
        print()
        for preset in presets:
            print(f"  {self._color(preset.id.ljust(width), self.CYAN)}  {preset.name}")
            print(f"  {' ' * width}  {self._dim(preset.description)}")
        print()


# Global instance for convenience
output = CLIOutput()
