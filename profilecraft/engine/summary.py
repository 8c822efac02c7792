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

"""Fold coherence findings into one overall status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable

from profilecraft.engine.validator import CoherenceFinding, Severity


class CoherenceStatus(str, Enum):
    """Overall coherence status."""
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class CoherenceSummary:
    """Overall status plus per-severity counts."""
    status: CoherenceStatus
    error_count: int
    warning_count: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
            "message": self.message,
        }


def summarize(findings: Iterable[CoherenceFinding]) -> CoherenceSummary:
    """
    Summarize a list of findings.

    Any error makes the status ``error``; otherwise any warning makes it
    ``warning``; otherwise ``ok``.
    """
    findings = list(findings)
    error_count = sum(1 for f in findings if f.severity == Severity.ERROR)
    warning_count = sum(1 for f in findings if f.severity == Severity.WARNING)

    if error_count:
        plural = "s" if error_count > 1 else ""
        return CoherenceSummary(
            status=CoherenceStatus.ERROR,
            error_count=error_count,
            warning_count=warning_count,
            message=(
                f"{error_count} critical issue{plural} detected. "
                "Your fingerprint may be easily identified as fake."
            ),
        )

    if warning_count:
        ending = "ies" if warning_count > 1 else "y"
        return CoherenceSummary(
            status=CoherenceStatus.WARNING,
            error_count=0,
            warning_count=warning_count,
            message=(
                f"{warning_count} potential inconsistenc{ending} found. "
                "Consider reviewing your settings."
            ),
        )

    return CoherenceSummary(
        status=CoherenceStatus.OK,
        error_count=0,
        warning_count=0,
        message="Your fingerprint profile appears coherent and realistic.",
    )
