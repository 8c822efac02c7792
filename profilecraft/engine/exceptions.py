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

"""Exceptions raised by the profile engine."""


class ProfileEngineError(Exception):
    """Base class for profile engine errors."""


class CatalogError(ProfileEngineError, ValueError):
    """A catalog or sampling pool is empty.

    This is a build-time mistake in the catalog tables, never a runtime
    condition to recover from.
    """


class UnknownPresetError(ProfileEngineError, KeyError):
    """No preset profile exists with the requested id."""

    def __init__(self, preset_id: str):
        self.preset_id = preset_id
        super().__init__(preset_id)

    def __str__(self) -> str:
        return f"Unknown preset profile: {self.preset_id!r}"
