# Copyright 2026 TIER IV, inc.
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

"""Custom exceptions for the chart values validator."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .report import ValidationReport


class ChartValuesError(Exception):
    """Base exception for chart values validation errors."""

    def __init__(self, message: str, bundle_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.bundle_name = bundle_name

    def attach_bundle(self, bundle_name: str) -> None:
        """Record the bundle being checked, keeping the innermost name."""
        if self.bundle_name is None:
            self.bundle_name = bundle_name

    def __str__(self) -> str:
        if self.bundle_name:
            return f"{self.bundle_name}: {self.message}"
        return self.message


class ConversionError(ChartValuesError):
    """Exception raised when values cannot be converted to canonical JSON."""
    pass


class SchemaMalformedError(ChartValuesError):
    """Exception raised when a schema cannot be parsed or compiled."""
    pass


class StructuralMismatchError(ChartValuesError):
    """Exception raised when a child bundle has no map under its name in the parent values."""
    pass


class EngineFaultError(ChartValuesError):
    """Exception raised for unexpected failures inside a validation engine."""

    def __init__(self, description: str, bundle_name: Optional[str] = None):
        super().__init__(f"unable to validate schema: {description}", bundle_name)
        self.description = description


class SchemaViolationError(ChartValuesError):
    """Exception raised when values do not conform to their schemas.

    The message is the rendered violation text. When raised for a bundle
    tree, the structured form is available through ``report``.
    """

    def __init__(self, message: str, report: Optional["ValidationReport"] = None):
        super().__init__(message)
        self.report = report

    def __str__(self) -> str:
        return self.message
