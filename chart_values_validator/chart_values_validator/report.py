# Copyright 2025 TIER IV, inc.
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

"""Aggregated validation report for a bundle tree."""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .engines import Violation


@dataclass(frozen=True)
class ReportSection:
    """Violations found in a single bundle against its own schema."""
    bundle_name: str
    violation: Violation

    def render(self) -> str:
        return f"{self.bundle_name}:\n{self.violation.render()}"


class ValidationReport:
    """Container for the violations of a whole bundle tree, in traversal order."""

    def __init__(self, sections: Optional[List[ReportSection]] = None):
        """Initialize the report.

        Args:
            sections: Optional initial sections, already in traversal order
        """
        self.sections: List[ReportSection] = list(sections or [])

    @property
    def ok(self) -> bool:
        return not self.sections

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self) -> Iterator[ReportSection]:
        return iter(self.sections)

    def __bool__(self) -> bool:
        return bool(self.sections)

    def add_violation(self, bundle_name: str, violation: Violation):
        """Add the violations of one bundle.

        Args:
            bundle_name: Name of the bundle whose own schema was violated
            violation: Engine result describing the violations
        """
        self.sections.append(ReportSection(bundle_name, violation))

    def extend(self, other: "ValidationReport"):
        """Append all sections of a child report, unchanged."""
        self.sections.extend(other.sections)

    def bundle_names(self) -> List[str]:
        return [section.bundle_name for section in self.sections]

    def as_dict(self) -> Dict[str, str]:
        """Map bundle name to rendered violation text.

        Bundle names are unique per tree level but may repeat across
        levels; later sections for a repeated name are appended.
        """
        result: Dict[str, str] = {}
        for section in self.sections:
            result[section.bundle_name] = result.get(section.bundle_name, "") + section.violation.render()
        return result

    def render(self) -> str:
        return "".join(section.render() for section in self.sections)

    def __str__(self) -> str:
        return self.render()
