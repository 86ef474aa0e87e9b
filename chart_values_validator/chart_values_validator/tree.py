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

"""Recursive validation of a bundle tree against its schemas."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .bundle import Bundle, scoped_values
from .config import ValidatorConfig, default_config
from .exceptions import ChartValuesError, SchemaViolationError
from .report import ValidationReport
from .router import check_single_schema

logger = logging.getLogger(__name__)


def collect_violations(
    bundle: Bundle,
    values: Optional[Mapping[str, Any]],
    config: Optional[ValidatorConfig] = None,
) -> ValidationReport:
    """Validate a bundle and all its dependencies, collecting every violation.

    The bundle's own schema is checked first, then each dependency in
    declared order against ``values[<dependency name>]``. Violations never
    stop the walk; fatal errors do, with the offending bundle's name attached.
    """
    config = config or default_config
    report = ValidationReport()

    if bundle.has_schema:
        logger.debug("Validating values of '%s'", bundle.name)
        try:
            violation = check_single_schema(values, bundle.schema, config)
        except ChartValuesError as e:
            e.attach_bundle(bundle.name)
            raise
        if violation is not None:
            report.add_violation(bundle.name, violation)

    for dependency in bundle.dependencies:
        try:
            dependency_values = scoped_values(values or {}, dependency.name)
        except ChartValuesError as e:
            e.attach_bundle(bundle.name)
            raise
        report.extend(collect_violations(dependency, dependency_values, config))

    return report


def validate_against_schema(
    bundle: Bundle,
    values: Optional[Mapping[str, Any]],
    config: Optional[ValidatorConfig] = None,
) -> None:
    """Check that values do not violate the structure laid out in the bundle schemas.

    Raises:
        SchemaViolationError: With one ``<bundle-name>:`` block per failing
            bundle, in traversal order. The structured report is attached.
    """
    report = collect_violations(bundle, values, config)
    if not report.ok:
        logger.warning("Values failed schema validation in: %s", ", ".join(report.bundle_names()))
        raise SchemaViolationError(report.render(), report)
