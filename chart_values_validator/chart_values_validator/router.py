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

"""Validation of one values document against one schema document."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .canonical import load_canonical, load_schema_document
from .config import ValidatorConfig, default_config
from .dialect import select_engine
from .engines import EngineFault, Violation, get_engine
from .exceptions import EngineFaultError, SchemaViolationError

logger = logging.getLogger(__name__)


def check_single_schema(
    values: Optional[Mapping[str, Any]],
    schema: Union[bytes, str],
    config: Optional[ValidatorConfig] = None,
) -> Optional[Violation]:
    """Validate values against a single raw schema document.

    Returns:
        ``None`` when the values conform, otherwise the :class:`Violation`.

    Raises:
        ConversionError: If the values cannot be canonicalized.
        SchemaMalformedError: If the schema cannot be parsed or compiled.
        EngineFaultError: If the selected engine fails unexpectedly.
    """
    config = config or default_config

    values_doc = load_canonical(values)
    schema_doc = load_schema_document(schema)

    engine = get_engine(select_engine(schema_doc, config), config)
    outcome = engine.run(values_doc, schema_doc)

    if isinstance(outcome, EngineFault):
        raise EngineFaultError(outcome.description)
    if isinstance(outcome, Violation):
        logger.debug("%s engine reported %d violation(s)", outcome.engine.value, len(outcome.messages))
        return outcome
    return None


def validate_against_single_schema(
    values: Optional[Mapping[str, Any]],
    schema: Union[bytes, str],
    config: Optional[ValidatorConfig] = None,
) -> None:
    """Check that values do not violate the structure laid out in this schema.

    Raises:
        SchemaViolationError: With the rendered violations as its message.
    """
    violation = check_single_schema(values, schema, config)
    if violation is not None:
        raise SchemaViolationError(violation.render())
