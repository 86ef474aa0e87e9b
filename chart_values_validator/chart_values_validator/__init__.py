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

"""Values validation for hierarchical configuration bundles."""

from .bundle import Bundle, scoped_values
from .canonical import load_canonical, load_schema_document, to_canonical_json
from .config import ValidatorConfig, default_config
from .dialect import Engine, declared_dialect, select_engine, uses_legacy_engine
from .engines import EngineFault, LegacyEngine, ModernEngine, Passed, Violation
from .exceptions import (
    ChartValuesError,
    ConversionError,
    EngineFaultError,
    SchemaMalformedError,
    SchemaViolationError,
    StructuralMismatchError,
)
from .report import ReportSection, ValidationReport
from .router import check_single_schema, validate_against_single_schema
from .tree import collect_violations, validate_against_schema

__version__ = "0.1.0"

__all__ = [
    'Bundle',
    'scoped_values',
    'load_canonical',
    'load_schema_document',
    'to_canonical_json',
    'ValidatorConfig',
    'default_config',
    'Engine',
    'declared_dialect',
    'select_engine',
    'uses_legacy_engine',
    'EngineFault',
    'LegacyEngine',
    'ModernEngine',
    'Passed',
    'Violation',
    'ChartValuesError',
    'ConversionError',
    'EngineFaultError',
    'SchemaMalformedError',
    'SchemaViolationError',
    'StructuralMismatchError',
    'ReportSection',
    'ValidationReport',
    'check_single_schema',
    'validate_against_single_schema',
    'collect_violations',
    'validate_against_schema',
]
