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

"""Conversion of in-memory values and schema bytes into JSON documents.

Values go through YAML first so that anything a values file could express
is accepted, then through JSON so both validation engines see the same
interchange form.
"""

from __future__ import annotations

import datetime
import json
from typing import Any, Union

import yaml

from .exceptions import ConversionError, SchemaMalformedError

EMPTY_DOCUMENT = b"{}"


def _json_default(obj: Any) -> Any:
    # YAML resolves timestamps, JSON has no such type.
    if isinstance(obj, (datetime.date, datetime.datetime)):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_canonical_json(values: Any) -> bytes:
    """Convert values to canonical JSON bytes.

    An empty or null document becomes ``{}`` so that a bundle without
    values is validated as an empty object.

    Raises:
        ConversionError: If the values cannot be represented in YAML or JSON.
    """
    try:
        values_yaml = yaml.safe_dump(values, default_flow_style=False, sort_keys=False)
    except (yaml.YAMLError, RecursionError) as e:
        raise ConversionError(f"unable to convert values to YAML: {e}") from e

    try:
        document = yaml.safe_load(values_yaml)
        values_json = json.dumps(
            document, default=_json_default, allow_nan=False, separators=(",", ":")
        ).encode("utf-8")
    except (yaml.YAMLError, TypeError, ValueError, RecursionError) as e:
        raise ConversionError(f"unable to convert values to JSON: {e}") from e

    if values_json == b"null":
        return EMPTY_DOCUMENT
    return values_json


def load_canonical(values: Any) -> Any:
    """Return the decoded canonical JSON document for ``values``."""
    return json.loads(to_canonical_json(values))


def load_schema_document(schema: Union[bytes, str]) -> Any:
    """Decode raw schema bytes.

    Raises:
        SchemaMalformedError: If the schema is not valid JSON.
    """
    try:
        return json.loads(schema)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SchemaMalformedError(f"schema is not valid JSON: {e}") from e
