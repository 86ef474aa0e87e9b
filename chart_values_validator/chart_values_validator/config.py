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

"""Configuration for the chart values validator."""

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Tuple

from .utils.logging_utils import configure_split_stream_logging

# (host, path) pairs whose dialects keep the historical validation behaviour.
# Host comparison includes the port, path comparison uses the escaped path.
LEGACY_DIALECTS: Tuple[Tuple[str, str], ...] = (
    ("json-schema.org", "/draft-04/schema"),
    ("json-schema.org", "/draft-06/schema"),
    ("json-schema.org", "/draft-07/schema"),
)

SCHEMA_RESOURCE_URI = "file:///values.schema.json"
LEGACY_DEFAULT_DIALECT = "http://json-schema.org/draft-07/schema#"


@dataclass
class ValidatorConfig:
    """Configuration class for values validation."""
    legacy_dialects: Tuple[Tuple[str, str], ...] = LEGACY_DIALECTS
    schema_resource_uri: str = SCHEMA_RESOURCE_URI
    legacy_default_dialect: str = LEGACY_DEFAULT_DIALECT
    log_level: str = "INFO"
    print_level: str = "WARNING"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'ValidatorConfig':
        """Create configuration from plain data, e.g. a parsed YAML document.

        ``legacy_dialects`` entries may be ``[host, path]`` pairs or
        ``{"host": ..., "path": ...}`` mappings.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown validator configuration keys: {unknown}")

        kwargs = dict(data)
        if "legacy_dialects" in kwargs:
            kwargs["legacy_dialects"] = _parse_dialects(kwargs["legacy_dialects"])
        return cls(**kwargs)

    def is_legacy_dialect(self, host: str, path: str) -> bool:
        """Check whether a dialect URI host and path are in the legacy carve-out."""
        return (host, path) in self.legacy_dialects

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            'chart_values_validator', level=level, stderr_level=stderr_level, formatter=formatter
        )


def _parse_dialects(raw: Any) -> Tuple[Tuple[str, str], ...]:
    if isinstance(raw, (str, bytes)) or not hasattr(raw, "__iter__"):
        raise ValueError(f"legacy_dialects must be a list, got {type(raw).__name__}")

    dialects = []
    for entry in raw:
        if isinstance(entry, Mapping):
            host, path = entry.get("host"), entry.get("path")
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            host, path = entry
        else:
            raise ValueError(f"Invalid legacy dialect entry: {entry!r}")
        if not isinstance(host, str) or not isinstance(path, str):
            raise ValueError(f"Legacy dialect host and path must be strings: {entry!r}")
        dialects.append((host, path))
    return tuple(dialects)


# Global configuration instance
default_config = ValidatorConfig()
