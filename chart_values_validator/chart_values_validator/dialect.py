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

"""Selection of the validation engine from a schema's ``$schema`` dialect.

Engine rule:
  * No ``$schema`` (or one that is not a parsable URI) → legacy engine.
  * ``json-schema.org`` with path ``/draft-04/schema``, ``/draft-06/schema``
    or ``/draft-07/schema`` → legacy engine.
  * Anything else → modern engine.

The carve-out list lives in :class:`~.config.ValidatorConfig`.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import Any, Optional
from urllib.parse import urlsplit

from .config import ValidatorConfig, default_config

logger = logging.getLogger(__name__)

# URL parsers that follow RFC 3986 strictly reject these; urlsplit does not.
_INVALID_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f]")


class Engine(enum.Enum):
    LEGACY = "legacy"
    MODERN = "modern"


def declared_dialect(schema_doc: Any) -> Optional[str]:
    """Return the ``$schema`` URI declared by a decoded schema, if any."""
    if not isinstance(schema_doc, dict):
        return None
    dialect = schema_doc.get("$schema")
    if not isinstance(dialect, str) or not dialect:
        return None
    return dialect


def uses_legacy_engine(dialect: Optional[str], config: Optional[ValidatorConfig] = None) -> bool:
    """Check whether a declared dialect keeps the legacy engine."""
    config = config or default_config
    if not dialect:
        return True

    if _INVALID_ESCAPE_RE.search(dialect) or _CONTROL_CHAR_RE.search(dialect):
        return True

    try:
        parts = urlsplit(dialect)
        # Port parsing is lazy; force it so malformed authorities count as unparsable.
        parts.port
    except ValueError:
        return True

    # Host keeps the port but drops any userinfo.
    host = parts.netloc.rpartition("@")[2]
    return config.is_legacy_dialect(host, parts.path)


def select_engine(schema_doc: Any, config: Optional[ValidatorConfig] = None) -> Engine:
    dialect = declared_dialect(schema_doc)
    engine = Engine.LEGACY if uses_legacy_engine(dialect, config) else Engine.MODERN
    logger.debug("Selected %s engine for dialect %r", engine.value, dialect)
    return engine
