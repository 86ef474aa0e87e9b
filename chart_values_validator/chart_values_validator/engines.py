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

"""Validation engines.

Both engines run on decoded JSON documents and report through the same
outcome types:

* :class:`Passed` - values conform to the schema.
* :class:`Violation` - values violate the schema; recovered by callers.
* :class:`EngineFault` - the engine failed unexpectedly.

Malformed schemas are not an outcome: they raise
:class:`~.exceptions.SchemaMalformedError`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, Union

from jsonschema import validators
from jsonschema.exceptions import SchemaError, ValidationError
from jsonschema.protocols import Validator
from referencing import Registry, Resource
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT202012, UnknownDialect

from .config import ValidatorConfig, default_config
from .dialect import Engine, declared_dialect
from .exceptions import ChartValuesError, SchemaMalformedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Passed:
    pass


@dataclass(frozen=True)
class Violation:
    """Schema violations found by one engine run.

    ``messages`` holds one line per top-level violation; ``text`` is the
    rendered report block. The raw ``jsonschema`` errors are kept for
    callers that want the full error tree.
    """

    engine: Engine
    messages: Tuple[str, ...]
    text: str
    errors: Tuple[ValidationError, ...] = field(default=(), compare=False, repr=False)

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class EngineFault:
    description: str


Outcome = Union[Passed, Violation, EngineFault]


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _json_pointer(error: ValidationError) -> str:
    return "".join(f"/{_jp_escape(str(p))}" for p in error.absolute_path)


def _dotted_field(error: ValidationError) -> str:
    if not error.absolute_path:
        return "(root)"
    return ".".join(str(p) for p in error.absolute_path)


def _check_schema(cls: Type[Validator], schema_doc: Any) -> None:
    try:
        cls.check_schema(schema_doc)
    except SchemaError as e:
        raise SchemaMalformedError(f"schema is invalid: {e.message}") from e


def _collect_errors(validator: Validator, values_doc: Any) -> List[ValidationError]:
    try:
        return list(validator.iter_errors(values_doc))
    except Unresolvable as e:
        raise SchemaMalformedError(f"schema reference cannot be resolved: {e}") from e


class ValidationEngine(ABC):
    """Abstract base engine.

    :meth:`run` is the fault boundary: anything other than a domain error
    raised while validating is returned as an :class:`EngineFault`.
    """

    ENGINE: Engine

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or default_config

    def run(self, values_doc: Any, schema_doc: Any) -> Outcome:
        if not isinstance(schema_doc, (dict, bool)):
            raise SchemaMalformedError(
                f"schema must be a JSON object or boolean, got {type(schema_doc).__name__}"
            )
        try:
            return self._run(values_doc, schema_doc)
        except ChartValuesError:
            raise
        except Exception as e:
            logger.warning("%s engine failed: %s", self.ENGINE.value, e, exc_info=True)
            return EngineFault(str(e) or type(e).__name__)

    @abstractmethod
    def _run(self, values_doc: Any, schema_doc: Union[Dict[str, Any], bool]) -> Outcome:
        pass


class LegacyEngine(ValidationEngine):
    """Engine for undeclared and draft-04/06/07 schemas.

    Reports every violation as a ``- <field>: <message>`` line, where the
    field is ``(root)`` or the dotted path into the values.
    """

    ENGINE = Engine.LEGACY

    def _validator_class(self, schema_doc: Any) -> Type[Validator]:
        fallback = validators.validator_for(
            {"$schema": self.config.legacy_default_dialect},
            default=validators.Draft7Validator,
        )
        return validators.validator_for(schema_doc, default=fallback)

    def _run(self, values_doc: Any, schema_doc: Union[Dict[str, Any], bool]) -> Outcome:
        cls = self._validator_class(schema_doc)
        _check_schema(cls, schema_doc)

        # An empty registry keeps remote references from being retrieved.
        errors = _collect_errors(cls(schema_doc, registry=Registry()), values_doc)
        if not errors:
            return Passed()

        messages = tuple(f"{_dotted_field(e)}: {e.message}" for e in errors)
        text = "".join(f"- {message}\n" for message in messages)
        return Violation(self.ENGINE, messages, text, tuple(errors))


class ModernEngine(ValidationEngine):
    """Engine for every other declared dialect.

    The schema is registered under a synthetic in-memory URI and compiled
    from there; no external resources are ever retrieved.
    """

    ENGINE = Engine.MODERN

    def _validator_class(self, schema_doc: Any) -> Type[Validator]:
        cls = validators.validator_for(schema_doc, default=None)
        if cls is None:
            raise SchemaMalformedError(
                f"unsupported schema dialect '{declared_dialect(schema_doc)}'"
            )
        return cls

    def compile(self, schema_doc: Union[Dict[str, Any], bool]) -> Validator:
        cls = self._validator_class(schema_doc)
        _check_schema(cls, schema_doc)

        uri = self.config.schema_resource_uri
        try:
            resource = Resource.from_contents(schema_doc, default_specification=DRAFT202012)
        except UnknownDialect as e:
            raise SchemaMalformedError(f"unsupported schema dialect: {e}") from e
        registry = Registry().with_resource(uri, resource)
        return cls({"$ref": uri}, registry=registry)

    def _run(self, values_doc: Any, schema_doc: Union[Dict[str, Any], bool]) -> Outcome:
        validator = self.compile(schema_doc)
        errors = _collect_errors(validator, values_doc)
        if not errors:
            return Passed()

        messages = tuple(f"at '{_json_pointer(e)}': {e.message}" for e in errors)
        lines = [f"jsonschema validation failed with '{self.config.schema_resource_uri}#'"]
        lines.extend(_render_tree(errors, depth=0))
        return Violation(self.ENGINE, messages, "\n".join(lines) + "\n", tuple(errors))


def _render_tree(errors: Iterable[ValidationError], depth: int) -> List[str]:
    lines = []
    indent = "  " * depth
    for error in errors:
        lines.append(f"{indent}- at '{_json_pointer(error)}': {error.message}")
        if error.context:
            lines.extend(_render_tree(error.context, depth + 1))
    return lines


ENGINES: Dict[Engine, Type[ValidationEngine]] = {
    Engine.LEGACY: LegacyEngine,
    Engine.MODERN: ModernEngine,
}


def get_engine(engine: Engine, config: Optional[ValidatorConfig] = None) -> ValidationEngine:
    return ENGINES[engine](config)
