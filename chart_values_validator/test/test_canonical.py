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

import datetime

import pytest

from chart_values_validator import (
    ConversionError,
    SchemaMalformedError,
    load_canonical,
    load_schema_document,
    to_canonical_json,
)


def test_empty_values_become_empty_object():
    assert to_canonical_json({}) == b"{}"
    assert to_canonical_json(None) == b"{}"


def test_nested_values_keep_order():
    values = {"z": 1, "a": {"list": [True, None, 1.5], "name": "web"}}
    assert to_canonical_json(values) == b'{"z":1,"a":{"list":[true,null,1.5],"name":"web"}}'


def test_yaml_ambiguous_strings_stay_strings():
    assert load_canonical({"enabled": "yes", "version": "1.10"}) == {"enabled": "yes", "version": "1.10"}


def test_non_string_keys_become_strings():
    assert load_canonical({1: "one"}) == {"1": "one"}


def test_dates_are_rendered_as_strings():
    assert load_canonical({"since": datetime.date(2024, 1, 2)}) == {"since": "2024-01-02"}


@pytest.mark.parametrize("values", [{"a": object()}, {"a": float("nan")}, {"a": float("inf")}])
def test_unconvertible_values(values):
    with pytest.raises(ConversionError):
        to_canonical_json(values)


def test_load_schema_document():
    assert load_schema_document(b'{"type": "object"}') == {"type": "object"}
    assert load_schema_document('{"type": "object"}') == {"type": "object"}
    with pytest.raises(SchemaMalformedError):
        load_schema_document(b"{not json")


def test_deeply_nested_values():
    values = {}
    for _ in range(3000):
        values = {"nested": values}
    with pytest.raises(ConversionError):
        to_canonical_json(values)
