# topmark:header:start
#
#   project      : ParamSync
#   file         : test_memory_store.py
#   file_relpath : tests/providers/test_memory_store.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Tests for the in-memory parameter and object stores."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from paramsync.core.contracts import ConfigObject
from paramsync.core.errors import ConfigError, ParameterNotFoundError
from paramsync.core.types import ParamType
from paramsync.providers.memory import InMemoryObjectStore, InMemoryParameterStore

if TYPE_CHECKING:
    from pathlib import Path


def test_get_parameter_value_unknown_name(store: InMemoryParameterStore) -> None:
    """Unknown names raise ParameterNotFoundError."""
    with pytest.raises(ParameterNotFoundError, match="'/nope'"):
        store.get_parameter_value("/nope", decrypt=False)


def test_path_lookup_is_recursive_and_relative(store: InMemoryParameterStore) -> None:
    """Sub-paths are returned relative to the prefix, trailing slash or not."""
    expected = {"/db/host": "db.internal", "/db/port": "5432", "/region": "eu-west-1"}

    assert store.get_parameter_data_by_path("/tree", decrypt=True) == expected
    assert store.get_parameter_data_by_path("/tree/", decrypt=True) == expected


def test_path_lookup_does_not_match_sibling_prefixes() -> None:
    """'/app' does not include '/application/x'."""
    s = InMemoryParameterStore()
    s.put("/app/x", "1")
    s.put("/application/x", "2")

    assert s.get_parameter_data_by_path("/app", decrypt=False) == {"/x": "1"}


def test_path_lookup_without_matches_is_empty(store: InMemoryParameterStore) -> None:
    """An empty subtree is not an error."""
    assert store.get_parameter_data_by_path("/void", decrypt=False) == {}


def test_from_toml_file(tmp_path: Path) -> None:
    """[[parameter]] tables load with an optional type."""
    path = tmp_path / "params.toml"
    path.write_text(
        "[[parameter]]\n"
        'name = "/app/a"\n'
        'value = "1"\n'
        "\n"
        "[[parameter]]\n"
        'name = "/app/b"\n'
        'value = "x=1,y=2"\n'
        'type = "StringList"\n',
        encoding="utf-8",
    )

    s = InMemoryParameterStore.from_toml_file(path)

    assert s.parameters["/app/a"].type is ParamType.STRING
    assert s.parameters["/app/b"].type is ParamType.STRING_LIST
    assert s.get_parameter_value("/app/b", decrypt=False) == "x=1,y=2"


@pytest.mark.parametrize(
    "data",
    [
        {"parameter": {"name": "/a", "value": "1"}},
        {"parameter": ["/a"]},
        {"parameter": [{"name": "/a"}]},
        {"parameter": [{"value": "1"}]},
        {"parameter": [{"name": "/a", "value": "1", "type": "Directory"}]},
        {"parameter": [{"name": "/a", "value": "1", "type": "string"}]},
    ],
)
def test_from_toml_dict_rejects_bad_entries(data: dict[str, object]) -> None:
    """Malformed snapshots raise ConfigError."""
    with pytest.raises(ConfigError):
        InMemoryParameterStore.from_toml_dict(data)


def test_object_store_keeps_a_copy() -> None:
    """Mutating the original after update does not alter the stored object."""
    objects = InMemoryObjectStore()
    obj = ConfigObject(name="cm", namespace="ns", data={"k": "v"})

    stored = objects.update_object(obj)
    obj.data["k"] = "changed"

    assert stored.data == {"k": "v"}
    assert objects.get("ns", "cm") is stored
    assert objects.get("ns", "other") is None
