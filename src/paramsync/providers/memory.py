# topmark:header:start
#
#   project      : ParamSync
#   file         : memory.py
#   file_relpath : src/paramsync/providers/memory.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""In-memory parameter and object stores.

These stores implement the `ParameterStore` and `ObjectStore` protocols
without any network access. The CLI uses `InMemoryParameterStore` to resolve
manifests against a TOML parameter snapshot:

    [[parameter]]
    name = "/app/db/host"
    value = "db.internal"

    [[parameter]]
    name = "/app/db/password"
    value = "s3cret"
    type = "SecureString"

Path lookups are recursive and return sub-paths relative to the requested
prefix, e.g. prefix ``/app`` yields ``{"/db/host": ..., "/db/password": ...}``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from paramsync.config.io import (
    get_string_value_or_none,
    load_toml_dict,
)
from paramsync.config.keys import Toml
from paramsync.config.logging import get_logger
from paramsync.core.errors import ConfigError, ParameterNotFoundError
from paramsync.core.types import ParamType

if TYPE_CHECKING:
    from pathlib import Path

    from paramsync.config.io import TomlTable
    from paramsync.config.logging import ParamsyncLogger
    from paramsync.core.contracts import ConfigObject

logger: ParamsyncLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Parameter:
    """A single stored parameter."""

    name: str
    value: str
    type: ParamType = ParamType.STRING


@dataclass(frozen=True, slots=True)
class StoreCall:
    """One recorded lookup against an `InMemoryParameterStore`."""

    method: str
    name: str
    decrypt: bool


@dataclass
class InMemoryParameterStore:
    """Parameter store backed by a dict of `Parameter` entries."""

    parameters: dict[str, Parameter] = field(default_factory=dict)
    calls: list[StoreCall] = field(default_factory=list)

    def put(self, name: str, value: str, param_type: ParamType = ParamType.STRING) -> None:
        """Add or replace a parameter."""
        self.parameters[name] = Parameter(name=name, value=value, type=param_type)

    def get_parameter_value(self, name: str, decrypt: bool) -> str:
        """Return the value of ``name``.

        Raises:
            ParameterNotFoundError: If no parameter is called ``name``.
        """
        self.calls.append(StoreCall("get_parameter_value", name, decrypt))
        param = self.parameters.get(name)
        if param is None:
            raise ParameterNotFoundError(name)
        return param.value

    def get_parameter_data_by_path(self, path: str, decrypt: bool) -> dict[str, str]:
        """Return every parameter strictly below ``path``, keyed by sub-path.

        An empty result is not an error.
        """
        self.calls.append(StoreCall("get_parameter_data_by_path", path, decrypt))
        prefix = path.rstrip("/") + "/"
        return {
            name[len(prefix) - 1 :]: param.value
            for name, param in sorted(self.parameters.items())
            if name.startswith(prefix)
        }

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> InMemoryParameterStore:
        """Build a store from ``[[parameter]]`` tables.

        Raises:
            ConfigError: If an entry lacks a name or value, or names an unknown type.
        """
        entries: Any = data.get(Toml.SECTION_PARAMETER, [])
        if not isinstance(entries, list):
            raise ConfigError(f"'{Toml.SECTION_PARAMETER}' must be an array of tables")

        store = cls()
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ConfigError(f"{Toml.SECTION_PARAMETER}[{index}] must be a table")
            name = get_string_value_or_none(entry, Toml.KEY_NAME)
            value = get_string_value_or_none(entry, Toml.KEY_VALUE)
            if not name or value is None:
                raise ConfigError(
                    f"{Toml.SECTION_PARAMETER}[{index}] requires '{Toml.KEY_NAME}' "
                    f"and '{Toml.KEY_VALUE}'"
                )
            raw_type = get_string_value_or_none(entry, Toml.KEY_TYPE) or ParamType.STRING.value
            param_type = ParamType.parse(raw_type)
            if param_type is None or param_type is ParamType.DIRECTORY:
                raise ConfigError(f"Parameter '{name}' has invalid type '{raw_type}'")
            store.put(name, value, param_type)

        logger.debug("Loaded %d parameter(s)", len(store.parameters))
        return store

    @classmethod
    def from_toml_file(cls, path: Path) -> InMemoryParameterStore:
        """Build a store from a TOML parameter snapshot file."""
        return cls.from_toml_dict(load_toml_dict(path))


@dataclass
class InMemoryObjectStore:
    """Object store keeping the last persisted version of each object."""

    objects: dict[tuple[str, str], ConfigObject] = field(default_factory=dict)

    def update_object(self, obj: ConfigObject) -> ConfigObject:
        """Store a copy of ``obj`` and return it."""
        stored = obj.with_data(obj.data)
        self.objects[(obj.namespace, obj.name)] = stored
        logger.debug("Stored ConfigMap %s", obj.qualified_name)
        return stored

    def get(self, namespace: str, name: str) -> ConfigObject | None:
        """Return the stored object, if any."""
        return self.objects.get((namespace, name))
