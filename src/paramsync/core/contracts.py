# topmark:header:start
#
#   project      : ParamSync
#   file         : contracts.py
#   file_relpath : src/paramsync/core/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Collaborator contracts and the object model handled by the resolver.

The resolver never talks to a remote service directly. It depends on two
small protocols:

- `ParameterStore`: fetch a parameter by exact name, or every parameter
  below a path prefix, optionally decrypting.
- `ObjectStore`: persist an updated object.

Implementations raise `FetchError` (or a subclass) on lookup failures; the
resolver lets those propagate unchanged.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any, Protocol

from paramsync.core.errors import ConfigError


class ParameterStore(Protocol):
    """Minimal interface of a remote parameter store."""

    def get_parameter_value(self, name: str, decrypt: bool) -> str:
        """Return the value of the parameter called ``name``."""
        ...

    def get_parameter_data_by_path(self, path: str, decrypt: bool) -> dict[str, str]:
        """Return every parameter below ``path``, keyed by its sub-path."""
        ...


class ObjectStore(Protocol):
    """Minimal interface of the cluster API used to persist objects."""

    def update_object(self, obj: ConfigObject) -> ConfigObject:
        """Persist ``obj`` and return the stored version."""
        ...


@dataclass
class ConfigObject:
    """A namespaced configuration object (a ConfigMap).

    Attributes:
        name (str): Object name (``metadata.name``).
        namespace (str): Object namespace (``metadata.namespace``).
        annotations (dict[str, str]): Metadata annotations.
        data (dict[str, str]): String-keyed payload.
        kind (str): Object kind, kept for manifest round-trips.
        raw (dict[str, Any]): The manifest the object was parsed from. Fields
            ParamSync does not model (labels, ``resourceVersion``,
            ``binaryData``...) are written back from it unchanged.
    """

    name: str
    namespace: str = "default"
    annotations: dict[str, str] = field(default_factory=dict)
    data: dict[str, str] = field(default_factory=dict)
    kind: str = "ConfigMap"
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def qualified_name(self) -> str:
        """Return ``namespace/name``."""
        return f"{self.namespace}/{self.name}"

    def with_data(self, data: dict[str, str]) -> ConfigObject:
        """Return a copy of this object carrying ``data``."""
        return replace(
            self,
            annotations=dict(self.annotations),
            data=dict(data),
            raw=copy.deepcopy(self.raw),
        )

    @classmethod
    def from_manifest(cls, manifest: dict[str, Any]) -> ConfigObject:
        """Build an object from a Kubernetes-style manifest dict.

        Raises:
            ConfigError: If ``metadata.name`` is missing or a mapping holds
                non-string values.
        """
        metadata: Any = manifest.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise ConfigError("'metadata' must be a mapping")
        name: Any = metadata.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigError("'metadata.name' is required")
        namespace: Any = metadata.get("namespace") or "default"
        return cls(
            name=name,
            namespace=str(namespace),
            annotations=_string_map(metadata.get("annotations"), "metadata.annotations"),
            data=_string_map(manifest.get("data"), "data"),
            kind=str(manifest.get("kind") or "ConfigMap"),
            raw=copy.deepcopy(manifest),
        )

    def to_manifest(self) -> dict[str, Any]:
        """Render this object as a Kubernetes-style manifest dict.

        The source manifest is reproduced as-is except for identity,
        ``metadata.annotations`` and ``data``, which come from this object.
        """
        manifest: dict[str, Any] = copy.deepcopy(self.raw)
        manifest.setdefault("apiVersion", "v1")
        manifest["kind"] = self.kind

        metadata: dict[str, Any] = dict(manifest.get("metadata") or {})
        metadata["name"] = self.name
        metadata["namespace"] = self.namespace
        if self.annotations:
            metadata["annotations"] = dict(self.annotations)
        else:
            metadata.pop("annotations", None)
        manifest["metadata"] = metadata
        manifest["data"] = dict(self.data)
        return manifest


def _string_map(value: Any, where: str) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{where}' must be a mapping")
    out: dict[str, str] = {}
    for k, v in value.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise ConfigError(f"'{where}' must map strings to strings (offending key {k!r})")
        out[k] = v
    return out
