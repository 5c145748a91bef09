# topmark:header:start
#
#   project      : ParamSync
#   file         : resolved.py
#   file_relpath : src/paramsync/core/resolved.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Materialize a resolved parameter onto its object.

`build_from_annotated_object` is the entry point: it extracts the parameter
reference from the object's annotations, fetches the value(s), and returns a
`ResolvedConfig` whose ``data`` holds the object's original entries plus the
new ones.

Data contract:
    * ``data`` starts as a copy of the object's existing data.
    * A key is written at most once; a second write raises `KeyCollisionError`
      and leaves the first value in place. Entries written before the
      collision are kept, so a retry must start again from the original object.
    * Every type except ``Directory`` finally records
      ``data[param_type] = param_value``. ``Directory`` returns right after
      writing its flattened sub-paths and has no ``"Directory"`` entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from paramsync.config.logging import get_logger
from paramsync.config.model import Config
from paramsync.core.annotations import extract_param_annotation
from paramsync.core.decompose import parse_string_list, safe_key_name
from paramsync.core.errors import KeyCollisionError, UnsupportedParamTypeError
from paramsync.core.resolver import resolve_parameter
from paramsync.core.types import ParamType

if TYPE_CHECKING:
    from paramsync.config.logging import ParamsyncLogger
    from paramsync.core.contracts import ConfigObject, ObjectStore, ParameterStore

logger: ParamsyncLogger = get_logger(__name__)


@dataclass
class ResolvedConfig:
    """The outcome of resolving one annotated object.

    Attributes:
        source (ConfigObject): The object as it was observed.
        param_name (str): Remote parameter name (or path prefix).
        param_type (str): Declared parameter type.
        param_key (str): KMS key; empty means no decryption was requested.
        param_value (str): Resolved scalar value (``"true"`` for ``Directory``).
        data (dict[str, str]): The object's data including resolved entries.
    """

    source: ConfigObject
    param_name: str
    param_type: str
    param_key: str = ""
    param_value: str = ""
    data: dict[str, str] = field(default_factory=dict)

    @property
    def object_name(self) -> str:
        """Name of the object being resolved."""
        return self.source.name

    @property
    def object_namespace(self) -> str:
        """Namespace of the object being resolved."""
        return self.source.namespace

    @property
    def decrypt(self) -> bool:
        """Whether the parameter store is asked to decrypt values."""
        return self.param_key != ""

    def set(self, key: str, value: str) -> None:
        """Add ``key`` to ``data``.

        Raises:
            KeyCollisionError: If ``key`` is already present; ``data`` is unchanged.
        """
        logger.trace("Setting key=%s", key)
        if key in self.data:
            raise KeyCollisionError(key, self.object_namespace, self.object_name)
        self.data[key] = value

    def resolve(self, store: ParameterStore, *, strict: bool = False) -> None:
        """Fetch the parameter and write its entries into ``data``.

        Args:
            store (ParameterStore): Parameter-store collaborator.
            strict (bool): Reject unrecognized parameter types instead of
                recording an empty value.

        Raises:
            UnsupportedParamTypeError: If ``strict`` and the type is unknown.
            KeyCollisionError: If an entry would overwrite an existing key.
        """
        logger.debug("Getting value for '%s/%s'", self.object_namespace, self.object_name)

        kind: ParamType | None = ParamType.parse(self.param_type)
        if kind is None and strict:
            raise UnsupportedParamTypeError(
                self.param_type, self.object_namespace, self.object_name
            )

        resolution = resolve_parameter(store, self.param_name, self.param_type, self.decrypt)
        self.param_value = resolution.value

        if kind is ParamType.STRING_LIST:
            for key, value in parse_string_list(self.param_value).items():
                self.set(key, value)
        elif kind is ParamType.DIRECTORY:
            for key, value in resolution.path_values.items():
                self.set(safe_key_name(key), value)
            # Directory records no "$ParamType" entry.
            return

        self.set(self.param_type, self.param_value)

    def to_object(self) -> ConfigObject:
        """Return a copy of the source object carrying the resolved data."""
        return self.source.with_data(self.data)

    def update_object(self, object_store: ObjectStore) -> ConfigObject:
        """Persist the resolved object through ``object_store``."""
        logger.info("Updating ConfigMap %s/%s...", self.object_namespace, self.object_name)
        return object_store.update_object(self.to_object())


def new_resolved_config(
    store: ParameterStore,
    obj: ConfigObject,
    param_name: str,
    param_type: str,
    param_key: str = "",
    *,
    strict: bool = False,
) -> ResolvedConfig:
    """Resolve an explicit parameter reference against ``obj``.

    Unlike `build_from_annotated_object`, no annotations are read and no KMS
    key defaulting takes place.
    """
    resolved = ResolvedConfig(
        source=obj,
        param_name=param_name,
        param_type=param_type,
        param_key=param_key,
        data=dict(obj.data),
    )
    resolved.resolve(store, strict=strict)
    return resolved


def build_from_annotated_object(
    store: ParameterStore,
    obj: ConfigObject,
    *,
    config: Config | None = None,
) -> ResolvedConfig:
    """Resolve the parameter referenced by ``obj``'s annotations.

    Args:
        store (ParameterStore): Parameter-store collaborator.
        obj (ConfigObject): The annotated object.
        config (Config | None): Runtime configuration; defaults to `Config()`.

    Returns:
        ResolvedConfig: The resolved object data.

    Raises:
        IrrelevantObjectError: If ``obj`` lacks the name or type annotation.
        FetchError: Propagated from ``store``.
        KeyCollisionError: If a resolved key already exists.
        UnsupportedParamTypeError: If ``config.strict_param_types`` and the type
            is unknown.
    """
    config = config or Config()
    annotation = extract_param_annotation(obj, config)
    return new_resolved_config(
        store,
        obj,
        annotation.name,
        annotation.type,
        annotation.key,
        strict=config.strict_param_types,
    )
