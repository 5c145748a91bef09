# topmark:header:start
#
#   project      : ParamSync
#   file         : resolver.py
#   file_relpath : src/paramsync/core/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Fetch a parameter from the store according to its declared type.

Dispatch:
    * ``String`` / ``SecureString`` / ``StringList``: one lookup by exact name.
    * ``Directory``: one lookup of every parameter below the name, treated as
      a path prefix; the scalar value becomes the marker ``"true"``.
    * anything else: no lookup, empty value.

Store errors are not caught here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from paramsync.config.logging import get_logger
from paramsync.constants import DIRECTORY_MARKER_VALUE
from paramsync.core.types import ParamType

if TYPE_CHECKING:
    from paramsync.config.logging import ParamsyncLogger
    from paramsync.core.contracts import ParameterStore

logger: ParamsyncLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Resolution:
    """Raw result of a parameter lookup.

    Attributes:
        value (str): The scalar value, ``"true"`` for ``Directory``, or ``""``
            for an unrecognized type.
        path_values (dict[str, str]): Sub-path to value, ``Directory`` only.
    """

    value: str = ""
    path_values: dict[str, str] = field(default_factory=dict)


def resolve_parameter(
    store: ParameterStore,
    name: str,
    param_type: str,
    decrypt: bool,
) -> Resolution:
    """Fetch ``name`` from ``store`` using the strategy for ``param_type``.

    Args:
        store (ParameterStore): Parameter-store collaborator.
        name (str): Parameter name or path prefix.
        param_type (str): Declared type, matched exactly.
        decrypt (bool): Whether the store should decrypt on read.

    Returns:
        Resolution: The fetched value(s).
    """
    kind: ParamType | None = ParamType.parse(param_type)

    if kind in (ParamType.STRING, ParamType.SECURE_STRING, ParamType.STRING_LIST):
        logger.debug("Fetching parameter '%s' (decrypt=%s)", name, decrypt)
        return Resolution(value=store.get_parameter_value(name, decrypt))

    if kind is ParamType.DIRECTORY:
        logger.debug("Fetching parameters by path '%s' (decrypt=%s)", name, decrypt)
        path_values = store.get_parameter_data_by_path(name, decrypt)
        logger.trace("Path '%s' holds %d parameter(s)", name, len(path_values))
        return Resolution(value=DIRECTORY_MARKER_VALUE, path_values=dict(path_values))

    logger.warning("Unrecognized parameter type '%s'; nothing fetched for '%s'", param_type, name)
    return Resolution()
