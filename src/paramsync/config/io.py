# topmark:header:start
#
#   project      : ParamSync
#   file         : io.py
#   file_relpath : src/paramsync/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""TOML I/O helpers for ParamSync configuration and parameter snapshots.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
TOML has no `null` value, so `None` entries are stripped during rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from paramsync.config.logging import get_logger
from paramsync.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from paramsync.config.logging import ParamsyncLogger

TomlTable: TypeAlias = dict[str, Any]

logger: ParamsyncLogger = get_logger(__name__)


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.
        source (str): Name of the document, used in error messages.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Error decoding TOML from {source}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``paramsync.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or decoded.
    """
    logger.debug("Loading TOML from %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Error loading TOML from {path}: {e}") from e
    return parse_toml_text(text, source=str(path))


def to_toml(data: TomlTable) -> str:
    """Render a TOML table to text, omitting `None` entries."""
    cleaned: Any = _strip_none_for_toml(data)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def _strip_none_for_toml(value: object) -> object:
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out
    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object]", value))
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


# --- Value getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict.

    Raises:
        ConfigError: If ``key`` is present but is not a table.
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Raises:
        ConfigError: If the value is present but is not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigError(f"'{key}' must be a string, got {value!r}")


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Raises:
        ConfigError: If the value is present but is not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}")


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Raises:
        ConfigError: If the value is present but is not a list of strings.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    raise ConfigError(f"'{key}' must be a list of strings, got {value!r}")
