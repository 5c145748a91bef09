# topmark:header:start
#
#   project      : ParamSync
#   file         : manifest.py
#   file_relpath : src/paramsync/manifest.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Read and write ConfigMap manifests as JSON documents."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from paramsync.config.logging import get_logger
from paramsync.core.contracts import ConfigObject
from paramsync.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from paramsync.config.logging import ParamsyncLogger

logger: ParamsyncLogger = get_logger(__name__)


def parse_manifest(text: str, *, source: str = "<string>") -> ConfigObject:
    """Parse a JSON manifest into a `ConfigObject`.

    Raises:
        ConfigError: If the text is not a JSON object or lacks ``metadata.name``.
    """
    try:
        doc: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Error decoding JSON manifest from {source}: {e}") from e
    if not isinstance(doc, dict):
        raise ConfigError(f"Manifest {source} must be a JSON object")
    return ConfigObject.from_manifest(doc)


def load_manifest(path: Path) -> ConfigObject:
    """Read a JSON manifest file.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    logger.debug("Loading manifest from %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Error reading manifest {path}: {e}") from e
    return parse_manifest(text, source=str(path))


def dump_manifest(obj: ConfigObject, *, data_only: bool = False) -> str:
    """Render ``obj`` (or only its data) as indented JSON."""
    payload: dict[str, Any] = dict(obj.data) if data_only else obj.to_manifest()
    return json.dumps(payload, indent=2, sort_keys=True)
