# topmark:header:start
#
#   project      : ParamSync
#   file         : resolve.py
#   file_relpath : src/paramsync/cli/commands/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""ParamSync `resolve` command.

Resolves a JSON ConfigMap manifest against a TOML parameter snapshot and
prints the updated manifest (or only its data) as JSON.

Examples:
    paramsync resolve configmap.json --params params.toml
    paramsync resolve configmap.json --params params.toml --data-only --strict

Exit codes:
    * 0 when the manifest was resolved, or carries no ParamSync annotations.
    * 65 on key collisions, unsupported types (``--strict``) and malformed manifests.
    * 66 when an input file is missing.
    * 69 when a parameter cannot be fetched.
    * 78 on invalid configuration or parameter snapshots.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from paramsync.cli.errors import (
    ParamsyncConfigError,
    ParamsyncDataError,
    ParamsyncFileNotFoundError,
    from_core_error,
)
from paramsync.cli.options import config_file_options
from paramsync.config.logging import get_logger
from paramsync.config.model import MutableConfig
from paramsync.core.errors import ConfigError, IrrelevantObjectError, ParamsyncError
from paramsync.core.resolved import build_from_annotated_object
from paramsync.manifest import dump_manifest, load_manifest
from paramsync.providers.memory import InMemoryObjectStore, InMemoryParameterStore

if TYPE_CHECKING:
    from paramsync.cli.console_api import ConsoleLike
    from paramsync.config.logging import ParamsyncLogger
    from paramsync.config.model import Config
    from paramsync.core.contracts import ConfigObject

logger: ParamsyncLogger = get_logger(__name__)


def _require_file(path: Path, what: str) -> None:
    if not path.is_file():
        raise ParamsyncFileNotFoundError(f"{what} not found: {path}")


def _load_config(config_files: tuple[Path, ...], strict: bool) -> Config:
    for path in config_files:
        _require_file(path, "Config file")
    try:
        draft: MutableConfig = MutableConfig.load_merged(list(config_files))
    except ConfigError as exc:
        raise ParamsyncConfigError(str(exc)) from exc
    if strict:
        draft = draft.merge_with(MutableConfig(strict_param_types=True))
    return draft.freeze()


@click.command(
    name="resolve",
    help="Resolve an annotated ConfigMap manifest against a parameter snapshot.",
)
@click.argument("manifest", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--params",
    "params_file",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="TOML file with [[parameter]] tables (name, value, type).",
)
@config_file_options
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Reject unrecognized parameter types instead of writing an empty entry.",
)
@click.option(
    "--data-only",
    "data_only",
    is_flag=True,
    default=False,
    help="Print only the resolved data mapping.",
)
def resolve_command(
    *,
    manifest: Path,
    params_file: Path,
    config_files: tuple[Path, ...],
    strict: bool,
    data_only: bool,
) -> None:
    """Resolve ``manifest`` and print the updated object as JSON.

    Args:
        manifest (Path): JSON ConfigMap manifest.
        params_file (Path): TOML parameter snapshot.
        config_files (tuple[Path, ...]): ParamSync config files, merged in order.
        strict (bool): Force ``strict_param_types``.
        data_only (bool): Print only ``data``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    _require_file(manifest, "Manifest")
    _require_file(params_file, "Parameter file")

    config: Config = _load_config(config_files, strict)

    try:
        store = InMemoryParameterStore.from_toml_file(params_file)
    except ConfigError as exc:
        raise ParamsyncConfigError(str(exc)) from exc

    try:
        obj: ConfigObject = load_manifest(manifest)
    except ConfigError as exc:
        raise ParamsyncDataError(str(exc)) from exc

    try:
        resolved = build_from_annotated_object(store, obj, config=config)
    except IrrelevantObjectError as exc:
        logger.info("%s", exc)
        console.warn(f"Skipping {obj.qualified_name}: no ParamSync annotations.")
        return
    except ParamsyncError as exc:
        raise from_core_error(exc) from exc

    updated: ConfigObject = resolved.update_object(InMemoryObjectStore())
    console.print(dump_manifest(updated, data_only=data_only))
