# topmark:header:start
#
#   project      : ParamSync
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""CLI test helpers for running ParamSync through Click's test runner."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from paramsync.cli.exit_codes import ExitCode
from paramsync.cli.main import cli
from paramsync.config import logging

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    try:
        return runner.invoke(cli, argv)
    finally:
        # The CLI rebinds the root handler to the runner's temporary stderr
        logging.setup_logging(level=logging.TRACE_LEVEL)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def write_manifest(tmp_path: Path, manifest: dict[str, Any], name: str = "cm.json") -> Path:
    """Write ``manifest`` as JSON under ``tmp_path`` and return its path."""
    path = tmp_path / name
    path.write_text(json.dumps(manifest), encoding="utf-8")
    return path


def write_params(tmp_path: Path, params: Sequence[tuple[str, str, str]]) -> Path:
    """Write ``(name, value, type)`` triples as a TOML parameter snapshot."""
    chunks: list[str] = []
    for name, value, param_type in params:
        chunks.append(
            f"[[parameter]]\nname = {json.dumps(name)}\nvalue = {json.dumps(value)}\n"
            f"type = {json.dumps(param_type)}\n"
        )
    path = tmp_path / "params.toml"
    path.write_text("\n".join(chunks), encoding="utf-8")
    return path
