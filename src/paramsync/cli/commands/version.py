# topmark:header:start
#
#   project      : ParamSync
#   file         : version.py
#   file_relpath : src/paramsync/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""ParamSync `version` command.

Prints the current ParamSync version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from paramsync.constants import PARAMSYNC_VERSION

if TYPE_CHECKING:
    from paramsync.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ParamSync.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Emit the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of ParamSync.

    Args:
        as_json (bool): Emit ``{"version": ...}`` instead of plain text.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if as_json:
        console.print(json.dumps({"version": PARAMSYNC_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("ParamSync version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PARAMSYNC_VERSION, bold=True)}")
    else:
        console.print(console.styled(PARAMSYNC_VERSION, bold=True))
