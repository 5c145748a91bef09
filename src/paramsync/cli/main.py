# topmark:header:start
#
#   project      : ParamSync
#   file         : main.py
#   file_relpath : src/paramsync/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""ParamSync command-line entry point.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Subcommands read the console and verbosity from ``ctx.obj``.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from paramsync.cli.commands.resolve import resolve_command
from paramsync.cli.commands.show_defaults import show_defaults_command
from paramsync.cli.commands.version import version_command
from paramsync.cli.console import ClickConsole
from paramsync.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from paramsync.config.logging import resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from paramsync.cli.console_api import ConsoleLike


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    # PARAMSYNC_LOG_LEVEL wins over the -v/-q flags
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level, use_color=not no_color and sys.stderr.isatty())

    enable_color = not no_color and sys.stdout.isatty()
    ctx.color = enable_color
    ctx.obj["color_enabled"] = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ParamSync CLI: materialize parameter-store values into annotated ConfigMaps.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the ParamSync CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'paramsync resolve MANIFEST --params FILE' to resolve a manifest.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(show_defaults_command)

cli.add_command(resolve_command)

if __name__ == "__main__":
    cli()
