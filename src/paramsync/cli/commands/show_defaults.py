# topmark:header:start
#
#   project      : ParamSync
#   file         : show_defaults.py
#   file_relpath : src/paramsync/cli/commands/show_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""ParamSync `show-defaults` command.

Prints the built-in configuration as a TOML document that can be used as a
starting point for ``paramsync.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from paramsync.config.io import to_toml
from paramsync.config.model import Config

if TYPE_CHECKING:
    from paramsync.cli.console_api import ConsoleLike


@click.command(
    name="show-defaults",
    help="Display the built-in default configuration as TOML.",
)
def show_defaults_command() -> None:
    """Display the built-in default configuration."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    console.print(to_toml(Config().to_toml_dict()), nl=False)
