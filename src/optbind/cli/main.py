# topmark:header:start
#
#   project      : OptBind
#   file         : main.py
#   file_relpath : src/optbind/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the `optbind` console script.

Group-level options (verbosity and color) are resolved once and placed into
``ctx.obj`` so that every subcommand reads the same console and log level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from optbind.cli.commands.demo import demo_command
from optbind.cli.commands.version import version_command
from optbind.cli.console import ClickConsole
from optbind.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from optbind.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from optbind.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # OPTBIND_LOG_LEVEL wins over -v/-q
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    enable_color: bool = not no_color
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.trace("CLI state initialized: %r", ctx.obj)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="OptBind CLI",
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
    """Entry point for the OptBind CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'optbind demo -- [ARGS...]' to try the option parser.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(demo_command)

if __name__ == "__main__":
    cli()
