# topmark:header:start
#
#   project      : OptBind
#   file         : version.py
#   file_relpath : src/optbind/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptBind `version` command.

Prints the current OptBind version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from optbind.cli.cli_types import EnumChoiceParam
from optbind.constants import OPTBIND_VERSION
from optbind.report import OutputFormat

if TYPE_CHECKING:
    from optbind.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of OptBind.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of OptBind.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": OPTBIND_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# OptBind Version\n")
        console.print(f"**OptBind version: {OPTBIND_VERSION}**")
    else:
        console.print(console.styled(OPTBIND_VERSION, bold=True))
