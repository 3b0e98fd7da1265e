# topmark:header:start
#
#   project      : OptBind
#   file         : demo.py
#   file_relpath : src/optbind/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptBind `demo` command.

Binds a handful of variables to flags, shows the option table, parses the
arguments that follow the command and shows the table again:

    optbind demo -- -t hello -y -p 2.5 -n "1 2 3" -size "640 480" -l out.tsv rest

Values may also come from a TOML file (``--config``, or ``optbind.toml`` in the
working directory). Command-line values are parsed afterwards and win.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import click

from optbind.cli.cli_types import EnumChoiceParam
from optbind.cli.errors import OptbindConfigError, OptbindUsageError
from optbind.config.logging import get_logger
from optbind.constants import DEFAULT_CONFIG_NAME
from optbind.errors import OptbindError
from optbind.options.sinks import OutputFile
from optbind.registry import OptionRegistry
from optbind.report import OutputFormat, as_dict

if TYPE_CHECKING:
    from collections.abc import Sequence

    from optbind.cli.console import ConsoleLike
    from optbind.config.logging import OptbindLogger

logger: OptbindLogger = get_logger(__name__)

#: Flag names of the value options, in the order they are written to the log sink.
VALUE_FLAGS: tuple[str, ...] = ("t", "y", "p", "n", "size")


@dataclass
class DemoSettings:
    """Variables filled in by the demo parser."""

    text: str = ""
    yes: bool = False
    param: float = 100.0
    numbers: list[int] = field(default_factory=list)
    size: tuple[int, int] = (0, 0)


def build_registry(
    settings: DemoSettings,
    log: OutputFile,
    *,
    strict: bool = False,
) -> OptionRegistry:
    """Bind ``settings`` and ``log`` to the demo flags.

    Args:
        settings (DemoSettings): Variables to bind.
        log (OutputFile): Sink bound to ``-l``.
        strict (bool): Build a strict registry.

    Returns:
        OptionRegistry: The populated registry.
    """
    registry = OptionRegistry(strict=strict)
    registry.bind(settings, "text", "t")
    registry.bind(settings, "yes", "y")
    registry.bind(settings, "param", "p")
    # An empty list carries no item type
    registry.bind(settings, "numbers", "n", convert=int)
    registry.bind(settings, "size")
    registry.make(log, "l")
    return registry


def _resolve_config(config_path: Path | None) -> Path | None:
    if config_path is not None:
        if not config_path.is_file():
            raise OptbindConfigError(f"Config file not found: {config_path}")
        return config_path
    candidate = Path(DEFAULT_CONFIG_NAME)
    return candidate if candidate.is_file() else None


def _render_before_after(
    console: ConsoleLike,
    registry: OptionRegistry,
    before: str,
    positional: Sequence[str],
    fmt: OutputFormat,
) -> None:
    if fmt == OutputFormat.JSON:
        payload = {
            "options": [as_dict(m) for m in registry.iter_meta()],
            "positional": list(positional),
        }
        console.print(json.dumps(payload, indent=2))
    elif fmt == OutputFormat.NDJSON:
        console.print(registry.render(fmt), nl=False)
        console.print(json.dumps({"positional": list(positional)}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("## Before\n")
        console.print(before)
        console.print("## After\n")
        console.print(registry.render(fmt))
        console.print("## Positional\n")
        for arg in positional:
            console.print(f"- `{arg}`")
    else:
        console.print(before)
        console.print(registry.render(fmt))
        console.print("positional: " + " ".join(positional))


@click.command(
    name="demo",
    help="Bind sample options, parse ARGS and show the option table before and after.",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"TOML file with option values (default: ./{DEFAULT_CONFIG_NAME} if present).",
)
@click.option(
    "--section",
    default="",
    help="Dotted TOML table holding the values (e.g. 'tool.optbind').",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on unknown flags, missing values and malformed values.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def demo_command(
    *,
    config_path: Path | None,
    section: str,
    strict: bool,
    output_format: OutputFormat | None,
    args: tuple[str, ...],
) -> None:
    """Run the option parser over ``args`` with a fixed set of sample options.

    Args:
        config_path (Path | None): Explicit TOML file to overlay.
        section (str): Dotted TOML table holding the values.
        strict (bool): Use a strict registry.
        output_format (OutputFormat | None): Encoding of the option tables.
        args (tuple[str, ...]): Tokens to parse.

    Raises:
        OptbindConfigError: If the configuration file is missing or invalid.
        OptbindUsageError: If strict parsing rejects ``args``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    settings = DemoSettings()
    with OutputFile() as log:
        registry: OptionRegistry = build_registry(settings, log, strict=strict)

        config: Path | None = _resolve_config(config_path)
        if config is not None:
            logger.info("Loading option values from %s", config)
            try:
                registry.load_toml(config, section=section)
            except OptbindError as exc:
                raise OptbindConfigError(f"{config}: {exc}") from exc

        before: str = registry.render(fmt)

        argv: list[str] = [ctx.command_path, *args]
        try:
            index: int = registry.parse(argv)
        except OptbindError as exc:
            raise OptbindUsageError(str(exc)) from exc

        _render_before_after(console, registry, before, argv[index:], fmt)

        if log.is_open:
            row: list[str] = []
            for name in VALUE_FLAGS:
                option = registry.get(name)
                if option is not None:
                    row.append(option.value())
            log.write("\t".join(row) + "\n")
            logger.info("Wrote parsed values to %s", log.path)
        elif log.failed:
            console.warn(f"Could not open {log.path}: {log.error}")
