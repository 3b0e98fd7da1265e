# topmark:header:start
#
#   project      : OptBind
#   file         : __main__.py
#   file_relpath : src/optbind/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point to allow running OptBind with `python -m optbind`."""

from __future__ import annotations

from optbind.cli.main import cli

if __name__ == "__main__":
    cli()
