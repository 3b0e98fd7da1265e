# topmark:header:start
#
#   project      : OptBind
#   file         : constants.py
#   file_relpath : src/optbind/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptBind Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

OPTBIND_VERSION: str = get_version("optbind")

# Name of the TOML file read by `optbind demo` when present in the working directory.
DEFAULT_CONFIG_NAME: str = "optbind.toml"
