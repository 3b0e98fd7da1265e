# topmark:header:start
#
#   project      : OptBind
#   file         : __init__.py
#   file_relpath : src/optbind/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration for OptBind: logging setup and TOML value sources.

Submodules:
    * [`optbind.config.logging`][optbind.config.logging]: TRACE level, colored
      formatter, ``OPTBIND_LOG_LEVEL`` handling.
    * [`optbind.config.loaders`][optbind.config.loaders]: TOML documents as an
      alternative source of option values.

Import the submodules directly; this package re-exports nothing.
"""
