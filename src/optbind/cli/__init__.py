# topmark:header:start
#
#   project      : OptBind
#   file         : __init__.py
#   file_relpath : src/optbind/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptBind command-line interface (Click)."""
