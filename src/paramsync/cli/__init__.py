# topmark:header:start
#
#   project      : ParamSync
#   file         : __init__.py
#   file_relpath : src/paramsync/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Click-based command-line interface for ParamSync."""

from __future__ import annotations
