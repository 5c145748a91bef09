# topmark:header:start
#
#   project      : ParamSync
#   file         : __init__.py
#   file_relpath : src/paramsync/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Configuration handling for ParamSync.

This package defines the frozen `Config` consumed by the resolver, the
`MutableConfig` builder used to load and merge TOML sources, the canonical
annotation and TOML key names, and the logging setup.
"""

from __future__ import annotations

from paramsync.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
