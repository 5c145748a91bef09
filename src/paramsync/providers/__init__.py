# topmark:header:start
#
#   project      : ParamSync
#   file         : __init__.py
#   file_relpath : src/paramsync/providers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Parameter-store and object-store implementations."""

from __future__ import annotations

from paramsync.providers.memory import (
    InMemoryObjectStore,
    InMemoryParameterStore,
    Parameter,
    StoreCall,
)

__all__ = [
    "InMemoryObjectStore",
    "InMemoryParameterStore",
    "Parameter",
    "StoreCall",
]
