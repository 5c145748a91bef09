# topmark:header:start
#
#   project      : ParamSync
#   file         : __init__.py
#   file_relpath : src/paramsync/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Resolution core of ParamSync.

The ``paramsync.core`` package turns an annotated object into materialized
data. It runs four steps in strict sequence:

- ``annotations``
  Extract the (name, type, key) triple from an object's annotations.

- ``resolver``
  Fetch the referenced parameter (or parameter tree) from a parameter store.

- ``decompose``
  Split ``StringList`` values into entries and flatten ``Directory`` paths.

- ``resolved``
  Write the entries onto the object without overwriting existing keys.

The collaborators it depends on (parameter store, object store) are described
as protocols in ``contracts``; this package never talks to a remote service
directly.
"""

from __future__ import annotations
