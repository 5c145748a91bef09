# topmark:header:start
#
#   project      : ParamSync
#   file         : __init__.py
#   file_relpath : src/paramsync/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""ParamSync package.

ParamSync materializes parameter-store values into annotated ConfigMaps. It
reads the ``aws-ssm/*`` annotations on an object, fetches the referenced
parameter (or parameter tree), and writes the result into the object's data
without overwriting existing keys. It exposes both a CLI and a small typed API.
"""

from __future__ import annotations
