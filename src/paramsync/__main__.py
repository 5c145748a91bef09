# topmark:header:start
#
#   project      : ParamSync
#   file         : __main__.py
#   file_relpath : src/paramsync/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Module entry point for running ParamSync via ``python -m paramsync``.

It delegates directly to :func:`paramsync.cli.main.cli`, so the module and the
``paramsync`` console script share a single entry point.

Examples:
    Resolve a manifest against a local parameter snapshot::

        python -m paramsync resolve configmap.json --params params.toml
"""

from __future__ import annotations

from paramsync.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
