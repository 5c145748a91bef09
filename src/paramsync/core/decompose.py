# topmark:header:start
#
#   project      : ParamSync
#   file         : decompose.py
#   file_relpath : src/paramsync/core/decompose.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Split parameter values into individual data entries."""

from __future__ import annotations


def parse_string_list(raw: str) -> dict[str, str]:
    """Split a ``StringList`` value into data entries.

    Segments are separated by ``,`` and stripped. A segment ``key=value`` is
    split on its first ``=``; any other segment is a bare key with an empty
    value. A segment with an empty left-hand side (``=x``) is kept whole as a
    bare key. Empty keys are dropped. Commas and equals signs cannot be escaped.

    Args:
        raw (str): Comma-delimited parameter value.

    Returns:
        dict[str, str]: The decoded entries.

    Examples:
        >>> parse_string_list("a=1, b=2, bare")
        {'a': '1', 'b': '2', 'bare': ''}
        >>> parse_string_list("=x,y")
        {'=x': '', 'y': ''}
    """
    values: dict[str, str] = {}
    for pair in raw.strip().split(","):
        pair = pair.strip()
        key, val = pair, ""
        if "=" in pair:
            left, right = pair.split("=", 1)
            if left != "":
                key, val = left, right
        if key != "":
            values[key] = val
    return values


def safe_key_name(key: str) -> str:
    """Flatten a parameter sub-path into a data key.

    All trailing slashes are removed, then a single leading slash, and the
    remaining slashes become underscores: ``"/a/b/"`` gives ``"a_b"`` and
    ``"//a"`` gives ``"_a"``.
    """
    key = key.rstrip("/")
    if key.startswith("/"):
        key = key[1:]
    return key.replace("/", "_")
