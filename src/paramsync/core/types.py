# topmark:header:start
#
#   project      : ParamSync
#   file         : types.py
#   file_relpath : src/paramsync/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Enumerations shared by the resolution core."""

from __future__ import annotations

from enum import Enum


class ParamType(str, Enum):
    """Recognized parameter types (case-sensitive, exact match).

    Attributes:
        STRING: Plain scalar parameter.
        SECURE_STRING: Encrypted scalar parameter.
        STRING_LIST: Comma-delimited list; each ``key=value`` item becomes a data entry.
        DIRECTORY: Hierarchical path prefix; every parameter below it becomes a data entry.
    """

    STRING = "String"
    SECURE_STRING = "SecureString"
    STRING_LIST = "StringList"
    DIRECTORY = "Directory"

    @classmethod
    def parse(cls, value: str) -> ParamType | None:
        """Return the member whose value equals ``value``, or None.

        No normalization is applied: ``"string"`` is not ``String``.
        """
        for member in cls:
            if member.value == value:
                return member
        return None


class ParamField(Enum):
    """Logical annotation fields, independent of the annotation namespace."""

    NAME = "name"
    TYPE = "type"
    KEY = "key"
