# topmark:header:start
#
#   project      : ParamSync
#   file         : errors.py
#   file_relpath : src/paramsync/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Exceptions raised while resolving annotated objects.

Every error is scoped to a single object's resolution attempt; none of them is
fatal to the surrounding process. The CLI maps each class to a dedicated exit
code (see `paramsync.cli.errors`).

Hierarchy:
    ParamsyncError
    ├── IrrelevantObjectError      object carries no (complete) annotation
    ├── FetchError                 parameter-store lookup failed
    │   └── ParameterNotFoundError
    ├── KeyCollisionError          a data key would be written twice
    ├── UnsupportedParamTypeError  unknown parameter type (strict mode only)
    └── ConfigError                invalid configuration or input document
"""

from __future__ import annotations


class ParamsyncError(Exception):
    """Base class for all ParamSync errors."""


class IrrelevantObjectError(ParamsyncError):
    """The object is not annotated for ParamSync.

    This is an expected classification rather than a failure: callers should
    skip the object silently or log it at INFO level.
    """

    def __init__(self, namespace: str, name: str) -> None:
        self.namespace = namespace
        self.name = name
        super().__init__(f"Irrelevant ConfigMap {namespace}/{name}")


class FetchError(ParamsyncError):
    """A parameter-store lookup failed.

    Parameter-store implementations raise this (or a subclass); the resolver
    propagates it unchanged.
    """


class ParameterNotFoundError(FetchError):
    """The requested parameter does not exist in the store."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Parameter '{name}' not found")


class KeyCollisionError(ParamsyncError):
    """A data key already exists on the object and would be overwritten."""

    def __init__(self, key: str, namespace: str, name: str) -> None:
        self.key = key
        self.namespace = namespace
        self.name = name
        super().__init__(f"Key '{key}' already exists for ConfigMap {namespace}/{name}")


class UnsupportedParamTypeError(ParamsyncError):
    """The declared parameter type is not one ParamSync knows how to resolve."""

    def __init__(self, param_type: str, namespace: str, name: str) -> None:
        self.param_type = param_type
        self.namespace = namespace
        self.name = name
        super().__init__(
            f"Unsupported parameter type '{param_type}' for ConfigMap {namespace}/{name}"
        )


class ConfigError(ParamsyncError):
    """Invalid configuration, parameter snapshot, or manifest document."""
