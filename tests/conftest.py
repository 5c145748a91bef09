# topmark:header:start
#
#   project      : ParamSync
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Pytest configuration for the ParamSync test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

import pytest

from paramsync.config import logging
from paramsync.config.keys import Annotations
from paramsync.core.contracts import ConfigObject
from paramsync.core.types import ParamType
from paramsync.providers.memory import InMemoryParameterStore


@pytest.fixture(autouse=True)
def silence_paramsync_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ParamSync's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def annotated(
    name: str | None,
    param_type: str | None,
    key: str | None = None,
    *,
    data: dict[str, str] | None = None,
    prefix: str = Annotations.PREFIX_CURRENT,
) -> ConfigObject:
    """Return a ConfigMap annotated under ``prefix`` (``None`` omits a field).

    Args:
        name (str | None): Parameter name annotation.
        param_type (str | None): Parameter type annotation.
        key (str | None): KMS key annotation.
        data (dict[str, str] | None): Pre-existing data.
        prefix (str): Annotation namespace.

    Returns:
        ConfigObject: The annotated object, named ``default/app-config``.
    """
    annotations: dict[str, str] = {"unrelated/annotation": "ignored"}
    if name is not None:
        annotations[f"{prefix}/{Annotations.SUFFIX_PARAM_NAME}"] = name
    if param_type is not None:
        annotations[f"{prefix}/{Annotations.SUFFIX_PARAM_TYPE}"] = param_type
    if key is not None:
        annotations[f"{prefix}/{Annotations.SUFFIX_PARAM_KEY}"] = key
    return ConfigObject(
        name="app-config",
        namespace="default",
        annotations=annotations,
        data=dict(data or {}),
    )


@pytest.fixture
def store() -> InMemoryParameterStore:
    """Parameter store holding one parameter of each scalar type and a small tree."""
    s = InMemoryParameterStore()
    s.put("/app/greeting", "hello")
    s.put("/app/password", "s3cret", ParamType.SECURE_STRING)
    s.put("/app/settings", "a=1, b=2, bare", ParamType.STRING_LIST)
    s.put("/tree/db/host", "db.internal")
    s.put("/tree/db/port", "5432")
    s.put("/tree/region", "eu-west-1")
    return s
