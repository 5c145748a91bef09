# topmark:header:start
#
#   project      : ParamSync
#   file         : test_annotations.py
#   file_relpath : tests/core/test_annotations.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Tests for annotation extraction.

Covers:

* recognition of both annotation namespaces,
* the precedence rule when a field is annotated twice,
* the `IrrelevantObjectError` classification,
* the default KMS key for ``SecureString``.
"""

from __future__ import annotations

import logging

import pytest

from paramsync.config import Config, MutableConfig
from paramsync.config.keys import Annotations
from paramsync.core.annotations import extract_param_annotation, scan_annotations
from paramsync.core.contracts import ConfigObject
from paramsync.core.errors import IrrelevantObjectError
from paramsync.core.types import ParamField
from tests.conftest import annotated


@pytest.mark.parametrize("prefix", [Annotations.PREFIX_CURRENT, Annotations.PREFIX_LEGACY])
def test_both_namespaces_are_recognized(prefix: str) -> None:
    """Name, type and key are read under either namespace."""
    obj = annotated("/app/greeting", "String", "alias/custom", prefix=prefix)

    ann = extract_param_annotation(obj, Config())

    assert ann.name == "/app/greeting"
    assert ann.type == "String"
    assert ann.key == "alias/custom"
    assert ann.decrypt is True


def test_current_namespace_wins_regardless_of_order() -> None:
    """When a field is annotated twice, the first configured namespace wins."""
    legacy_first = {
        Annotations.V1_PARAM_NAME: "/legacy",
        Annotations.V1_PARAM_TYPE: "StringList",
        Annotations.AWS_PARAM_NAME: "/current",
        Annotations.AWS_PARAM_TYPE: "String",
    }
    current_first = dict(reversed(list(legacy_first.items())))

    for annotations in (legacy_first, current_first):
        obj = ConfigObject(name="cm", annotations=annotations)
        ann = extract_param_annotation(obj, Config())
        assert (ann.name, ann.type) == ("/current", "String")


def test_fields_can_mix_namespaces() -> None:
    """Each field is resolved independently of the others."""
    obj = ConfigObject(
        name="cm",
        annotations={
            Annotations.AWS_PARAM_NAME: "/app/greeting",
            Annotations.V1_PARAM_TYPE: "String",
        },
    )

    ann = extract_param_annotation(obj, Config())

    assert (ann.name, ann.type, ann.key) == ("/app/greeting", "String", "")
    assert ann.decrypt is False


@pytest.mark.parametrize(
    ("name", "param_type"),
    [
        (None, None),
        ("/app/greeting", None),
        (None, "String"),
        ("", "String"),
        ("/app/greeting", ""),
    ],
)
def test_missing_name_or_type_is_irrelevant(name: str | None, param_type: str | None) -> None:
    """Objects without both a name and a type are classified as irrelevant."""
    obj = annotated(name, param_type)

    with pytest.raises(IrrelevantObjectError) as excinfo:
        extract_param_annotation(obj, Config())

    assert "default/app-config" in str(excinfo.value)


def test_secure_string_without_key_uses_default() -> None:
    """SecureString falls back to the default KMS alias."""
    ann = extract_param_annotation(annotated("/app/password", "SecureString"), Config())

    assert ann.key == "alias/aws/ssm"
    assert ann.decrypt is True


def test_secure_string_default_key_is_configurable() -> None:
    """The fallback key comes from the configuration."""
    config = MutableConfig(default_kms_key="alias/team").freeze()

    ann = extract_param_annotation(annotated("/app/password", "SecureString"), config)

    assert ann.key == "alias/team"


def test_default_key_only_applies_to_secure_string() -> None:
    """Other types without a key are fetched without decryption."""
    ann = extract_param_annotation(annotated("/app/settings", "StringList"), Config())

    assert ann.key == ""
    assert ann.decrypt is False


def test_custom_prefixes_replace_builtin_namespaces() -> None:
    """Only the configured namespaces are recognized."""
    config = MutableConfig(annotation_prefixes=["ssm.example.com"]).freeze()

    with pytest.raises(IrrelevantObjectError):
        extract_param_annotation(annotated("/x", "String"), config)

    ann = extract_param_annotation(annotated("/x", "String", prefix="ssm.example.com"), config)
    assert ann.name == "/x"


def test_scan_annotations_ignores_unknown_keys() -> None:
    """Unrelated annotations are skipped."""
    found = scan_annotations(
        {"foo": "bar", Annotations.AWS_PARAM_KEY: "k"},
        Config().annotation_aliases(),
    )

    assert found == {ParamField.KEY: "k"}


def test_default_key_fallback_is_logged_at_info(caplog: pytest.LogCaptureFixture) -> None:
    """Falling back to the default KMS key emits one INFO record naming the key."""
    with caplog.at_level(logging.INFO, logger="paramsync.core.annotations"):
        extract_param_annotation(annotated("/app/password", "SecureString"), Config())

    notices = [r for r in caplog.records if "KMS key" in r.getMessage()]
    assert len(notices) == 1
    assert notices[0].levelno == logging.INFO
    assert "alias/aws/ssm" in notices[0].getMessage()


@pytest.mark.parametrize(
    ("param_type", "key"),
    [
        ("String", None),
        ("SecureString", "alias/custom"),
    ],
)
def test_no_default_key_notice_when_not_needed(
    caplog: pytest.LogCaptureFixture, param_type: str, key: str | None
) -> None:
    """No fallback notice for other types or when a key is given."""
    with caplog.at_level(logging.INFO, logger="paramsync.core.annotations"):
        extract_param_annotation(annotated("/app/password", param_type, key), Config())

    assert not [r for r in caplog.records if "KMS key" in r.getMessage()]
