# topmark:header:start
#
#   project      : ParamSync
#   file         : test_manifest.py
#   file_relpath : tests/test_manifest.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Tests for JSON manifest parsing and rendering."""

from __future__ import annotations

import json

import pytest

from paramsync.config.keys import Annotations
from paramsync.core.contracts import ConfigObject
from paramsync.core.errors import ConfigError
from paramsync.manifest import dump_manifest, parse_manifest

MANIFEST = {
    "apiVersion": "v1",
    "kind": "ConfigMap",
    "metadata": {
        "name": "app-config",
        "namespace": "prod",
        "annotations": {Annotations.AWS_PARAM_NAME: "/app", Annotations.AWS_PARAM_TYPE: "String"},
    },
    "data": {"existing": "1"},
}


def test_parse_manifest_reads_metadata_and_data() -> None:
    """Name, namespace, annotations and data are picked up."""
    obj = parse_manifest(json.dumps(MANIFEST))

    assert obj.qualified_name == "prod/app-config"
    assert obj.annotations[Annotations.AWS_PARAM_NAME] == "/app"
    assert obj.data == {"existing": "1"}


def test_manifest_round_trip() -> None:
    """to_manifest() reproduces the parsed document."""
    obj = parse_manifest(json.dumps(MANIFEST))

    assert json.loads(dump_manifest(obj)) == MANIFEST


def test_namespace_defaults_to_default() -> None:
    """A manifest without namespace lands in 'default'."""
    obj = ConfigObject.from_manifest({"metadata": {"name": "cm"}})

    assert obj.namespace == "default"
    assert obj.data == {}


def test_dump_data_only() -> None:
    """data_only renders just the data mapping."""
    obj = ConfigObject(name="cm", data={"b": "2", "a": "1"})

    assert json.loads(dump_manifest(obj, data_only=True)) == {"a": "1", "b": "2"}


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        json.dumps({"metadata": {}}),
        json.dumps({"metadata": {"name": "cm"}, "data": {"k": 1}}),
        json.dumps({"metadata": {"name": "cm", "annotations": ["x"]}}),
    ],
)
def test_parse_manifest_rejects_malformed_documents(text: str) -> None:
    """Malformed manifests raise ConfigError."""
    with pytest.raises(ConfigError):
        parse_manifest(text)


FULL_MANIFEST = {
    "apiVersion": "v1",
    "kind": "ConfigMap",
    "metadata": {
        "name": "cm",
        "namespace": "prod",
        "labels": {"app": "web"},
        "resourceVersion": "4711",
        "uid": "0f6c-1234",
        "annotations": {Annotations.AWS_PARAM_NAME: "/app", Annotations.AWS_PARAM_TYPE: "String"},
    },
    "data": {"k": "v"},
    "binaryData": {"blob": "AAEC"},
}


def test_round_trip_keeps_unmodelled_fields() -> None:
    """Labels, resourceVersion, uid and binaryData survive parsing and dumping."""
    obj = parse_manifest(json.dumps(FULL_MANIFEST))

    assert json.loads(dump_manifest(obj)) == FULL_MANIFEST


def test_updated_data_is_overlaid_on_source_manifest() -> None:
    """Only data changes when a resolved copy is rendered."""
    obj = parse_manifest(json.dumps(FULL_MANIFEST))

    doc = obj.with_data({"k": "v", "String": "hello"}).to_manifest()

    assert doc["data"] == {"k": "v", "String": "hello"}
    assert doc["binaryData"] == {"blob": "AAEC"}
    assert doc["metadata"]["labels"] == {"app": "web"}
    assert doc["metadata"]["resourceVersion"] == "4711"
    assert obj.to_manifest()["data"] == {"k": "v"}


def test_copies_do_not_share_source_manifest() -> None:
    """Mutating a rendered manifest leaves the object untouched."""
    obj = parse_manifest(json.dumps(FULL_MANIFEST))

    obj.to_manifest()["metadata"]["labels"]["app"] = "changed"
    obj.with_data({}).raw["binaryData"]["blob"] = "changed"

    assert obj.to_manifest()["metadata"]["labels"] == {"app": "web"}
    assert obj.to_manifest()["binaryData"] == {"blob": "AAEC"}
