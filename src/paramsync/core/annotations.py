# topmark:header:start
#
#   project      : ParamSync
#   file         : annotations.py
#   file_relpath : src/paramsync/core/annotations.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Extract the parameter reference from an object's annotations.

Each logical field (name, type, key) may be spelled under several annotation
namespaces. The namespaces are expanded into a single lookup table (see
`Config.annotation_aliases`) and the annotations are scanned once.

When the same field is annotated under two namespaces, the namespace listed
first in ``Config.annotation_prefixes`` wins, regardless of the order in which
the annotations are stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from paramsync.config.logging import get_logger
from paramsync.core.errors import IrrelevantObjectError
from paramsync.core.types import ParamField, ParamType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from paramsync.config.logging import ParamsyncLogger
    from paramsync.config.model import Config
    from paramsync.core.contracts import ConfigObject

logger: ParamsyncLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ParamAnnotation:
    """The parameter reference carried by an annotated object.

    Attributes:
        name (str): Remote parameter name (or path prefix for ``Directory``).
        type (str): Declared parameter type, verbatim.
        key (str): KMS key; empty means "do not decrypt".
    """

    name: str
    type: str
    key: str = ""

    @property
    def decrypt(self) -> bool:
        """Whether the store should decrypt the value on read."""
        return self.key != ""


def scan_annotations(
    annotations: Mapping[str, str],
    aliases: Mapping[str, tuple[ParamField, int]],
) -> dict[ParamField, str]:
    """Collect the recognized fields from ``annotations``.

    Args:
        annotations (Mapping[str, str]): Object annotations.
        aliases (Mapping[str, tuple[ParamField, int]]): Annotation key to
            ``(field, rank)``; lower ranks win.

    Returns:
        dict[ParamField, str]: The value found for each field that is present.
    """
    found: dict[ParamField, tuple[int, str]] = {}
    for key, value in annotations.items():
        alias = aliases.get(key)
        if alias is None:
            continue
        param_field, rank = alias
        current = found.get(param_field)
        if current is None or rank < current[0]:
            found[param_field] = (rank, value)
    return {param_field: value for param_field, (_rank, value) in found.items()}


def extract_param_annotation(obj: ConfigObject, config: Config) -> ParamAnnotation:
    """Return the parameter reference of ``obj``.

    ``SecureString`` parameters without a key fall back to
    ``config.default_kms_key``.

    Raises:
        IrrelevantObjectError: If the name or the type annotation is missing or empty.
    """
    fields = scan_annotations(obj.annotations, config.annotation_aliases())
    name = fields.get(ParamField.NAME, "")
    param_type = fields.get(ParamField.TYPE, "")
    key = fields.get(ParamField.KEY, "")

    if name == "" or param_type == "":
        raise IrrelevantObjectError(obj.namespace, obj.name)

    if param_type == ParamType.SECURE_STRING.value and key == "":
        logger.info("No KMS key defined. Using default key '%s'", config.default_kms_key)
        key = config.default_kms_key

    return ParamAnnotation(name=name, type=param_type, key=key)
