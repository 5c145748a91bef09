# topmark:header:start
#
#   project      : ParamSync
#   file         : keys.py
#   file_relpath : src/paramsync/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Canonical annotation and TOML key names for ParamSync.

This module defines the authoritative string constants used when reading
annotations from cluster objects and when reading or writing ParamSync
configuration from TOML sources (``paramsync.toml``).

Design notes:
    - Keys defined here represent *external API*.
    - Renaming or removing keys is a breaking change.
    - Annotation keys are composed from a namespace prefix and a field suffix,
      so that renamed namespaces can be recognized side by side.
"""

from __future__ import annotations

from typing import Final


class Annotations:
    """Annotation keys recognized on ConfigMap metadata.

    Every field is spelled ``<prefix>/<suffix>``. The current namespace is
    ``aws-ssm``; ``alpha.ssm.cmattoon.com`` is the legacy namespace that is
    still honored.
    """

    PREFIX_CURRENT: Final[str] = "aws-ssm"
    PREFIX_LEGACY: Final[str] = "alpha.ssm.cmattoon.com"

    SUFFIX_PARAM_NAME: Final[str] = "aws-param-name"
    SUFFIX_PARAM_TYPE: Final[str] = "aws-param-type"
    SUFFIX_PARAM_KEY: Final[str] = "aws-param-key"

    AWS_PARAM_NAME: Final[str] = f"{PREFIX_CURRENT}/{SUFFIX_PARAM_NAME}"
    AWS_PARAM_TYPE: Final[str] = f"{PREFIX_CURRENT}/{SUFFIX_PARAM_TYPE}"
    AWS_PARAM_KEY: Final[str] = f"{PREFIX_CURRENT}/{SUFFIX_PARAM_KEY}"

    V1_PARAM_NAME: Final[str] = f"{PREFIX_LEGACY}/{SUFFIX_PARAM_NAME}"
    V1_PARAM_TYPE: Final[str] = f"{PREFIX_LEGACY}/{SUFFIX_PARAM_TYPE}"
    V1_PARAM_KEY: Final[str] = f"{PREFIX_LEGACY}/{SUFFIX_PARAM_KEY}"


class Toml:
    """TOML section names and keys used by ParamSync configuration.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - CLI option names are defined on the Click commands.
    """

    # [resolver]
    SECTION_RESOLVER: Final[str] = "resolver"

    KEY_DEFAULT_KMS_KEY: Final[str] = "default_kms_key"
    KEY_STRICT_PARAM_TYPES: Final[str] = "strict_param_types"

    # [annotations]
    SECTION_ANNOTATIONS: Final[str] = "annotations"

    KEY_PREFIXES: Final[str] = "prefixes"

    # [[parameter]] (parameter snapshots for the in-memory store)
    SECTION_PARAMETER: Final[str] = "parameter"

    KEY_NAME: Final[str] = "name"
    KEY_VALUE: Final[str] = "value"
    KEY_TYPE: Final[str] = "type"
