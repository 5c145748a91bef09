# topmark:header:start
#
#   project      : ParamSync
#   file         : constants.py
#   file_relpath : src/paramsync/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""ParamSync Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PARAMSYNC_VERSION: str = get_version("paramsync")

# KMS key used for SecureString parameters that do not name one explicitly.
DEFAULT_KMS_KEY_ALIAS: str = "alias/aws/ssm"

# Value recorded on a Directory resolution instead of a scalar.
DIRECTORY_MARKER_VALUE: str = "true"

# Annotation namespaces, in precedence order (current first, legacy last).
DEFAULT_ANNOTATION_PREFIXES: tuple[str, ...] = ("aws-ssm", "alpha.ssm.cmattoon.com")

DEFAULT_TOML_CONFIG_NAME: str = "paramsync.toml"
