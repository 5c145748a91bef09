# topmark:header:start
#
#   project      : ParamSync
#   file         : model.py
#   file_relpath : src/paramsync/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Configuration model for ParamSync (immutable runtime view + mutable builder).

Design:
    * ``MutableConfig`` uses tri-state options (``None`` = *unset*) so that
      several sources (defaults → config file → CLI) can be merged last-wins
      without losing information.
    * ``Config`` is the frozen runtime view handed to the resolver. It replaces
      the package-level defaults a resolver would otherwise consult.
    * ``MutableConfig.freeze()`` fills unset fields from the built-in defaults.

TOML mapping:

    [resolver]
    default_kms_key = "alias/aws/ssm"
    strict_param_types = false

    [annotations]
    prefixes = ["aws-ssm", "alpha.ssm.cmattoon.com"]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from paramsync.config.io import (
    get_bool_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from paramsync.config.keys import Annotations, Toml
from paramsync.config.logging import get_logger
from paramsync.constants import DEFAULT_ANNOTATION_PREFIXES, DEFAULT_KMS_KEY_ALIAS
from paramsync.core.errors import ConfigError
from paramsync.core.types import ParamField

if TYPE_CHECKING:
    from pathlib import Path

    from paramsync.config.io import TomlTable
    from paramsync.config.logging import ParamsyncLogger

logger: ParamsyncLogger = get_logger(__name__)

_FIELD_SUFFIXES: dict[ParamField, str] = {
    ParamField.NAME: Annotations.SUFFIX_PARAM_NAME,
    ParamField.TYPE: Annotations.SUFFIX_PARAM_TYPE,
    ParamField.KEY: Annotations.SUFFIX_PARAM_KEY,
}


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration used by the resolver.

    Attributes:
        default_kms_key (str): KMS key used for ``SecureString`` parameters whose
            annotations do not name one.
        strict_param_types (bool): If True, unknown parameter types raise
            `UnsupportedParamTypeError` instead of producing an empty entry.
        annotation_prefixes (tuple[str, ...]): Annotation namespaces in precedence
            order; when a field is annotated under several namespaces, the first
            listed namespace wins.
        config_files (tuple[str, ...]): Files this configuration was loaded from.
    """

    default_kms_key: str = DEFAULT_KMS_KEY_ALIAS
    strict_param_types: bool = False
    annotation_prefixes: tuple[str, ...] = DEFAULT_ANNOTATION_PREFIXES
    config_files: tuple[str, ...] = ()

    def annotation_aliases(self) -> dict[str, tuple[ParamField, int]]:
        """Map every recognized annotation key to its field and precedence rank.

        Lower ranks win. For the default prefixes this yields e.g.
        ``"aws-ssm/aws-param-name" -> (NAME, 0)`` and
        ``"alpha.ssm.cmattoon.com/aws-param-name" -> (NAME, 1)``.
        """
        aliases: dict[str, tuple[ParamField, int]] = {}
        for rank, prefix in enumerate(self.annotation_prefixes):
            for param_field, suffix in _FIELD_SUFFIXES.items():
                aliases.setdefault(f"{prefix}/{suffix}", (param_field, rank))
        return aliases

    def to_toml_dict(self) -> TomlTable:
        """Export this configuration as a TOML-serializable dict."""
        return {
            Toml.SECTION_RESOLVER: {
                Toml.KEY_DEFAULT_KMS_KEY: self.default_kms_key,
                Toml.KEY_STRICT_PARAM_TYPES: self.strict_param_types,
            },
            Toml.SECTION_ANNOTATIONS: {
                Toml.KEY_PREFIXES: list(self.annotation_prefixes),
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable builder initialized from this snapshot."""
        return MutableConfig(
            default_kms_key=self.default_kms_key,
            strict_param_types=self.strict_param_types,
            annotation_prefixes=list(self.annotation_prefixes),
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used while loading and merging sources.

    ``None`` means "inherit" for every scalar option.
    """

    default_kms_key: str | None = None
    strict_param_types: bool | None = None
    annotation_prefixes: list[str] | None = None
    config_files: list[str] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults explicitly."""
        return Config().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed TOML data.

        Returns:
            MutableConfig: The resulting draft; absent keys stay ``None``.

        Raises:
            ConfigError: If a table or value has the wrong shape.
        """
        resolver_tbl: TomlTable = get_table_value(data, Toml.SECTION_RESOLVER)
        logger.trace("TOML [resolver]: %s", resolver_tbl)

        annotations_tbl: TomlTable = get_table_value(data, Toml.SECTION_ANNOTATIONS)
        logger.trace("TOML [annotations]: %s", annotations_tbl)

        draft = cls(
            default_kms_key=get_string_value_or_none(resolver_tbl, Toml.KEY_DEFAULT_KMS_KEY),
            strict_param_types=get_bool_value_or_none(
                resolver_tbl, Toml.KEY_STRICT_PARAM_TYPES
            ),
            annotation_prefixes=get_string_list_or_none(annotations_tbl, Toml.KEY_PREFIXES),
        )
        draft.validate()
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load configuration from a single TOML file."""
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        draft: MutableConfig = cls.from_toml_dict(load_toml_dict(path))
        draft.config_files = [str(path)]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    def validate(self) -> None:
        """Reject values the resolver cannot work with.

        Raises:
            ConfigError: If ``annotation_prefixes`` is empty or holds blank entries.
        """
        if self.annotation_prefixes is None:
            return
        if not self.annotation_prefixes:
            raise ConfigError("'prefixes' must list at least one annotation namespace")
        for prefix in self.annotation_prefixes:
            if not prefix.strip() or "/" in prefix:
                raise ConfigError(f"Invalid annotation namespace {prefix!r}")

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where explicitly set values from ``other`` win."""
        return MutableConfig(
            default_kms_key=other.default_kms_key
            if other.default_kms_key is not None
            else self.default_kms_key,
            strict_param_types=other.strict_param_types
            if other.strict_param_types is not None
            else self.strict_param_types,
            annotation_prefixes=other.annotation_prefixes
            if other.annotation_prefixes is not None
            else self.annotation_prefixes,
            config_files=self.config_files + other.config_files,
        )

    def freeze(self) -> Config:
        """Freeze to a concrete `Config`, filling unset fields from the defaults."""
        base = Config()
        return Config(
            default_kms_key=base.default_kms_key
            if self.default_kms_key is None
            else self.default_kms_key,
            strict_param_types=base.strict_param_types
            if self.strict_param_types is None
            else self.strict_param_types,
            annotation_prefixes=base.annotation_prefixes
            if self.annotation_prefixes is None
            else tuple(self.annotation_prefixes),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def load_merged(cls, config_files: list[Path] | None = None) -> MutableConfig:
        """Return the defaults merged with each of ``config_files`` in order."""
        draft: MutableConfig = cls.from_defaults()
        for path in config_files or ():
            draft = draft.merge_with(cls.from_toml_file(path))
        return draft
