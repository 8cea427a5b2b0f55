# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for code generation options."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from protorust.codegen.type_gen import PrimitiveTypeVariant
from protorust.model.descriptors import FieldKind

log = logging.getLogger("protorust.config")

# ###############
# Public Interface
# ###############


class CodegenConfigError(Exception):
    """Raised when a code generation config file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class CodegenConfig:
    """Options that select how fields are represented in generated code.

    Attributes:
        carllerche_bytes_for_bytes: Store ``bytes`` fields as ``::bytes::Bytes``.
        carllerche_bytes_for_string: Store ``string`` fields as ``::protobuf::Chars``.
        enum_or_unknown: Store enum fields as ``ProtobufEnumOrUnknown`` so that
            unrecognized wire values are preserved.
    """

    carllerche_bytes_for_bytes: bool = False
    carllerche_bytes_for_string: bool = False
    enum_or_unknown: bool = False

    def variant_for_kind(self, kind: FieldKind) -> PrimitiveTypeVariant:
        """Return the storage variant used for fields of *kind*."""
        if kind is FieldKind.TYPE_BYTES and self.carllerche_bytes_for_bytes:
            return PrimitiveTypeVariant.CARLLERCHE
        if kind is FieldKind.TYPE_STRING and self.carllerche_bytes_for_string:
            return PrimitiveTypeVariant.CARLLERCHE
        return PrimitiveTypeVariant.DEFAULT


def load_codegen_config(path: Path) -> CodegenConfig:
    """Load and parse a code generation config file.

    Args:
        path: Path to the YAML file.

    Returns:
        A CodegenConfig instance populated from the file.

    Raises:
        CodegenConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CodegenConfigError(f"Codegen config file not found: {path}") from None
    except OSError as exc:
        raise CodegenConfigError(f"Cannot read codegen config file: {exc}") from exc

    return parse_codegen_config(text, source_label=str(path))


def parse_codegen_config(text: str, source_label: str = "<string>") -> CodegenConfig:
    """Parse code generation config YAML text.

    An empty document yields the default configuration.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        CodegenConfigError: If the YAML is invalid, a key is unknown, or a value
            has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CodegenConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CodegenConfigError(f"{source_label}: codegen config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KEYS)
    if unknown:
        raise CodegenConfigError(f"{source_label}: unknown option(s): {', '.join(unknown)}")

    config = CodegenConfig(**{attr: _optional_bool(data, key, source_label) for key, attr in _KEYS.items()})
    log.debug("loaded codegen config from %s: %s", source_label, config)
    return config


# ################
# Implementation
# ################

# YAML key -> CodegenConfig attribute.
_KEYS: dict[str, str] = {
    "carllerche-bytes-for-bytes": "carllerche_bytes_for_bytes",
    "carllerche-bytes-for-string": "carllerche_bytes_for_string",
    "enum-or-unknown": "enum_or_unknown",
}


def _optional_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    """Extract an optional boolean field, defaulting to False."""
    value = mapping.get(key, False)
    if not isinstance(value, bool):
        raise CodegenConfigError(f"{source_label}: '{key}' must be a boolean")
    return value
