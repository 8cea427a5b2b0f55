# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type queries used by the code emitters: values, conversions, field types, codecs."""

from protorust.codegen.config import CodegenConfig, CodegenConfigError, load_codegen_config, parse_codegen_config
from protorust.codegen.conversion import CONVERSION_RULE_NAMES, convert, try_convert
from protorust.codegen.field_kinds import (
    FieldWrapper,
    field_elem_rust_type,
    field_rust_type,
    rust_type_for_kind,
    type_gen_for_field,
    wrap_type,
)
from protorust.codegen.type_gen import (
    EnumOrUnknownTypeGen,
    EnumTypeGen,
    MessageTypeGen,
    PrimitiveTypeGen,
    PrimitiveTypeVariant,
    ProtobufTypeGen,
    protobuf_name,
    type_gen_rust_type,
)
from protorust.codegen.values import (
    RustValueTyped,
    clear,
    default_value,
    default_value_typed,
    elem_type,
    iter_elem_type,
    ref_type,
)

__all__ = [
    # Values
    "RustValueTyped",
    "default_value",
    "default_value_typed",
    "clear",
    "ref_type",
    "elem_type",
    "iter_elem_type",
    # Conversions
    "CONVERSION_RULE_NAMES",
    "convert",
    "try_convert",
    # Field kinds
    "FieldWrapper",
    "rust_type_for_kind",
    "wrap_type",
    "field_elem_rust_type",
    "field_rust_type",
    "type_gen_for_field",
    # Codec types
    "PrimitiveTypeVariant",
    "PrimitiveTypeGen",
    "MessageTypeGen",
    "EnumTypeGen",
    "EnumOrUnknownTypeGen",
    "ProtobufTypeGen",
    "protobuf_name",
    "type_gen_rust_type",
    # Configuration
    "CodegenConfig",
    "CodegenConfigError",
    "load_codegen_config",
    "parse_codegen_config",
]
