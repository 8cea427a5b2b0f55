# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for protorust: Rust types, qualified symbols and schema descriptors."""

from protorust.model.descriptors import (
    EnumDescriptor,
    FieldDescriptor,
    FieldKind,
    FileDescriptor,
    MessageDescriptor,
)
from protorust.model.symbols import SUPER_IDENT, FileAndMod, RustIdentWithPath, RustPath
from protorust.model.types import (
    BoolType,
    BoxType,
    BytesType,
    CharsType,
    EnumOrUnknownType,
    EnumType,
    FloatType,
    GroupType,
    HashMapType,
    IntType,
    MessageType,
    OneofType,
    OptionType,
    RefType,
    RepeatedFieldType,
    RustType,
    SingularFieldType,
    SingularPtrFieldType,
    SliceType,
    StringType,
    StrType,
    VecType,
    format_type,
    u8,
)

__all__ = [
    # Type algebra
    "IntType",
    "FloatType",
    "BoolType",
    "StringType",
    "StrType",
    "SliceType",
    "VecType",
    "HashMapType",
    "OptionType",
    "SingularFieldType",
    "SingularPtrFieldType",
    "RepeatedFieldType",
    "BoxType",
    "RefType",
    "MessageType",
    "EnumType",
    "EnumOrUnknownType",
    "OneofType",
    "BytesType",
    "CharsType",
    "GroupType",
    "RustType",
    "format_type",
    "u8",
    # Symbols
    "SUPER_IDENT",
    "RustPath",
    "RustIdentWithPath",
    "FileAndMod",
    # Descriptors
    "FieldKind",
    "FieldDescriptor",
    "EnumDescriptor",
    "MessageDescriptor",
    "FileDescriptor",
]
