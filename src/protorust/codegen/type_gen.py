# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Names of the runtime codec types that (de)serialize field values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from protorust.errors import UnknownPrimitiveKindError
from protorust.model.descriptors import FieldKind
from protorust.model.symbols import RustIdentWithPath
from protorust.naming.paths import capitalize

# ###############
# Public Interface
# ###############

_TYPES_MOD = "::protobuf::types"


class PrimitiveTypeVariant(Enum):
    """Storage representation of ``bytes`` and ``string`` fields."""

    DEFAULT = "default"
    # ``::bytes::Bytes`` and ``::protobuf::Chars`` from the ``bytes`` crate.
    CARLLERCHE = "carllerche"


@dataclass(frozen=True)
class PrimitiveTypeGen:
    kind: FieldKind
    variant: PrimitiveTypeVariant = PrimitiveTypeVariant.DEFAULT


@dataclass(frozen=True)
class MessageTypeGen:
    name: RustIdentWithPath


@dataclass(frozen=True)
class EnumTypeGen:
    name: RustIdentWithPath


@dataclass(frozen=True)
class EnumOrUnknownTypeGen:
    name: RustIdentWithPath


ProtobufTypeGen = PrimitiveTypeGen | MessageTypeGen | EnumTypeGen | EnumOrUnknownTypeGen

# Kinds with a fixed Rust type and codec; message, enum and group are named types.
PRIMITIVE_KINDS = frozenset(
    {
        FieldKind.TYPE_DOUBLE,
        FieldKind.TYPE_FLOAT,
        FieldKind.TYPE_INT32,
        FieldKind.TYPE_INT64,
        FieldKind.TYPE_UINT32,
        FieldKind.TYPE_UINT64,
        FieldKind.TYPE_SINT32,
        FieldKind.TYPE_SINT64,
        FieldKind.TYPE_FIXED32,
        FieldKind.TYPE_FIXED64,
        FieldKind.TYPE_SFIXED32,
        FieldKind.TYPE_SFIXED64,
        FieldKind.TYPE_BOOL,
        FieldKind.TYPE_STRING,
        FieldKind.TYPE_BYTES,
    }
)


# Proto keyword of each field kind.
_PROTOBUF_NAMES: dict[FieldKind, str] = {
    FieldKind.TYPE_DOUBLE: "double",
    FieldKind.TYPE_FLOAT: "float",
    FieldKind.TYPE_INT32: "int32",
    FieldKind.TYPE_INT64: "int64",
    FieldKind.TYPE_UINT32: "uint32",
    FieldKind.TYPE_UINT64: "uint64",
    FieldKind.TYPE_SINT32: "sint32",
    FieldKind.TYPE_SINT64: "sint64",
    FieldKind.TYPE_FIXED32: "fixed32",
    FieldKind.TYPE_FIXED64: "fixed64",
    FieldKind.TYPE_SFIXED32: "sfixed32",
    FieldKind.TYPE_SFIXED64: "sfixed64",
    FieldKind.TYPE_BOOL: "bool",
    FieldKind.TYPE_STRING: "string",
    FieldKind.TYPE_BYTES: "bytes",
    FieldKind.TYPE_ENUM: "enum",
    FieldKind.TYPE_MESSAGE: "message",
    FieldKind.TYPE_GROUP: "group",
}


def protobuf_name(kind: FieldKind) -> str:
    """Return the schema keyword of *kind*: ``TYPE_SFIXED32`` -> ``sfixed32``."""
    return _PROTOBUF_NAMES[kind]


def type_gen_rust_type(gen: ProtobufTypeGen) -> str:
    """Return the Rust name of the runtime codec type for *gen*.

    Raises:
        UnknownPrimitiveKindError: If a primitive generator carries a message,
            enum or group kind.
        ValueError: If the ``CARLLERCHE`` variant is requested for a kind
            other than ``bytes`` or ``string``.
    """
    if isinstance(gen, PrimitiveTypeGen):
        if gen.kind not in PRIMITIVE_KINDS:
            raise UnknownPrimitiveKindError(gen.kind)
        if gen.variant is PrimitiveTypeVariant.DEFAULT:
            return f"{_TYPES_MOD}::ProtobufType{capitalize(protobuf_name(gen.kind))}"
        if gen.kind is FieldKind.TYPE_BYTES:
            return f"{_TYPES_MOD}::ProtobufTypeCarllercheBytes"
        if gen.kind is FieldKind.TYPE_STRING:
            return f"{_TYPES_MOD}::ProtobufTypeCarllercheChars"
        raise ValueError(f"{gen.variant.value} variant is only defined for bytes and string, not {gen.kind.name}")
    if isinstance(gen, MessageTypeGen):
        return f"{_TYPES_MOD}::ProtobufTypeMessage<{gen.name}>"
    if isinstance(gen, EnumOrUnknownTypeGen):
        return f"{_TYPES_MOD}::ProtobufTypeEnumOrUnknown<{gen.name}>"
    return f"{_TYPES_MOD}::ProtobufTypeEnum<{gen.name}>"
