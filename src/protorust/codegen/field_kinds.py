# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rust types for schema field kinds.

Primitive kinds map through a fixed table. Message and enum kinds are named
through the root scope, relative to the module being generated. The wrapper
(presence or repeatedness) is chosen by the caller and applied last.
"""

from __future__ import annotations

from enum import Enum

from protorust.codegen.config import CodegenConfig
from protorust.codegen.type_gen import (
    PRIMITIVE_KINDS,
    EnumOrUnknownTypeGen,
    EnumTypeGen,
    MessageTypeGen,
    PrimitiveTypeGen,
    PrimitiveTypeVariant,
    ProtobufTypeGen,
)
from protorust.errors import UnknownPrimitiveKindError
from protorust.model.descriptors import EnumDescriptor, FieldDescriptor, FieldKind
from protorust.model.symbols import FileAndMod, RustIdentWithPath
from protorust.model.types import (
    BoolType,
    BytesType,
    CharsType,
    EnumOrUnknownType,
    EnumType,
    FloatType,
    GroupType,
    IntType,
    MessageType,
    OptionType,
    RepeatedFieldType,
    RustType,
    SingularFieldType,
    SingularPtrFieldType,
    StringType,
    VecType,
    u8,
)
from protorust.naming.relative import message_or_enum_to_rust_relative
from protorust.naming.scope import MessageOrEnumWithScope, RootScope

# ###############
# Public Interface
# ###############


class FieldWrapper(Enum):
    """Container a field's element type is stored in."""

    PLAIN = "plain"
    OPTION = "option"
    SINGULAR_FIELD = "singular_field"
    SINGULAR_PTR_FIELD = "singular_ptr_field"
    VEC = "vec"
    REPEATED_FIELD = "repeated_field"


def rust_type_for_kind(
    kind: FieldKind,
    variant: PrimitiveTypeVariant = PrimitiveTypeVariant.DEFAULT,
) -> RustType:
    """Return the Rust type of a primitive field kind.

    With the ``CARLLERCHE`` variant, ``bytes`` is stored as ``::bytes::Bytes``
    and ``string`` as ``::protobuf::Chars``; other kinds are unaffected.

    Raises:
        UnknownPrimitiveKindError: If *kind* is message, enum or group.
    """
    if variant is PrimitiveTypeVariant.CARLLERCHE:
        if kind is FieldKind.TYPE_BYTES:
            return BytesType()
        if kind is FieldKind.TYPE_STRING:
            return CharsType()
    try:
        return _PRIMITIVE_RUST_TYPES[kind]
    except KeyError:
        raise UnknownPrimitiveKindError(kind) from None


def wrap_type(elem: RustType, wrapper: FieldWrapper) -> RustType:
    """Return *elem* stored in *wrapper*."""
    if wrapper is FieldWrapper.PLAIN:
        return elem
    if wrapper is FieldWrapper.OPTION:
        return OptionType(inner_type=elem)
    if wrapper is FieldWrapper.SINGULAR_FIELD:
        return SingularFieldType(inner_type=elem)
    if wrapper is FieldWrapper.SINGULAR_PTR_FIELD:
        return SingularPtrFieldType(inner_type=elem)
    if wrapper is FieldWrapper.VEC:
        return VecType(element_type=elem)
    return RepeatedFieldType(element_type=elem)


def field_elem_rust_type(
    field: FieldDescriptor,
    current: FileAndMod,
    root_scope: RootScope,
    config: CodegenConfig | None = None,
) -> RustType:
    """Return the Rust type of one value of *field*, before wrapping.

    Args:
        field: The field descriptor.
        current: File and module the type is referenced from.
        root_scope: Scope resolving message and enum names.
        config: Code generation options; defaults apply when omitted.

    Raises:
        ValueError: If a message or enum field has no type name, names a type
            of the wrong kind, or names an enum without values.
        ScopeLookupError: If the type name is not declared.
    """
    config = config or CodegenConfig()
    if field.kind in PRIMITIVE_KINDS:
        return rust_type_for_kind(field.kind, config.variant_for_kind(field.kind))
    if field.kind is FieldKind.TYPE_GROUP:
        return GroupType()

    entity = _find_field_type(field, root_scope)
    name = message_or_enum_to_rust_relative(entity, current)
    if field.kind is FieldKind.TYPE_MESSAGE:
        return MessageType(name=name)

    default_variant = _enum_default_variant(entity)
    if config.enum_or_unknown:
        return EnumOrUnknownType(name=name, default_variant=default_variant)
    return EnumType(name=name, default_variant=default_variant)


def field_rust_type(
    field: FieldDescriptor,
    current: FileAndMod,
    root_scope: RootScope,
    wrapper: FieldWrapper = FieldWrapper.PLAIN,
    config: CodegenConfig | None = None,
) -> RustType:
    """Return the storage type of *field*: its element type inside *wrapper*."""
    return wrap_type(field_elem_rust_type(field, current, root_scope, config), wrapper)


def type_gen_for_field(
    field: FieldDescriptor,
    current: FileAndMod,
    root_scope: RootScope,
    config: CodegenConfig | None = None,
) -> ProtobufTypeGen:
    """Return the runtime codec generator for values of *field*.

    Raises:
        UnknownPrimitiveKindError: For group fields, which have no codec.
    """
    config = config or CodegenConfig()
    if field.kind in PRIMITIVE_KINDS:
        return PrimitiveTypeGen(kind=field.kind, variant=config.variant_for_kind(field.kind))
    if field.kind is FieldKind.TYPE_GROUP:
        raise UnknownPrimitiveKindError(field.kind)

    entity = _find_field_type(field, root_scope)
    name: RustIdentWithPath = message_or_enum_to_rust_relative(entity, current)
    if field.kind is FieldKind.TYPE_MESSAGE:
        return MessageTypeGen(name=name)
    if config.enum_or_unknown:
        return EnumOrUnknownTypeGen(name=name)
    return EnumTypeGen(name=name)


# ################
# Implementation
# ################

_PRIMITIVE_RUST_TYPES: dict[FieldKind, RustType] = {
    FieldKind.TYPE_DOUBLE: FloatType(bits=64),
    FieldKind.TYPE_FLOAT: FloatType(bits=32),
    FieldKind.TYPE_INT32: IntType(signed=True, bits=32),
    FieldKind.TYPE_INT64: IntType(signed=True, bits=64),
    FieldKind.TYPE_UINT32: IntType(signed=False, bits=32),
    FieldKind.TYPE_UINT64: IntType(signed=False, bits=64),
    FieldKind.TYPE_SINT32: IntType(signed=True, bits=32),
    FieldKind.TYPE_SINT64: IntType(signed=True, bits=64),
    FieldKind.TYPE_FIXED32: IntType(signed=False, bits=32),
    FieldKind.TYPE_FIXED64: IntType(signed=False, bits=64),
    FieldKind.TYPE_SFIXED32: IntType(signed=True, bits=32),
    FieldKind.TYPE_SFIXED64: IntType(signed=True, bits=64),
    FieldKind.TYPE_BOOL: BoolType(),
    FieldKind.TYPE_STRING: StringType(),
    FieldKind.TYPE_BYTES: VecType(element_type=u8()),
}


def _find_field_type(field: FieldDescriptor, root_scope: RootScope) -> MessageOrEnumWithScope:
    if not field.type_name:
        raise ValueError(f"field '{field.name}' of kind {field.kind.name} has no type name")
    entity = root_scope.find_message_or_enum(field.type_name)
    if entity.is_enum != (field.kind is FieldKind.TYPE_ENUM):
        expected = "an enum" if field.kind is FieldKind.TYPE_ENUM else "a message"
        raise ValueError(f"field '{field.name}': {field.type_name} does not name {expected}")
    return entity


def _enum_default_variant(entity: MessageOrEnumWithScope) -> str:
    descriptor = entity.descriptor
    assert isinstance(descriptor, EnumDescriptor)
    if not descriptor.values:
        raise ValueError(f"enum {entity.name_absolute()} declares no values")
    return descriptor.values[0]
