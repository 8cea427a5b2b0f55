# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value-level queries on a single Rust type.

Default values, clear statements, view types and element types. Each query is
defined for a fixed set of variants; asking it of any other variant raises
:class:`~protorust.errors.UnrepresentableOperationError` rather than guessing.
"""

from __future__ import annotations

from dataclasses import dataclass

from protorust.codegen.conversion import convert
from protorust.errors import UnrepresentableOperationError
from protorust.model.types import (
    BoolType,
    BoxType,
    BytesType,
    CharsType,
    EnumOrUnknownType,
    EnumType,
    FloatType,
    HashMapType,
    IntType,
    MessageType,
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
    u8,
)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class RustValueTyped:
    """An expression in generated code together with its type.

    Attributes:
        value: Rust expression text.
        rust_type: Type of the expression.
    """

    value: str
    rust_type: RustType

    def into_type(self, target: RustType) -> RustValueTyped:
        """Convert this value into *target*.

        Raises:
            NoConversionPathError: If there is no conversion.
        """
        return RustValueTyped(value=convert(self.rust_type, target, self.value), rust_type=target)

    def boxed(self) -> RustValueTyped:
        return self.into_type(BoxType(inner_type=self.rust_type))


def default_value(t: RustType) -> str:
    """Return an expression producing the default value of *t*.

    The default of an enum type is its declared default variant, which may
    differ from the default value of a field of that type.

    Raises:
        UnrepresentableOperationError: If *t* has no default value.
    """
    if isinstance(t, RefType):
        inner = t.inner_type
        if isinstance(inner, StrType):
            return '""'
        if isinstance(inner, SliceType):
            return "&[]"
        if isinstance(inner, MessageType):
            return f"<{inner.name} as ::protobuf::Message>::default_instance()"
        raise UnrepresentableOperationError("default value", t)
    if isinstance(t, IntType):
        return "0"
    if isinstance(t, FloatType):
        return "0."
    if isinstance(t, BoolType):
        return "false"
    if isinstance(t, VecType):
        return "::std::vec::Vec::new()"
    if isinstance(t, HashMapType):
        return "::std::collections::HashMap::new()"
    if isinstance(t, StringType):
        return "::std::string::String::new()"
    if isinstance(t, BytesType):
        return "::bytes::Bytes::new()"
    if isinstance(t, CharsType):
        return "::protobuf::Chars::new()"
    if isinstance(t, OptionType):
        return "::std::option::Option::None"
    if isinstance(t, SingularFieldType):
        return "::protobuf::SingularField::none()"
    if isinstance(t, SingularPtrFieldType):
        return "::protobuf::SingularPtrField::none()"
    if isinstance(t, RepeatedFieldType):
        return "::protobuf::RepeatedField::new()"
    if isinstance(t, MessageType):
        return f"{t.name}::new()"
    if isinstance(t, EnumType):
        return f"{t.name}::{t.default_variant}"
    if isinstance(t, EnumOrUnknownType):
        return f"::protobuf::ProtobufEnumOrUnknown::new({t.name}::{t.default_variant})"
    raise UnrepresentableOperationError("default value", t)


def default_value_typed(t: RustType) -> RustValueTyped:
    return RustValueTyped(value=default_value(t), rust_type=t)


def clear(t: RustType, v: str) -> str:
    """Return a statement resetting variable *v* of type *t* to its default.

    Raises:
        UnrepresentableOperationError: If *t* cannot be cleared in place.
    """
    if isinstance(t, OptionType):
        return f"{v} = ::std::option::Option::None"
    if isinstance(
        t,
        (
            VecType,
            BytesType,
            StringType,
            RepeatedFieldType,
            SingularFieldType,
            SingularPtrFieldType,
            HashMapType,
        ),
    ):
        return f"{v}.clear()"
    if isinstance(t, CharsType):
        return f"::protobuf::Clear::clear(&mut {v})"
    if isinstance(t, (BoolType, FloatType, IntType, EnumType, EnumOrUnknownType)):
        return f"{v} = {default_value(t)}"
    raise UnrepresentableOperationError("clear", t)


def ref_type(t: RustType) -> RefType:
    """Return the reference type used to view data of type *t*.

    ``String`` is viewed as ``&str``, ``Vec<T>`` as ``&[T]``, ``Bytes`` as ``&[u8]``.

    Raises:
        UnrepresentableOperationError: If *t* has no view type.
    """
    if isinstance(t, (StringType, CharsType)):
        view: RustType = StrType()
    elif isinstance(t, (VecType, RepeatedFieldType)):
        view = SliceType(element_type=t.element_type)
    elif isinstance(t, BytesType):
        view = SliceType(element_type=u8())
    elif isinstance(t, (MessageType, BoxType)):
        view = t
    else:
        raise UnrepresentableOperationError("ref type", t)
    return RefType(inner_type=view)


def elem_type(t: RustType) -> RustType:
    """Return the payload type of an optional wrapper.

    Raises:
        UnrepresentableOperationError: If *t* is not an optional wrapper.
    """
    if isinstance(t, (OptionType, SingularFieldType, SingularPtrFieldType)):
        return t.inner_type
    raise UnrepresentableOperationError("elem type", t)


def iter_elem_type(t: RustType) -> RefType:
    """Return the type of ``v`` in ``for v in x`` where ``x`` has type *t*.

    Raises:
        UnrepresentableOperationError: If *t* cannot be iterated.
    """
    if isinstance(t, (VecType, RepeatedFieldType)):
        return RefType(inner_type=t.element_type)
    if isinstance(t, (OptionType, SingularFieldType, SingularPtrFieldType)):
        return RefType(inner_type=t.inner_type)
    raise UnrepresentableOperationError("iter elem type", t)
