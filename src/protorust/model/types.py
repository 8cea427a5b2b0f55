# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""The closed set of Rust types used in generated code.

Every variant is a frozen pydantic model, so equality and hashing are
structural: two occurrences of the same shape with the same payload are
interchangeable for every type query.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from protorust.model.symbols import RustIdentWithPath

# ###############
# Public Interface
# ###############


class _RustTypeBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_type(self)  # type: ignore[arg-type]


class IntType(_RustTypeBase):
    """A fixed-width integer: ``i32``, ``u64``, ``u8``..."""

    kind: Literal["int"] = "int"
    signed: bool
    bits: Literal[8, 16, 32, 64]


class FloatType(_RustTypeBase):
    """An IEEE float: ``f32`` or ``f64``."""

    kind: Literal["float"] = "float"
    bits: Literal[32, 64]


class BoolType(_RustTypeBase):
    kind: Literal["bool"] = "bool"


class StringType(_RustTypeBase):
    """Owned, growable UTF-8 string."""

    kind: Literal["string"] = "string"


class StrType(_RustTypeBase):
    """``str``, not ``&str``: only meaningful under a :class:`RefType`."""

    kind: Literal["str"] = "str"


class SliceType(_RustTypeBase):
    """``[T]``, not ``&[T]``."""

    kind: Literal["slice"] = "slice"
    element_type: RustType


class VecType(_RustTypeBase):
    kind: Literal["vec"] = "vec"
    element_type: RustType


class HashMapType(_RustTypeBase):
    kind: Literal["hash_map"] = "hash_map"
    key_type: RustType
    value_type: RustType


class OptionType(_RustTypeBase):
    kind: Literal["option"] = "option"
    inner_type: RustType


class SingularFieldType(_RustTypeBase):
    """Presence wrapper used for optional scalar fields."""

    kind: Literal["singular_field"] = "singular_field"
    inner_type: RustType


class SingularPtrFieldType(_RustTypeBase):
    """Presence wrapper whose payload is heap-allocated."""

    kind: Literal["singular_ptr_field"] = "singular_ptr_field"
    inner_type: RustType


class RepeatedFieldType(_RustTypeBase):
    """Repeated field container, kept distinct from ``Vec`` for ABI compatibility."""

    kind: Literal["repeated_field"] = "repeated_field"
    element_type: RustType


class BoxType(_RustTypeBase):
    """``Box<T>``: exclusive heap ownership."""

    kind: Literal["box"] = "box"
    inner_type: RustType


class RefType(_RustTypeBase):
    """``&T``: a non-owning reference."""

    kind: Literal["ref"] = "ref"
    inner_type: RustType


class MessageType(_RustTypeBase):
    kind: Literal["message"] = "message"
    name: RustIdentWithPath


class EnumType(_RustTypeBase):
    """A protobuf enum (not any Rust enum) with its declared default variant."""

    kind: Literal["enum"] = "enum"
    name: RustIdentWithPath
    default_variant: str


class EnumOrUnknownType(_RustTypeBase):
    """A protobuf enum widened to hold unrecognized wire values."""

    kind: Literal["enum_or_unknown"] = "enum_or_unknown"
    name: RustIdentWithPath
    default_variant: str


class OneofType(_RustTypeBase):
    kind: Literal["oneof"] = "oneof"
    name: RustIdentWithPath


class BytesType(_RustTypeBase):
    """``::bytes::Bytes``: reference-counted immutable byte buffer."""

    kind: Literal["bytes"] = "bytes"


class CharsType(_RustTypeBase):
    """``::protobuf::Chars``: reference-counted immutable UTF-8 buffer."""

    kind: Literal["chars"] = "chars"


class GroupType(_RustTypeBase):
    """Legacy group field; no value operations are supported."""

    kind: Literal["group"] = "group"


# A Rust type used in generated code.
# The `kind` discriminator keeps validation of nested payloads unambiguous.
RustType = Annotated[
    IntType
    | FloatType
    | BoolType
    | StringType
    | StrType
    | SliceType
    | VecType
    | HashMapType
    | OptionType
    | SingularFieldType
    | SingularPtrFieldType
    | RepeatedFieldType
    | BoxType
    | RefType
    | MessageType
    | EnumType
    | EnumOrUnknownType
    | OneofType
    | BytesType
    | CharsType
    | GroupType,
    _Field(discriminator="kind"),
]


def u8() -> IntType:
    return IntType(signed=False, bits=8)


def is_primitive(t: RustType) -> bool:
    """Return True for Rust primitives: integers, floats and ``bool``."""
    return isinstance(t, (IntType, FloatType, BoolType))


def is_u8(t: RustType) -> bool:
    return isinstance(t, IntType) and not t.signed and t.bits == 8


def is_copy(t: RustType) -> bool:
    """Return True if values of *t* can be duplicated bitwise without aliasing concerns."""
    return is_primitive(t) or isinstance(t, (EnumType, EnumOrUnknownType))


def is_str(t: RustType) -> bool:
    return isinstance(t, StrType)


def is_string(t: RustType) -> bool:
    return isinstance(t, StringType)


def slice_element(t: RustType) -> RustType | None:
    """Return the element type of ``[T]``, or None if *t* is not a slice."""
    return t.element_type if isinstance(t, SliceType) else None


def is_slice_u8(t: RustType) -> bool:
    elem = slice_element(t)
    return elem is not None and is_u8(elem)


def is_message(t: RustType) -> bool:
    return isinstance(t, MessageType)


def is_enum(t: RustType) -> bool:
    return isinstance(t, EnumType)


def is_enum_or_unknown(t: RustType) -> bool:
    return isinstance(t, EnumOrUnknownType)


def ref_target(t: RustType) -> RustType | None:
    """Return ``T`` for ``&T``, otherwise None."""
    return t.inner_type if isinstance(t, RefType) else None


def box_target(t: RustType) -> RustType | None:
    """Return ``T`` for ``Box<T>``, otherwise None."""
    return t.inner_type if isinstance(t, BoxType) else None


def format_type(t: RustType | None) -> str:
    """Render *t* the way it is spelled in generated Rust code."""
    if t is None:
        return "<none>"
    if isinstance(t, IntType):
        return f"{'i' if t.signed else 'u'}{t.bits}"
    if isinstance(t, FloatType):
        return f"f{t.bits}"
    if isinstance(t, BoolType):
        return "bool"
    if isinstance(t, VecType):
        return f"::std::vec::Vec<{format_type(t.element_type)}>"
    if isinstance(t, HashMapType):
        return f"::std::collections::HashMap<{format_type(t.key_type)}, {format_type(t.value_type)}>"
    if isinstance(t, StringType):
        return "::std::string::String"
    if isinstance(t, SliceType):
        return f"[{format_type(t.element_type)}]"
    if isinstance(t, StrType):
        return "str"
    if isinstance(t, OptionType):
        return f"::std::option::Option<{format_type(t.inner_type)}>"
    if isinstance(t, SingularFieldType):
        return f"::protobuf::SingularField<{format_type(t.inner_type)}>"
    if isinstance(t, SingularPtrFieldType):
        return f"::protobuf::SingularPtrField<{format_type(t.inner_type)}>"
    if isinstance(t, RepeatedFieldType):
        return f"::protobuf::RepeatedField<{format_type(t.element_type)}>"
    if isinstance(t, BoxType):
        return f"::std::boxed::Box<{format_type(t.inner_type)}>"
    if isinstance(t, RefType):
        return f"&{format_type(t.inner_type)}"
    if isinstance(t, (MessageType, EnumType, OneofType)):
        return str(t.name)
    if isinstance(t, EnumOrUnknownType):
        return f"::protobuf::ProtobufEnumOrUnknown<{t.name}>"
    if isinstance(t, GroupType):
        return "<group>"
    if isinstance(t, BytesType):
        return "::bytes::Bytes"
    if isinstance(t, CharsType):
        return "::protobuf::Chars"
    return repr(t)


# Resolve forward references for models that use RustType.
SliceType.model_rebuild()
VecType.model_rebuild()
HashMapType.model_rebuild()
OptionType.model_rebuild()
SingularFieldType.model_rebuild()
SingularPtrFieldType.model_rebuild()
RepeatedFieldType.model_rebuild()
BoxType.model_rebuild()
RefType.model_rebuild()
