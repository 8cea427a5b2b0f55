# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Expressions converting a value of one Rust type into another.

Conversions are an ordered list of rules. Rules are tried top to bottom and
the first one that matches produces the expression; the order is observable
whenever two rules match the same pair of types. If no rule matches and the
source is a reference, the whole list is tried again with the referenced type
as source.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from protorust.errors import NoConversionPathError
from protorust.model.types import (
    BoxType,
    BytesType,
    CharsType,
    EnumOrUnknownType,
    EnumType,
    IntType,
    RefType,
    RustType,
    SliceType,
    StringType,
    StrType,
    VecType,
    box_target,
    is_enum,
    is_enum_or_unknown,
    is_slice_u8,
    is_str,
    is_string,
    ref_target,
    slice_element,
    u8,
)

log = logging.getLogger("protorust.conversion")

# A rule returns the converted expression, or None if it does not apply.
ConversionRule = Callable[[RustType, RustType, str], str | None]

# ###############
# Public Interface
# ###############


def convert(source: RustType, target: RustType, value: str) -> str:
    """Return an expression converting *value* of type *source* into *target*.

    Raises:
        NoConversionPathError: If no rule converts *source* into *target*.
    """
    result = try_convert(source, target, value)
    if result is None:
        raise NoConversionPathError(source, target)
    return result


def try_convert(source: RustType, target: RustType, value: str) -> str | None:
    """Like :func:`convert`, but return None when there is no conversion."""
    for name, rule in CONVERSION_RULES:
        result = rule(source, target, value)
        if result is not None:
            log.debug("%s -> %s: rule %r", source, target, name)
            return result

    inner = ref_target(source)
    if inner is not None:
        return try_convert(inner, target, value)

    return None


# ################
# Implementation
# ################


def _identity(source: RustType, target: RustType, v: str) -> str | None:
    return v if source == target else None


def _ref_box_to_ref(source: RustType, target: RustType, v: str) -> str | None:
    # &Box<X> -> &X
    boxed = ref_target(source)
    inner = box_target(boxed) if boxed is not None else None
    if inner is not None and inner == ref_target(target):
        return f"&**{v}"
    return None


def _deref(source: RustType, target: RustType, v: str) -> str | None:
    if isinstance(source, RefType) and source.inner_type == target:
        return f"*{v}"
    return None


def _box(source: RustType, target: RustType, v: str) -> str | None:
    if isinstance(target, BoxType) and target.inner_type == source:
        return f"::std::boxed::Box::new({v})"
    return None


def _unbox(source: RustType, target: RustType, v: str) -> str | None:
    if isinstance(source, BoxType) and source.inner_type == target:
        return f"*{v}"
    return None


def _borrow_str(source: RustType, target: RustType, v: str) -> str | None:
    # String -> &str, Chars -> &str
    if isinstance(source, (StringType, CharsType)) and target == RefType(inner_type=StrType()):
        return f"&{v}"
    return None


def _string_ref_and_str_ref(source: RustType, target: RustType, v: str) -> str | None:
    # &String -> &str, &str -> String
    source_inner = ref_target(source)
    if source_inner is None:
        return None
    target_inner = ref_target(target)
    if is_string(source_inner) and target_inner is not None and is_str(target_inner):
        return f"&{v}"
    if is_str(source_inner) and isinstance(target, StringType):
        return f"{v}.to_owned()"
    return None


def _str_ref_to_chars(source: RustType, target: RustType, v: str) -> str | None:
    source_inner = ref_target(source)
    if source_inner is not None and is_str(source_inner) and isinstance(target, CharsType):
        return f"<::protobuf::Chars as ::std::convert::From<_>>::from({v}.to_owned())"
    return None


def _slice_ref_to_vec(source: RustType, target: RustType, v: str) -> str | None:
    source_inner = ref_target(source)
    elem = slice_element(source_inner) if source_inner is not None else None
    if elem is not None and isinstance(target, VecType) and target.element_type == elem:
        return f"{v}.to_vec()"
    return None


def _slice_ref_to_bytes(source: RustType, target: RustType, v: str) -> str | None:
    source_inner = ref_target(source)
    if source_inner is not None and is_slice_u8(source_inner) and isinstance(target, BytesType):
        return f"<::bytes::Bytes as ::std::convert::From<_>>::from({v}.to_vec())"
    return None


def _borrow_as_slice(source: RustType, target: RustType, v: str) -> str | None:
    # Vec<X> -> &[X], Bytes -> &[u8]
    target_inner = ref_target(target)
    elem = slice_element(target_inner) if target_inner is not None else None
    if elem is None:
        return None
    if isinstance(source, VecType) and source.element_type == elem:
        return f"&{v}"
    if isinstance(source, BytesType) and elem == u8():
        return f"&{v}"
    return None


def _vec_ref_to_slice_ref(source: RustType, target: RustType, v: str) -> str | None:
    source_inner = ref_target(source)
    target_inner = ref_target(target)
    if (
        isinstance(source_inner, VecType)
        and isinstance(target_inner, SliceType)
        and source_inner.element_type == target_inner.element_type
    ):
        return f"&{v}"
    return None


def _enum_to_i32(source: RustType, target: RustType, v: str) -> str | None:
    if target != IntType(signed=True, bits=32):
        return None
    if isinstance(source, EnumType):
        return f"::protobuf::ProtobufEnum::value(&{v})"
    if isinstance(source, EnumOrUnknownType):
        return f"::protobuf::ProtobufEnumOrUnknown::value(&{v})"
    source_inner = ref_target(source)
    if source_inner is not None and is_enum(source_inner):
        return f"::protobuf::ProtobufEnum::value({v})"
    if source_inner is not None and is_enum_or_unknown(source_inner):
        return f"::protobuf::ProtobufEnumOrUnknown::value({v})"
    return None


def _enum_or_unknown_to_enum(source: RustType, target: RustType, v: str) -> str | None:
    # Unknown values become the default variant of the enum type, which is
    # not necessarily the default value of the field.
    if isinstance(source, EnumOrUnknownType) and isinstance(target, EnumType) and source.name == target.name:
        return f"::protobuf::ProtobufEnumOrUnknown::enum_value_or_default(&{v})"
    return None


def _enum_to_enum_or_unknown(source: RustType, target: RustType, v: str) -> str | None:
    if isinstance(source, EnumType) and isinstance(target, EnumOrUnknownType) and source.name == target.name:
        return f"::protobuf::ProtobufEnumOrUnknown::new({v})"
    return None


CONVERSION_RULES: tuple[tuple[str, ConversionRule], ...] = (
    ("identity", _identity),
    ("ref-box-to-ref", _ref_box_to_ref),
    ("deref", _deref),
    ("box", _box),
    ("unbox", _unbox),
    ("borrow-str", _borrow_str),
    ("string-ref-and-str-ref", _string_ref_and_str_ref),
    ("str-ref-to-chars", _str_ref_to_chars),
    ("slice-ref-to-vec", _slice_ref_to_vec),
    ("slice-ref-to-bytes", _slice_ref_to_bytes),
    ("borrow-as-slice", _borrow_as_slice),
    ("vec-ref-to-slice-ref", _vec_ref_to_slice_ref),
    ("enum-to-i32", _enum_to_i32),
    ("enum-or-unknown-to-enum", _enum_or_unknown_to_enum),
    ("enum-to-enum-or-unknown", _enum_to_enum_or_unknown),
)

CONVERSION_RULE_NAMES: tuple[str, ...] = tuple(name for name, _ in CONVERSION_RULES)
