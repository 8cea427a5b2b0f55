# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the ordered conversion rules."""

import logging

import pytest

from protorust.codegen.conversion import CONVERSION_RULE_NAMES, CONVERSION_RULES, convert, try_convert
from protorust.errors import NoConversionPathError
from protorust.model import (
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
    RustIdentWithPath,
    SingularFieldType,
    SingularPtrFieldType,
    SliceType,
    StringType,
    StrType,
    VecType,
    u8,
)

# ###############
# Test Helpers
# ###############

I32 = IntType(signed=True, bits=32)
STR_REF = RefType(inner_type=StrType())


def _ref(t):
    return RefType(inner_type=t)


def _message(text: str = "Ab") -> MessageType:
    return MessageType(name=RustIdentWithPath.from_str(text))


def _enum(text: str = "Color", default: str = "RED") -> EnumType:
    return EnumType(name=RustIdentWithPath.from_str(text), default_variant=default)


def _enum_or_unknown(text: str = "Color", default: str = "RED") -> EnumOrUnknownType:
    return EnumOrUnknownType(name=RustIdentWithPath.from_str(text), default_variant=default)


# ###############
# Identity
# ###############


@pytest.mark.parametrize(
    "t",
    [
        I32,
        u8(),
        FloatType(bits=32),
        BoolType(),
        StringType(),
        STR_REF,
        SliceType(element_type=u8()),
        VecType(element_type=_message()),
        HashMapType(key_type=StringType(), value_type=I32),
        OptionType(inner_type=I32),
        SingularFieldType(inner_type=StringType()),
        SingularPtrFieldType(inner_type=_message()),
        RepeatedFieldType(element_type=_message()),
        BoxType(inner_type=_message()),
        _ref(BoxType(inner_type=_message())),
        _message(),
        _enum(),
        _enum_or_unknown(),
        OneofType(name=RustIdentWithPath.from_str("Choice")),
        BytesType(),
        CharsType(),
        GroupType(),
    ],
)
def test_identity_conversion_returns_value_unchanged(t) -> None:
    assert convert(t, t, "v") == "v"


# ###############
# Individual Rules
# ###############


class TestRules:
    def test_ref_to_boxed_message_becomes_ref_to_message(self) -> None:
        source = _ref(BoxType(inner_type=_message()))
        assert convert(source, _ref(_message()), "v") == "&**v"

    def test_deref(self) -> None:
        assert convert(_ref(I32), I32, "v") == "*v"

    def test_box(self) -> None:
        assert convert(_message(), BoxType(inner_type=_message()), "v") == "::std::boxed::Box::new(v)"

    def test_unbox(self) -> None:
        assert convert(BoxType(inner_type=_message()), _message(), "v") == "*v"

    def test_string_and_chars_borrow_as_str(self) -> None:
        assert convert(StringType(), STR_REF, "v") == "&v"
        assert convert(CharsType(), STR_REF, "v") == "&v"

    def test_string_ref_to_str_ref(self) -> None:
        assert convert(_ref(StringType()), STR_REF, "v") == "&v"

    def test_str_ref_to_owned_string(self) -> None:
        assert convert(STR_REF, StringType(), "v") == "v.to_owned()"

    def test_str_ref_to_chars(self) -> None:
        assert convert(STR_REF, CharsType(), "v") == (
            "<::protobuf::Chars as ::std::convert::From<_>>::from(v.to_owned())"
        )

    def test_slice_ref_to_vec(self) -> None:
        assert convert(_ref(SliceType(element_type=I32)), VecType(element_type=I32), "v") == "v.to_vec()"

    def test_slice_ref_to_vec_requires_same_element(self) -> None:
        assert try_convert(_ref(SliceType(element_type=I32)), VecType(element_type=u8()), "v") is None

    def test_byte_slice_ref_to_bytes(self) -> None:
        assert convert(_ref(SliceType(element_type=u8())), BytesType(), "v") == (
            "<::bytes::Bytes as ::std::convert::From<_>>::from(v.to_vec())"
        )

    def test_vec_and_bytes_borrow_as_slice(self) -> None:
        assert convert(VecType(element_type=I32), _ref(SliceType(element_type=I32)), "v") == "&v"
        assert convert(BytesType(), _ref(SliceType(element_type=u8())), "v") == "&v"

    def test_bytes_do_not_borrow_as_other_slices(self) -> None:
        assert try_convert(BytesType(), _ref(SliceType(element_type=I32)), "v") is None

    def test_vec_ref_to_slice_ref(self) -> None:
        assert convert(_ref(VecType(element_type=I32)), _ref(SliceType(element_type=I32)), "v") == "&v"

    def test_enums_to_wire_value(self) -> None:
        assert convert(_enum(), I32, "v") == "::protobuf::ProtobufEnum::value(&v)"
        assert convert(_enum_or_unknown(), I32, "v") == "::protobuf::ProtobufEnumOrUnknown::value(&v)"
        assert convert(_ref(_enum()), I32, "v") == "::protobuf::ProtobufEnum::value(v)"
        assert convert(_ref(_enum_or_unknown()), I32, "v") == "::protobuf::ProtobufEnumOrUnknown::value(v)"

    def test_enums_only_convert_to_signed_32_bit(self) -> None:
        assert try_convert(_enum(), IntType(signed=False, bits=32), "v") is None
        assert try_convert(_enum(), IntType(signed=True, bits=64), "v") is None

    def test_enum_or_unknown_to_enum(self) -> None:
        assert convert(_enum_or_unknown(), _enum(), "v") == (
            "::protobuf::ProtobufEnumOrUnknown::enum_value_or_default(&v)"
        )

    def test_enum_to_enum_or_unknown(self) -> None:
        assert convert(_enum(), _enum_or_unknown(), "v") == "::protobuf::ProtobufEnumOrUnknown::new(v)"

    def test_enum_conversions_require_same_enum(self) -> None:
        assert try_convert(_enum("A"), _enum_or_unknown("B"), "v") is None
        assert try_convert(_enum_or_unknown("A"), _enum("B"), "v") is None

    def test_enum_conversions_ignore_default_variant(self) -> None:
        assert convert(_enum("Color", "RED"), _enum_or_unknown("Color", "BLUE"), "v") == (
            "::protobuf::ProtobufEnumOrUnknown::new(v)"
        )


# ###############
# Enum Round Trip
# ###############


def test_known_enum_value_survives_round_trip() -> None:
    """Widening a known variant then narrowing it again keeps the variant itself.

    The narrowing call only falls back to the default variant for values that
    are unknown, so the default variant never appears in the expression.
    """
    widened = convert(_enum("Color", "RED"), _enum_or_unknown("Color", "RED"), "Color::GREEN")
    narrowed = convert(_enum_or_unknown("Color", "RED"), _enum("Color", "RED"), widened)

    assert narrowed == (
        "::protobuf::ProtobufEnumOrUnknown::enum_value_or_default("
        "&::protobuf::ProtobufEnumOrUnknown::new(Color::GREEN))"
    )
    assert "Color::GREEN" in narrowed
    assert "RED" not in narrowed


# ###############
# Fallback Through References
# ###############


class TestReferenceFallback:
    def test_ref_source_retried_as_referenced_type(self) -> None:
        # Only defined for the owned source.
        assert convert(_ref(_enum()), _enum_or_unknown(), "v") == "::protobuf::ProtobufEnumOrUnknown::new(v)"

    def test_fallback_applies_to_boxing(self) -> None:
        assert convert(_ref(_message()), BoxType(inner_type=_message()), "v") == "::std::boxed::Box::new(v)"

    def test_fallback_through_nested_references(self) -> None:
        assert convert(_ref(_ref(I32)), I32, "v") == "*v"

    def test_no_fallback_for_non_reference_source(self) -> None:
        assert try_convert(BoxType(inner_type=_enum()), _enum_or_unknown(), "v") is None


# ###############
# Ordering
# ###############


class TestOrdering:
    def test_rules_are_in_documented_order(self) -> None:
        assert CONVERSION_RULE_NAMES == (
            "identity",
            "ref-box-to-ref",
            "deref",
            "box",
            "unbox",
            "borrow-str",
            "string-ref-and-str-ref",
            "str-ref-to-chars",
            "slice-ref-to-vec",
            "slice-ref-to-bytes",
            "borrow-as-slice",
            "vec-ref-to-slice-ref",
            "enum-to-i32",
            "enum-or-unknown-to-enum",
            "enum-to-enum-or-unknown",
        )

    def test_first_matching_rule_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        """&Box<M> -> Box<M> matches both deref and the fallback; deref fires."""
        source = _ref(BoxType(inner_type=_message()))
        target = BoxType(inner_type=_message())
        with caplog.at_level(logging.DEBUG, logger="protorust.conversion"):
            assert convert(source, target, "v") == "*v"
        assert [r.message for r in caplog.records] == [f"{source} -> {target}: rule 'deref'"]

    def test_rules_precede_reference_fallback(self) -> None:
        """&Enum -> i32 is handled by its own rule, not by retrying with Enum."""
        assert convert(_ref(_enum()), I32, "v") == "::protobuf::ProtobufEnum::value(v)"
        assert convert(_enum(), I32, "v") == "::protobuf::ProtobufEnum::value(&v)"

    def test_each_rule_has_a_name(self) -> None:
        assert len(CONVERSION_RULES) == len(set(CONVERSION_RULE_NAMES)) == 15


# ###############
# Failures
# ###############


class TestNoConversion:
    @pytest.mark.parametrize(
        ("source", "target"),
        [
            (BoolType(), StringType()),
            (I32, IntType(signed=True, bits=64)),
            (StringType(), BytesType()),
            (_message("A"), _message("B")),
            (OptionType(inner_type=I32), I32),
            (GroupType(), _message()),
        ],
    )
    def test_missing_conversion_raises_naming_both_types(self, source, target) -> None:
        with pytest.raises(NoConversionPathError) as exc_info:
            convert(source, target, "v")
        assert exc_info.value.source == source
        assert exc_info.value.target == target
        assert str(source) in str(exc_info.value)
        assert str(target) in str(exc_info.value)
