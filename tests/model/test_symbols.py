# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for Rust paths and identifiers with paths."""

import pytest

from protorust.model import RustIdentWithPath, RustPath


class TestRustPath:
    def test_relative_and_absolute_rendering(self) -> None:
        assert str(RustPath.relative("a", "b")) == "a::b"
        assert str(RustPath(absolute=True, segments=("protobuf", "descriptor"))) == "::protobuf::descriptor"
        assert str(RustPath()) == ""

    def test_first_and_remove_first(self) -> None:
        path = RustPath.relative("a", "b")
        assert path.first() == "a"
        assert path.remove_first() == RustPath.relative("b")
        assert RustPath().first() is None

    def test_to_reverse_replaces_every_segment_with_super(self) -> None:
        assert RustPath.relative("a", "b", "c").to_reverse() == RustPath.relative("super", "super", "super")
        assert RustPath().to_reverse().is_empty()

    def test_append(self) -> None:
        assert RustPath.relative("a").append(RustPath.relative("b", "c")) == RustPath.relative("a", "b", "c")

    def test_append_absolute_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="absolute"):
            RustPath.relative("a").append(RustPath(absolute=True, segments=("b",)))

    def test_append_with_ident(self) -> None:
        name = RustIdentWithPath.from_str("inner::Msg")
        assert str(RustPath.relative("super").append_with_ident(name)) == "super::inner::Msg"


class TestRustIdentWithPath:
    @pytest.mark.parametrize("text", ["Msg", "a::Msg", "::protobuf::well_known_types::Any", "super::super::x::Y"])
    def test_from_str_renders_back(self, text: str) -> None:
        assert str(RustIdentWithPath.from_str(text)) == text

    def test_from_str_splits_path_and_ident(self) -> None:
        name = RustIdentWithPath.from_str("::protobuf::descriptor::FieldDescriptorProto")
        assert name.path == RustPath(absolute=True, segments=("protobuf", "descriptor"))
        assert name.ident == "FieldDescriptorProto"

    @pytest.mark.parametrize("text", ["", "a::", "::"])
    def test_from_str_rejects_malformed_text(self, text: str) -> None:
        with pytest.raises(ValueError):
            RustIdentWithPath.from_str(text)
