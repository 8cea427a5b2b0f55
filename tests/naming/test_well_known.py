# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the well-known type and descriptor.proto tables."""

import pytest

from protorust.model import FileDescriptor
from protorust.naming.well_known import (
    WELL_KNOWN_TYPE_NAMES,
    file_last_component,
    is_descriptor_proto,
    is_well_known_type_full,
    well_known_type_rust_name,
)


class TestWellKnownTypes:
    @pytest.mark.parametrize("name", ["Any", "Timestamp", "Duration", "Struct", "UInt64Value", "Empty"])
    def test_top_level_well_known_types_match(self, name: str) -> None:
        assert is_well_known_type_full(f".google.protobuf.{name}") == name

    @pytest.mark.parametrize(
        "name",
        [
            ".google.protobuf.NotAType",
            ".google.protobuf.FileDescriptorProto",
            ".other.Any",
            ".google.protobuf",
            "Any",
            ".google.protobuf.Field.Cardinality",
        ],
    )
    def test_other_names_do_not_match(self, name: str) -> None:
        assert is_well_known_type_full(name) is None

    def test_table_is_immutable(self) -> None:
        assert isinstance(WELL_KNOWN_TYPE_NAMES, frozenset)

    def test_every_table_entry_resolves(self) -> None:
        for name in WELL_KNOWN_TYPE_NAMES:
            assert is_well_known_type_full(f".google.protobuf.{name}") == name

    def test_rust_name(self) -> None:
        assert str(well_known_type_rust_name("Timestamp")) == "::protobuf::well_known_types::Timestamp"


class TestDescriptorProto:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("ab.proto", "ab.proto"),
            ("xx/ab.proto", "ab.proto"),
            ("xx\\ab.proto", "ab.proto"),
            ("yy\\xx\\ab.proto", "ab.proto"),
            ("yy/xx\\ab.proto", "ab.proto"),
        ],
    )
    def test_file_last_component(self, path: str, expected: str) -> None:
        assert file_last_component(path) == expected

    @pytest.mark.parametrize("name", ["descriptor.proto", "google/protobuf/descriptor.proto", "x\\descriptor.proto"])
    def test_descriptor_proto_ignores_directory(self, name: str) -> None:
        assert is_descriptor_proto(FileDescriptor(name=name, package="google.protobuf"))

    def test_descriptor_proto_requires_package(self) -> None:
        assert not is_descriptor_proto(FileDescriptor(name="google/protobuf/descriptor.proto", package="other"))

    def test_descriptor_proto_requires_basename(self) -> None:
        assert not is_descriptor_proto(FileDescriptor(name="google/protobuf/any.proto", package="google.protobuf"))
        assert not is_descriptor_proto(FileDescriptor(name="my_descriptor.proto", package="google.protobuf"))
