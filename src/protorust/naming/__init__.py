# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Symbol resolution: module paths, well-known types, scopes and cross-file names."""

from protorust.naming.paths import (
    camel_to_snake,
    capitalize,
    escape_ident,
    make_path,
    proto_path_to_rust_mod,
    shortest_path,
)
from protorust.naming.relative import message_or_enum_to_rust_relative, type_name_to_rust_relative
from protorust.naming.scope import MessageOrEnumWithScope, RootScope
from protorust.naming.well_known import (
    WELL_KNOWN_TYPE_NAMES,
    file_last_component,
    is_descriptor_proto,
    is_well_known_type_full,
)

__all__ = [
    "shortest_path",
    "make_path",
    "escape_ident",
    "camel_to_snake",
    "capitalize",
    "proto_path_to_rust_mod",
    "WELL_KNOWN_TYPE_NAMES",
    "is_well_known_type_full",
    "file_last_component",
    "is_descriptor_proto",
    "MessageOrEnumWithScope",
    "RootScope",
    "message_or_enum_to_rust_relative",
    "type_name_to_rust_relative",
]
