# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Types shipped with the protobuf runtime crate instead of being generated.

Two families exist: the well-known types of package ``google.protobuf``
(``::protobuf::well_known_types``) and the types of ``descriptor.proto``, the
schema that describes schemas (``::protobuf::descriptor``).
"""

from __future__ import annotations

import re

from protorust.model.descriptors import FileDescriptor
from protorust.model.symbols import RustIdentWithPath, RustPath

# ###############
# Public Interface
# ###############

WELL_KNOWN_TYPES_PACKAGE = "google.protobuf"

WELL_KNOWN_TYPES_MOD = RustPath(absolute=True, segments=("protobuf", "well_known_types"))

DESCRIPTOR_MOD = RustPath(absolute=True, segments=("protobuf", "descriptor"))

DESCRIPTOR_FILE_BASENAME = "descriptor.proto"

WELL_KNOWN_TYPE_NAMES = frozenset(
    {
        "Any",
        "Api",
        "BoolValue",
        "BytesValue",
        "DoubleValue",
        "Duration",
        "Empty",
        "Enum",
        "EnumValue",
        "Field",
        "FieldMask",
        "FloatValue",
        "Int32Value",
        "Int64Value",
        "ListValue",
        "Method",
        "Mixin",
        "NullValue",
        "Option",
        "SourceContext",
        "StringValue",
        "Struct",
        "Syntax",
        "Timestamp",
        "Type",
        "UInt32Value",
        "UInt64Value",
        "Value",
    }
)


def is_well_known_type_full(name: str) -> str | None:
    """Return the runtime name of well-known type *name*, or None.

    Args:
        name: Absolute schema name, e.g. ``.google.protobuf.Timestamp``.

    Only top-level types match: the name must be exactly the well-known
    package followed by one identifier.
    """
    package, dot, simple = name.rpartition(".")
    if not dot or package != f".{WELL_KNOWN_TYPES_PACKAGE}":
        return None
    return simple if simple in WELL_KNOWN_TYPE_NAMES else None


def well_known_type_rust_name(simple_name: str) -> RustIdentWithPath:
    return WELL_KNOWN_TYPES_MOD.with_ident(simple_name)


def file_last_component(path: str) -> str:
    """Return the last component of *path*, splitting on both ``/`` and ``\\``."""
    return re.split(r"[/\\]", path)[-1]


def is_descriptor_proto(file: FileDescriptor) -> bool:
    """Return True if *file* is ``descriptor.proto`` of package ``google.protobuf``.

    The directory part of the file name is ignored.
    """
    return file.package == WELL_KNOWN_TYPES_PACKAGE and file_last_component(file.name) == DESCRIPTOR_FILE_BASENAME
