# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-only view of parsed schema descriptors (files, messages, enums, fields).

Only the parts consumed by type mapping and symbol resolution are modelled.
Parsing ``.proto`` sources into these models is the descriptor loader's job.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class FieldKind(Enum):
    """Wire kind of a field, numbered as in ``google/protobuf/descriptor.proto``."""

    TYPE_DOUBLE = 1
    TYPE_FLOAT = 2
    TYPE_INT64 = 3
    TYPE_UINT64 = 4
    TYPE_INT32 = 5
    TYPE_FIXED64 = 6
    TYPE_FIXED32 = 7
    TYPE_BOOL = 8
    TYPE_STRING = 9
    TYPE_GROUP = 10
    TYPE_MESSAGE = 11
    TYPE_BYTES = 12
    TYPE_UINT32 = 13
    TYPE_ENUM = 14
    TYPE_SFIXED32 = 15
    TYPE_SFIXED64 = 16
    TYPE_SINT32 = 17
    TYPE_SINT64 = 18


class FieldDescriptor(BaseModel):
    """A message field.

    Attributes:
        name: Field name as declared in the schema.
        number: Field number on the wire.
        kind: Wire kind of the field.
        type_name: Absolute schema name (``.pkg.Msg``) for message, enum and
            group fields; ``None`` for primitive kinds.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    number: int
    kind: FieldKind
    type_name: str | None = None


class EnumDescriptor(BaseModel):
    """An enum definition; the first declared value is the default."""

    model_config = ConfigDict(frozen=True)

    name: str
    values: tuple[str, ...] = ()


class MessageDescriptor(BaseModel):
    """A message definition with its nested messages and enums."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[FieldDescriptor, ...] = ()
    nested_types: tuple[MessageDescriptor, ...] = ()
    enum_types: tuple[EnumDescriptor, ...] = ()


class FileDescriptor(BaseModel):
    """A compilation unit: one ``.proto`` file.

    Attributes:
        name: File name relative to the include root (``google/protobuf/any.proto``).
        package: Schema package, empty when the file declares none.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    package: str = ""
    message_types: tuple[MessageDescriptor, ...] = ()
    enum_types: tuple[EnumDescriptor, ...] = ()


# Resolve forward references in self-referential models.
MessageDescriptor.model_rebuild()
