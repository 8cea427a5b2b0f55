# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy for protorust.

None of these signal a problem in a user's schema: malformed schemas are
rejected by the descriptor loader before type mapping runs. They report an
internal-consistency violation in the code generator that issued the query.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from protorust.model.types import format_type

if TYPE_CHECKING:
    from protorust.model.descriptors import FieldKind
    from protorust.model.types import RustType

# ###############
# Public Interface
# ###############


class ProtoRustError(Exception):
    """Base exception for all protorust errors."""


class UnrepresentableOperationError(ProtoRustError):
    """A type query was issued for a type outside the query's domain.

    Attributes:
        operation: Name of the failed query (``"default value"``, ``"clear"``...).
        rust_type: The type the query was issued for.
    """

    def __init__(self, operation: str, rust_type: RustType) -> None:
        self.operation = operation
        self.rust_type = rust_type
        super().__init__(f"cannot compute {operation} for type: {format_type(rust_type)}")


class NoConversionPathError(ProtoRustError):
    """No conversion rule turns a value of *source* into a value of *target*."""

    def __init__(self, source: RustType, target: RustType) -> None:
        self.source = source
        self.target = target
        super().__init__(f"failed to convert {format_type(source)} into {format_type(target)}")


class UnknownPrimitiveKindError(ProtoRustError):
    """A non-primitive field kind (message, enum, group) was mapped as a primitive."""

    def __init__(self, kind: FieldKind) -> None:
        self.kind = kind
        super().__init__(f"there is no rust name for {kind.name}")


class ScopeLookupError(ProtoRustError):
    """An absolute type name does not resolve to a declared message or enum."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"message or enum not found: {name}")
