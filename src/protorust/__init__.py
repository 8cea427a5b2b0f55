# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rust type mapping and symbol resolution for a Protocol Buffers code generator."""

from protorust.errors import (
    NoConversionPathError,
    ProtoRustError,
    ScopeLookupError,
    UnknownPrimitiveKindError,
    UnrepresentableOperationError,
)

__all__ = [
    "ProtoRustError",
    "UnrepresentableOperationError",
    "NoConversionPathError",
    "UnknownPrimitiveKindError",
    "ScopeLookupError",
]
