# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Qualified Rust names for messages and enums referenced from generated code.

Every generated file is a module, and all file modules are siblings under a
common parent. A type from another file is therefore reached by leaving the
current nested module (one ``super`` per level), leaving the file module
(one more ``super``), then descending into the other file's module.
"""

from __future__ import annotations

import logging

from protorust.model.symbols import SUPER_IDENT, FileAndMod, RustIdentWithPath
from protorust.naming.paths import make_path
from protorust.naming.scope import MessageOrEnumWithScope, RootScope
from protorust.naming.well_known import (
    DESCRIPTOR_MOD,
    is_descriptor_proto,
    is_well_known_type_full,
    well_known_type_rust_name,
)

log = logging.getLogger("protorust.naming")

# ###############
# Public Interface
# ###############


def message_or_enum_to_rust_relative(
    message_or_enum: MessageOrEnumWithScope,
    current: FileAndMod,
) -> RustIdentWithPath:
    """Return the name under which *message_or_enum* is referenced from *current*.

    The first matching rule wins:

    1. Declared in the file being generated: shortest path from the current
       module to the type.
    2. A well-known type: its fixed name in the runtime crate.
    3. Declared in ``descriptor.proto``: its fixed name in the runtime crate.
    4. Declared in another generated file: relative path through the common
       parent of the file modules.

    Args:
        message_or_enum: The referenced type, as found in the root scope.
        current: File and module of the reference site.
    """
    name_absolute = message_or_enum.name_absolute()

    if message_or_enum.file.name == current.file:
        result = make_path(current.relative_mod, message_or_enum.rust_name_to_file())
        log.debug("%s: same file, resolved to %s", name_absolute, result)
        return result

    well_known = is_well_known_type_full(name_absolute)
    if well_known is not None:
        result = well_known_type_rust_name(well_known)
        log.debug("%s: well-known type, resolved to %s", name_absolute, result)
        return result

    if is_descriptor_proto(message_or_enum.file):
        result = DESCRIPTOR_MOD.append_with_ident(message_or_enum.rust_name_to_file())
        log.debug("%s: descriptor type, resolved to %s", name_absolute, result)
        return result

    result = (
        current.relative_mod.to_reverse()
        .append_ident(SUPER_IDENT)
        .append_with_ident(message_or_enum.rust_name_with_file())
    )
    log.debug("%s: declared in %s, resolved to %s", name_absolute, message_or_enum.file.name, result)
    return result


def type_name_to_rust_relative(
    type_name: str,
    current: FileAndMod,
    root_scope: RootScope,
) -> RustIdentWithPath:
    """Look up absolute schema name *type_name* and return its name as seen from *current*.

    Raises:
        ValueError: If *type_name* is empty.
        ScopeLookupError: If *type_name* is not declared in *root_scope*.
    """
    if not type_name:
        raise ValueError("type name must not be empty")
    message_or_enum = root_scope.find_message_or_enum(type_name)
    return message_or_enum_to_rust_relative(message_or_enum, current)
