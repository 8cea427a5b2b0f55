# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry of every message and enum declared in a set of files.

Nested types are generated inside one module per enclosing message, so
``.pkg.Outer.Inner`` declared in ``pkg/outer.proto`` becomes
``outer::outer::Inner``: file module, then ``outer`` for the message
``Outer``, then the type itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from protorust.errors import ScopeLookupError
from protorust.model.descriptors import EnumDescriptor, FileDescriptor, MessageDescriptor
from protorust.model.symbols import RustIdentWithPath, RustPath
from protorust.naming.paths import escape_ident, message_mod_name, proto_path_to_rust_mod

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class MessageOrEnumWithScope:
    """A message or enum together with the file and messages enclosing it.

    Attributes:
        file: The declaring file.
        enclosing: Names of the enclosing messages, outermost first.
        descriptor: The message or enum definition itself.
    """

    file: FileDescriptor
    enclosing: tuple[str, ...]
    descriptor: MessageDescriptor | EnumDescriptor

    @property
    def is_enum(self) -> bool:
        return isinstance(self.descriptor, EnumDescriptor)

    def name_absolute(self) -> str:
        """Absolute schema name: ``.pkg.Outer.Inner``."""
        parts = [self.file.package] if self.file.package else []
        parts.extend(self.enclosing)
        parts.append(self.descriptor.name)
        return "." + ".".join(parts)

    def rust_name_to_file(self) -> RustIdentWithPath:
        """Rust name relative to the module of the declaring file."""
        mods = tuple(message_mod_name(name) for name in self.enclosing)
        return RustIdentWithPath(path=RustPath(segments=mods), ident=escape_ident(self.descriptor.name))

    def rust_name_with_file(self) -> RustIdentWithPath:
        """Rust name prefixed with the module of the declaring file."""
        file_mod = RustPath(segments=(proto_path_to_rust_mod(self.file.name),))
        return file_mod.append_with_ident(self.rust_name_to_file())


class RootScope:
    """Index of the messages and enums of all files of a code generation request."""

    def __init__(self, files: list[FileDescriptor]) -> None:
        self._files = list(files)
        self._by_name: dict[str, MessageOrEnumWithScope] = {}
        for file in self._files:
            for enum in file.enum_types:
                self._add(MessageOrEnumWithScope(file, (), enum))
            for message in file.message_types:
                self._add_message(file, (), message)

    @property
    def files(self) -> list[FileDescriptor]:
        return list(self._files)

    def find_message_or_enum(self, name: str) -> MessageOrEnumWithScope:
        """Return the message or enum with absolute schema name *name*.

        Raises:
            ScopeLookupError: If no file declares *name*.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise ScopeLookupError(name) from None

    # ################
    # Implementation
    # ################

    def _add(self, entity: MessageOrEnumWithScope) -> None:
        self._by_name[entity.name_absolute()] = entity

    def _add_message(self, file: FileDescriptor, enclosing: tuple[str, ...], message: MessageDescriptor) -> None:
        self._add(MessageOrEnumWithScope(file, enclosing, message))
        inner = enclosing + (message.name,)
        for enum in message.enum_types:
            self._add(MessageOrEnumWithScope(file, inner, enum))
        for nested in message.nested_types:
            self._add_message(file, inner, nested)
