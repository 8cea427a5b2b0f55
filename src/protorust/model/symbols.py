# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Qualified Rust symbols: module paths, identifiers with paths, compilation context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############

SUPER_IDENT = "super"


class RustPath(BaseModel):
    """An ordered sequence of module segments, absolute (``::a::b``) or relative (``a::b``)."""

    model_config = ConfigDict(frozen=True)

    absolute: bool = False
    segments: tuple[str, ...] = ()

    @classmethod
    def relative(cls, *segments: str) -> RustPath:
        return cls(absolute=False, segments=segments)

    def is_empty(self) -> bool:
        return not self.segments

    def first(self) -> str | None:
        return self.segments[0] if self.segments else None

    def remove_first(self) -> RustPath:
        """Return the path without its first segment."""
        return RustPath(absolute=self.absolute, segments=self.segments[1:])

    def to_reverse(self) -> RustPath:
        """Return the path leading back from this module to its origin: one ``super`` per segment."""
        return RustPath(absolute=False, segments=(SUPER_IDENT,) * len(self.segments))

    def append(self, other: RustPath) -> RustPath:
        if other.absolute:
            raise ValueError(f"cannot append absolute path {other} to {self}")
        return RustPath(absolute=self.absolute, segments=self.segments + other.segments)

    def append_ident(self, ident: str) -> RustPath:
        return RustPath(absolute=self.absolute, segments=self.segments + (ident,))

    def with_ident(self, ident: str) -> RustIdentWithPath:
        return RustIdentWithPath(path=self, ident=ident)

    def append_with_ident(self, other: RustIdentWithPath) -> RustIdentWithPath:
        return self.append(other.path).with_ident(other.ident)

    def __str__(self) -> str:
        joined = "::".join(self.segments)
        return f"::{joined}" if self.absolute else joined


class RustIdentWithPath(BaseModel):
    """An identifier reachable via a module path, e.g. ``super::foo::Bar``."""

    model_config = ConfigDict(frozen=True)

    path: RustPath = RustPath()
    ident: str

    @classmethod
    def from_str(cls, text: str) -> RustIdentWithPath:
        """Parse ``::a::b::C`` or ``a::C`` or ``C``."""
        absolute = text.startswith("::")
        parts = text[2:].split("::") if absolute else text.split("::")
        if not parts or not parts[-1]:
            raise ValueError(f"not a rust path: {text!r}")
        return cls(path=RustPath(absolute=absolute, segments=tuple(parts[:-1])), ident=parts[-1])

    def __str__(self) -> str:
        if self.path.is_empty():
            return f"::{self.ident}" if self.path.absolute else self.ident
        return f"{self.path}::{self.ident}"


class FileAndMod(BaseModel):
    """The compilation context of a type reference.

    Attributes:
        file: Name of the ``.proto`` file being generated.
        relative_mod: Module of the reference site, relative to the file's module.
    """

    model_config = ConfigDict(frozen=True)

    file: str
    relative_mod: RustPath = RustPath()
