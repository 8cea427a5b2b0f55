# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rust identifiers and the shortest path between two modules of a module tree."""

from __future__ import annotations

import re

from protorust.model.symbols import RustIdentWithPath, RustPath

# ###############
# Public Interface
# ###############

# Rust keywords that must be written as raw identifiers (``r#type``).
RUST_KEYWORDS = frozenset(
    {
        "abstract", "as", "async", "await", "become", "box", "break", "const", "continue",
        "do", "dyn", "else", "enum", "extern", "false", "final", "fn", "for", "if", "impl",
        "in", "let", "loop", "macro", "match", "mod", "move", "mut", "override", "priv",
        "pub", "ref", "return", "static", "struct", "trait", "true", "try", "type", "typeof",
        "unsafe", "unsized", "use", "virtual", "where", "while", "yield",
    }
)  # fmt: skip

# Keywords that cannot be raw identifiers; they get a trailing underscore instead.
_NON_RAW_KEYWORDS = frozenset({"crate", "self", "Self", "super"})


def shortest_path(source: RustPath, dest: RustPath) -> RustPath:
    """Return the shortest path from module *source* to module *dest*.

    An absolute *dest* is returned unchanged. Otherwise the common leading
    segments are dropped, every remaining segment of *source* becomes one
    ``super`` step, and the remaining segments of *dest* follow.

    Args:
        source: Module of the reference site. Must be relative.
        dest: Module declaring the referenced symbol.

    Raises:
        ValueError: If *dest* is relative and *source* is absolute.
    """
    if dest.absolute:
        return dest

    if source.absolute:
        raise ValueError(f"source path must be relative: {source}")

    while not source.is_empty() and source.first() == dest.first():
        source = source.remove_first()
        dest = dest.remove_first()
    return source.to_reverse().append(dest)


def make_path(source: RustPath, dest: RustIdentWithPath) -> RustIdentWithPath:
    """Return *dest* as seen from module *source*."""
    return shortest_path(source, dest.path).with_ident(dest.ident)


def escape_ident(name: str) -> str:
    """Return *name* usable as a Rust identifier."""
    if name in _NON_RAW_KEYWORDS:
        return f"{name}_"
    if name in RUST_KEYWORDS:
        return f"r#{name}"
    return name


def camel_to_snake(name: str) -> str:
    """``FooBar`` -> ``foo_bar``, ``HTTPRequest`` -> ``http_request``."""
    words = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    words = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", words)
    return words.lower()


def capitalize(text: str) -> str:
    """Upper-case the first character only: ``sfixed32`` -> ``Sfixed32``."""
    return text[:1].upper() + text[1:]


def message_mod_name(message_name: str) -> str:
    """Name of the module holding the nested types of a message."""
    return escape_ident(camel_to_snake(message_name))


def proto_path_to_rust_mod(path: str) -> str:
    """Name of the Rust module generated for a ``.proto`` file.

    ``foo/bar-baz.proto`` -> ``bar_baz``.
    """
    base = re.split(r"[/\\]", path)[-1]
    if base.endswith(".proto"):
        base = base[: -len(".proto")]
    ident = re.sub(r"[^0-9A-Za-z_]", "_", base)
    if not ident or ident[0].isdigit():
        ident = f"_{ident}"
    return escape_ident(ident)
