"""
Flatten a nested design-token tree into dotted keys.

Example: {"colors": {"primary": {"500": "#007cff"}}}
becomes: [FlatEntry("colors.primary.500", "#007cff")]

Children are visited depth-first in mapping order, so the output order
follows the source definition. Only mappings are descended into; lists,
None and scalars are leaves. Empty mappings contribute nothing. Keys
must be strings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Iterator, NamedTuple

from token_errors import InvalidInputError

SEPARATOR = "."


class FlatEntry(NamedTuple):
    path: str
    value: Any


class Syntax(NamedTuple):
    """Naming rule for one output syntax."""

    name: str
    prefix: str
    separator: str


STYLESHEET = Syntax("stylesheet", "--altrex-", "-")
PREPROCESSOR = Syntax("preprocessor", "$altrex-", "-")


def _walk(node: Mapping, prefix: str) -> Iterator[FlatEntry]:
    for key, value in node.items():
        # YAML reads `4:` as int and `on:` as bool; only strings name a token.
        if not isinstance(key, str):
            where = prefix or "<root>"
            raise InvalidInputError(
                f"token key {key!r} under '{where}' must be a string, got {type(key).__name__}"
            )
        path = f"{prefix}{SEPARATOR}{key}" if prefix else key
        if isinstance(value, Mapping):
            yield from _walk(value, path)
        else:
            yield FlatEntry(path, value)


def flatten(tree: Any) -> list[FlatEntry]:
    if not isinstance(tree, Mapping):
        raise InvalidInputError(
            f"token tree root must be a mapping, got {type(tree).__name__}"
        )
    return list(_walk(tree, ""))


def flatten_map(tree: Any) -> dict[str, Any]:
    """Flattened tree as an insertion-ordered dict of dotted key -> value."""
    return {entry.path: entry.value for entry in flatten(tree)}


def to_identifier(path: str, syntax: Syntax) -> str:
    """'colors.primary.500' -> '--altrex-colors-primary-500' for STYLESHEET."""
    return syntax.prefix + path.replace(SEPARATOR, syntax.separator)


def identifier_map(entries: Iterable[FlatEntry], syntax: Syntax) -> dict[str, str]:
    return {entry.path: to_identifier(entry.path, syntax) for entry in entries}
