"""
Render flattened design tokens into the generated artifacts.

Every artifact starts with HEADER. Token order always follows the
flattening order, so the same definition always renders byte-identical
output.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any, Iterable, NamedTuple

from token_errors import SerializationError
from token_flatten import PREPROCESSOR, STYLESHEET, FlatEntry, flatten, identifier_map, to_identifier

HEADER = (
    "/**\n"
    " * Altrex Design System Tokens\n"
    " * Generated automatically - do not edit\n"
    " */\n\n"
)

CSS_NAME = "tokens.css"
MODULE_NAME = "tokens.js"
STYLUS_NAME = "tokens.styl"
DECLARATION_NAME = "tokens.d.ts"
REEXPORT_NAME = "index.js"

# Hand-written Stylus definitions appended after the generated variables.
STYLUS_EXTRAS = """\
// Component-specific tokens
$altrex-border-radius-button-default = $altrex-borderRadius-default
$altrex-border-radius-button-pill = $altrex-borderRadius-full

// Typography
$altrex-font-family-body = -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif
$altrex-font-size-body-1 = $altrex-fontSize-base
$altrex-font-size-body-2 = $altrex-fontSize-sm
$altrex-font-size-caption = $altrex-fontSize-xs

// Transitions
$altrex-transition-default = 0.2s ease-in-out

// Icon size mixins
altrex-icon-s()
  height: 16px
  width: 16px

altrex-icon-m()
  height: 24px
  width: 24px

altrex-icon-l()
  height: 32px
  width: 32px

altrex-icon-xl()
  height: 48px
  width: 48px

altrex-icon-xxl()
  height: 64px
  width: 64px

// Mobile-first breakpoint mixin
// Usage: +above('md') { /* styles */ }
above(breakpoint)
  @media (min-width: lookup('$altrex-breakpoints-' + breakpoint))
    {block}

// Touch-first interaction detection
// Usage: +touch-device() { /* styles */ }
touch-device()
  @media (hover: none) and (pointer: coarse)
    {block}

// Touch target sizing (WCAG 2.1 Level AAA)
// Usage: touch-target() or touch-target('comfortable')
touch-target(size = 'minimum')
  min-width: lookup('$altrex-touchTarget-' + size)
  min-height: lookup('$altrex-touchTarget-' + size)
  display: inline-flex
  align-items: center
  justify-content: center

// Container with mobile padding
// Usage: container-width() or container-width($altrex-breakpoints-lg)
container-width(max-width = '100%')
  width: 100%
  max-width: max-width
  margin-left: auto
  margin-right: auto
  padding-left: $altrex-spacing-4
  padding-right: $altrex-spacing-4

  +above('md')
    padding-left: $altrex-spacing-6
    padding-right: $altrex-spacing-6

// Stack to row pattern
// Usage: stack-to-row() or stack-to-row('lg')
stack-to-row(breakpoint = 'md')
  display: flex
  flex-direction: column
  gap: $altrex-spacing-4

  +above(breakpoint)
    flex-direction: row
"""

# Kept by hand; must list the top-level groups of assets/design/tokens.json.
KNOWN_GROUPS = [
    ("colors", "Record<string, Record<string, string>>"),
    ("spacing", "Record<string, string>"),
    ("fontSize", "Record<string, string>"),
    ("fontWeight", "Record<string, string>"),
    ("lineHeight", "Record<string, string>"),
    ("borderRadius", "Record<string, string>"),
    ("shadow", "Record<string, string>"),
    ("breakpoints", "Record<string, string>"),
    ("touchTarget", "Record<string, string>"),
    ("fluidSpacing", "Record<string, string>"),
    ("fluidTypography", "Record<string, string>"),
]


class GeneratedArtifact(NamedTuple):
    name: str
    content: str


def _format_scalar(path: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(path, value, "non-finite number")
        # Match JavaScript number formatting: 16.0 -> "16".
        return str(int(value)) if value.is_integer() else repr(value)
    if value is None:
        raise SerializationError(path, value, "null has no textual form")
    raise SerializationError(path, value, f"unsupported type {type(value).__name__}")


def format_value(path: str, value: Any) -> str:
    """Render a leaf value the way it appears in CSS and Stylus output."""
    if isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, (list, tuple, Mapping)):
                raise SerializationError(path, value, "nested structure in list value")
        return ",".join(_format_scalar(path, item) for item in value)
    if isinstance(value, Mapping):
        raise SerializationError(path, value, "mapping in leaf position")
    return _format_scalar(path, value)


def _js_numbers(obj: Any) -> Any:
    """Copy of obj with integral floats as ints, so 16.0 dumps as 16."""
    if isinstance(obj, float) and math.isfinite(obj) and obj.is_integer():
        return int(obj)
    if isinstance(obj, Mapping):
        return {key: _js_numbers(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_js_numbers(item) for item in obj]
    return obj


def _dump_json(obj: Any) -> str:
    return json.dumps(_js_numbers(obj), indent=2, ensure_ascii=False, allow_nan=False)


def _json_export(name: str, obj: Any, entries: Iterable[FlatEntry]) -> str:
    try:
        return f"export const {name} = {_dump_json(obj)};\n"
    except (TypeError, ValueError) as exc:
        # Point at the offending leaf instead of the whole export.
        for entry in entries:
            try:
                _dump_json(entry.value)
            except (TypeError, ValueError) as leaf_exc:
                raise SerializationError(entry.path, entry.value, str(leaf_exc)) from leaf_exc
        raise SerializationError(name, type(obj).__name__, str(exc)) from exc


def render_stylesheet(entries: list[FlatEntry]) -> str:
    lines = [HEADER, ":root {\n"]
    for entry in entries:
        lines.append(f"  {to_identifier(entry.path, STYLESHEET)}: {format_value(entry.path, entry.value)};\n")
    lines.append("}\n")
    return "".join(lines)


def render_module(tree: Mapping, entries: list[FlatEntry]) -> str:
    flat_tokens = {entry.path: entry.value for entry in entries}
    css_var_names = identifier_map(entries, STYLESHEET)
    parts = [
        HEADER,
        _json_export("tokens", tree, entries),
        "\n",
        _json_export("flatTokens", flat_tokens, entries),
        "\n",
        _json_export("cssVarNames", css_var_names, entries),
    ]
    return "".join(parts)


def render_preprocessor(entries: list[FlatEntry]) -> str:
    lines = [HEADER]
    for entry in entries:
        lines.append(f"{to_identifier(entry.path, PREPROCESSOR)} = {format_value(entry.path, entry.value)}\n")
    lines.append("\n")
    lines.append(STYLUS_EXTRAS)
    return "".join(lines)


def render_declaration() -> str:
    lines = [HEADER, "export const tokens: {\n"]
    for group, shape in KNOWN_GROUPS:
        lines.append(f"  {group}: {shape};\n")
    lines.append("};\n\n")
    lines.append("export const flatTokens: Record<string, string>;\n")
    lines.append("export const cssVarNames: Record<string, string>;\n")
    return "".join(lines)


def render_reexport() -> str:
    return f"{HEADER}export * from './{MODULE_NAME}';\n"


def render_all(tree: Any) -> list[GeneratedArtifact]:
    """Render every artifact in the order they are handed to the sink.

    Raises InvalidInputError or SerializationError before anything is
    returned, so a failing tree never yields a partial artifact set.
    """
    entries = flatten(tree)
    return [
        GeneratedArtifact(CSS_NAME, render_stylesheet(entries)),
        GeneratedArtifact(MODULE_NAME, render_module(tree, entries)),
        GeneratedArtifact(STYLUS_NAME, render_preprocessor(entries)),
        GeneratedArtifact(DECLARATION_NAME, render_declaration()),
        GeneratedArtifact(REEXPORT_NAME, render_reexport()),
    ]
