"""
Template Resolver

Prompt bodies use a small placeholder syntax:

- ``{{name|default}}``: the argument value, or ``default`` when it is absent
- ``{{name}}``: the argument value, or the placeholder itself left verbatim
- ``{{#if name}} ... {{/if}}``: the enclosed text only when the argument is set

An argument counts as set when it is present and not the empty string.
Blocks do not nest: a ``{{#if}}`` inside an open block is plain text and
the first ``{{/if}}`` closes the block. Any other ``{{...}}`` text passes
through unchanged. Substituted values are never re-scanned.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

_PLACEHOLDER_RE = re.compile(r"\{\{([^{}]*)\}\}")
_VARIABLE_RE = re.compile(r"([A-Za-z0-9_]+)")
_DEFAULTED_RE = re.compile(r"([A-Za-z0-9_]+)\|(.*)", re.DOTALL)
_IF_OPEN_RE = re.compile(r"#if\s+([A-Za-z0-9_]+)")
_IF_CLOSE = "/if"


class PlaceholderForm(Enum):
    VARIABLE = "variable"
    DEFAULTED = "defaulted"
    IF_OPEN = "if_open"
    IF_CLOSE = "if_close"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    form: PlaceholderForm
    raw: str
    name: Optional[str] = None
    default: Optional[str] = None


Token = Union[Literal, Placeholder]


def _classify(inner: str, raw: str) -> Token:
    match = _VARIABLE_RE.fullmatch(inner)
    if match:
        return Placeholder(PlaceholderForm.VARIABLE, raw, name=match.group(1))
    match = _DEFAULTED_RE.fullmatch(inner)
    if match:
        return Placeholder(PlaceholderForm.DEFAULTED, raw, name=match.group(1), default=match.group(2))
    match = _IF_OPEN_RE.fullmatch(inner)
    if match:
        return Placeholder(PlaceholderForm.IF_OPEN, raw, name=match.group(1))
    if inner == _IF_CLOSE:
        return Placeholder(PlaceholderForm.IF_CLOSE, raw)
    return Literal(raw)


def tokenize(template: str) -> list[Token]:
    """Split a template into literal text and placeholder tokens."""
    tokens: list[Token] = []
    position = 0
    for match in _PLACEHOLDER_RE.finditer(template):
        if match.start() > position:
            tokens.append(Literal(template[position:match.start()]))
        tokens.append(_classify(match.group(1), match.group(0)))
        position = match.end()
    if position < len(template):
        tokens.append(Literal(template[position:]))
    return tokens


def _value(args: Mapping[str, object], name: Optional[str]) -> Optional[str]:
    value = args.get(name) if name is not None else None
    if value is None:
        return None
    value = str(value)
    return value or None


def _render(token: Token, args: Mapping[str, object]) -> str:
    if isinstance(token, Literal):
        return token.text
    value = _value(args, token.name)
    if token.form is PlaceholderForm.DEFAULTED:
        return value if value is not None else token.default
    if token.form is PlaceholderForm.VARIABLE:
        return value if value is not None else token.raw
    return token.raw


def resolve(template: str, args: Optional[Mapping[str, object]] = None) -> str:
    """Resolve a template against named arguments. Never fails."""
    args = args or {}
    output: list[str] = []
    block: Optional[list[str]] = None
    opener: Optional[Placeholder] = None

    for token in tokenize(template):
        if isinstance(token, Placeholder) and token.form is PlaceholderForm.IF_OPEN:
            if block is None:
                block, opener = [], token
            else:
                block.append(token.raw)
            continue

        if isinstance(token, Placeholder) and token.form is PlaceholderForm.IF_CLOSE:
            if block is None:
                output.append(token.raw)
            else:
                if _value(args, opener.name) is not None:
                    output.extend(block)
                block, opener = None, None
            continue

        (block if block is not None else output).append(_render(token, args))

    if block is not None:
        # Unterminated block stays as written
        output.append(opener.raw)
        output.extend(block)

    return "".join(output)
