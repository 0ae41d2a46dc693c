"""Formatting of arbitrary values: atoms as strings and recursive display of structure."""

from __future__ import annotations

import collections.abc
import dataclasses
import re
import sys
import typing
from typing import Any, TextIO

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}

_REFERENCE_TYPES = (list, dict, set, bytearray)

_PLAIN_NAMES: dict[str, Any] = {
    "int": int,
    "str": str,
    "bool": bool,
    "float": float,
    "complex": complex,
    "bytes": bytes,
    "bytearray": bytearray,
    "object": object,
    "Any": Any,
    "None": type(None),
    "NoneType": type(None),
}

_GENERIC_NAMES: dict[str, Any] = {
    "list": list,
    "List": list,
    "dict": dict,
    "Dict": dict,
    "tuple": tuple,
    "Tuple": tuple,
    "set": set,
    "Set": set,
    "frozenset": frozenset,
    "FrozenSet": frozenset,
    "Sequence": collections.abc.Sequence,
    "MutableSequence": collections.abc.MutableSequence,
    "Mapping": collections.abc.Mapping,
    "MutableMapping": collections.abc.MutableMapping,
}

_ANNOTATION_TOKEN_RE = re.compile(r"\.\.\.|[A-Za-z_][\w.]*|[\[\],|]")


class _UnresolvedAnnotation(Exception):
    pass


class _AnnotationParser:
    """Resolves annotation strings made of builtin and common typing names."""

    def __init__(self, text: str) -> None:
        self._tokens = _ANNOTATION_TOKEN_RE.findall(text)
        if "".join(self._tokens) != re.sub(r"\s+", "", text):
            raise _UnresolvedAnnotation(text)
        self._pos = 0

    def parse(self) -> Any:
        result = self._union()
        if self._pos != len(self._tokens):
            raise _UnresolvedAnnotation("trailing tokens")
        return result

    def _peek(self) -> str | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _take(self) -> str:
        tok = self._peek()
        if tok is None:
            raise _UnresolvedAnnotation("unexpected end")
        self._pos += 1
        return tok

    def _union(self) -> Any:
        parts = [self._primary()]
        while self._peek() == "|":
            self._take()
            parts.append(self._primary())
        return parts[0] if len(parts) == 1 else typing.Union[tuple(parts)]

    def _primary(self) -> Any:
        tok = self._take()
        if tok == "...":
            return Ellipsis
        if tok in "[],|":
            raise _UnresolvedAnnotation(tok)
        name = tok.rsplit(".", 1)[-1]
        args: list[Any] = []
        if self._peek() == "[":
            self._take()
            args.append(self._union())
            while self._peek() == ",":
                self._take()
                args.append(self._union())
            if self._take() != "]":
                raise _UnresolvedAnnotation("missing ]")
        return _apply_annotation(name, args)


def _apply_annotation(name: str, args: list[Any]) -> Any:
    if not args:
        if name in _PLAIN_NAMES:
            return _PLAIN_NAMES[name]
        if name in _GENERIC_NAMES:
            return _GENERIC_NAMES[name]
        raise _UnresolvedAnnotation(name)
    if name == "Optional" and len(args) == 1:
        return typing.Optional[args[0]]
    if name == "Union":
        return typing.Union[tuple(args)]
    base = _GENERIC_NAMES.get(name)
    if base is None:
        raise _UnresolvedAnnotation(name)
    return base[args[0]] if len(args) == 1 else base[tuple(args)]


def _resolve_annotation(text: str) -> Any:
    try:
        return _AnnotationParser(text).parse()
    except (_UnresolvedAnnotation, TypeError):
        return Any


def _field_hints(cls: type) -> dict[str, Any]:
    """Return the field types of dataclass ``cls``, resolving string annotations."""
    return {
        f.name: _resolve_annotation(f.type) if isinstance(f.type, str) else f.type
        for f in dataclasses.fields(cls)
    }


def _quote(s: str) -> str:
    """Return ``s`` as a double-quoted literal with non-printable characters escaped."""
    parts = ['"']
    for ch in s:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            parts.append(escaped)
        elif ch.isprintable():
            parts.append(ch)
        else:
            code = ord(ch)
            if code < 0x20 or code == 0x7F:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def _is_struct(value: object) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def format_atom(value: object) -> str:
    """Format ``value`` without inspecting its internal structure."""
    if value is None:
        return "invalid"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, str):
        return _quote(value)
    name = type(value).__name__
    if isinstance(value, _REFERENCE_TYPES) or callable(value):
        return f"{name} 0x{id(value):x}"
    return f"{name} value"


def display(name: str, x: object, out: TextIO | None = None) -> None:
    """Write the structure of ``x``, one leaf per line, labelled by its path from ``name``."""
    stream = sys.stdout if out is None else out
    stream.write(f"Display {name} ({type(x).__name__}):\n")
    if x is None:
        stream.write(f"{name} = invalid\n")
        return
    _display(name, x, stream)


def _display_interface(path: str, value: object, out: TextIO) -> None:
    if value is None:
        out.write(f"{path} = nil\n")
        return
    out.write(f"{path}.type = {type(value).__name__}\n")
    _display(path + ".value", value, out)


def _display(path: str, value: object, out: TextIO) -> None:
    if value is None:
        out.write(f"{path} = nil\n")
    elif isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _display(f"{path}[{i}]", item, out)
    elif _is_struct(value):
        hints = _field_hints(type(value))
        for field in dataclasses.fields(value):
            field_path = f"{path}.{field.name}"
            field_value = getattr(value, field.name)
            hint = hints.get(field.name)
            if hint is Any or hint is object:
                _display_interface(field_path, field_value, out)
            else:
                _display(field_path, field_value, out)
    elif isinstance(value, dict):
        for key, item in value.items():
            _display(f"{path}[{format_atom(key)}]", item, out)
    else:
        out.write(f"{path} = {format_atom(value)}\n")