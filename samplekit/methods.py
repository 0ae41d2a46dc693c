"""Print the public methods of any value."""

from __future__ import annotations

import inspect
import sys
import types
from typing import Any, TextIO

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08
_MISSING = object()


def _format_annotation(annotation: Any) -> str:
    if getattr(annotation, "__module__", None) == "typing":
        return repr(annotation).replace("typing.", "")
    if isinstance(annotation, types.GenericAlias):
        return str(annotation)
    if isinstance(annotation, type):
        if annotation.__module__ == "builtins":
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return repr(annotation)


def _text_signature(member: Any) -> str:
    text = getattr(member, "__text_signature__", None)
    if not text or not text.startswith("(") or not text.endswith(")"):
        return "(...)"
    params = [p for p in text[1:-1].split(", ") if p and not p.startswith("$")]
    if params == ["/"]:
        params = []
    return "(" + ", ".join(params) + ")"


def _render_param(name: str, annotations: dict[str, Any], default: Any) -> str:
    if name in annotations:
        text = f"{name}: {_format_annotation(annotations[name])}"
        return text if default is _MISSING else f"{text} = {default!r}"
    return name if default is _MISSING else f"{name}={default!r}"


def _signature(member: Any) -> str:
    func = getattr(member, "__func__", member)
    code = getattr(func, "__code__", None)
    if code is None:
        return _text_signature(member)

    annotations = getattr(func, "__annotations__", None) or {}
    posonly = code.co_posonlyargcount
    positional = list(code.co_varnames[: code.co_argcount])
    kwonly = list(
        code.co_varnames[code.co_argcount : code.co_argcount + code.co_kwonlyargcount]
    )
    index = code.co_argcount + code.co_kwonlyargcount
    varargs = varkw = None
    if code.co_flags & _CO_VARARGS:
        varargs = code.co_varnames[index]
        index += 1
    if code.co_flags & _CO_VARKEYWORDS:
        varkw = code.co_varnames[index]

    defaults = list(getattr(func, "__defaults__", None) or ())
    kwdefaults = getattr(func, "__kwdefaults__", None) or {}
    pos_defaults = [_MISSING] * (len(positional) - len(defaults)) + defaults

    entries = list(zip(positional, pos_defaults))
    if hasattr(member, "__func__") and getattr(member, "__self__", None) is not None:
        if entries:
            entries = entries[1:]
            posonly = max(posonly - 1, 0)

    parts: list[str] = []
    for i, (name, default) in enumerate(entries):
        parts.append(_render_param(name, annotations, default))
        if posonly and i == posonly - 1:
            parts.append("/")
    if varargs is not None:
        parts.append("*" + _render_param(varargs, annotations, _MISSING))
    elif kwonly:
        parts.append("*")
    for name in kwonly:
        parts.append(_render_param(name, annotations, kwdefaults.get(name, _MISSING)))
    if varkw is not None:
        parts.append("**" + _render_param(varkw, annotations, _MISSING))

    text = "(" + ", ".join(parts) + ")"
    if "return" in annotations:
        text += f" -> {_format_annotation(annotations['return'])}"
    return text


def print_methods(x: Any, out: TextIO | None = None) -> None:
    """Write the type of ``x`` and one line for each of its public methods, by name."""
    stream = sys.stdout if out is None else out
    cls = type(x)
    name = cls.__qualname__
    stream.write(f"type {name}\n")
    for attr in sorted(dir(cls)):
        if attr.startswith("_"):
            continue
        static = inspect.getattr_static(cls, attr, None)
        if not (inspect.isroutine(static) or isinstance(static, (staticmethod, classmethod))):
            continue
        member = getattr(x, attr)
        stream.write(f"func ({name}) {attr}{_signature(member)}\n")