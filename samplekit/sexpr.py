"""Conversion of values to and from S-expressions."""

from __future__ import annotations

import collections.abc
import dataclasses
import re
import types
import typing
from dataclasses import dataclass
from typing import Any, Iterator, Protocol

from samplekit.formatting import _field_hints, _quote

MARGIN = 80

_UNION_TYPES = (typing.Union, types.UnionType)
_SEQUENCE_ORIGINS = (list, collections.abc.Sequence, collections.abc.MutableSequence)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)


class SExprError(ValueError):
    """Raised when a value cannot be encoded or data cannot be decoded."""


# ---------------------------------------------------------------- encoding


class _Sink(Protocol):
    def atom(self, text: str) -> None: ...

    def begin(self) -> None: ...

    def space(self) -> None: ...

    def end(self) -> None: ...


class _PlainSink:
    def __init__(self) -> None:
        self.parts: list[str] = []

    def atom(self, text: str) -> None:
        self.parts.append(text)

    def begin(self) -> None:
        self.parts.append("(")

    def space(self) -> None:
        self.parts.append(" ")

    def end(self) -> None:
        self.parts.append(")")

    def getvalue(self) -> bytes:
        return "".join(self.parts).encode("utf-8")


@dataclass(eq=False)
class _Token:
    kind: str  # one of "s", " ", "(", ")"
    text: str = ""
    size: int = 0


class _PrettyPrinter:
    """Line-breaking printer after Oppen's pretty-printing algorithm."""

    def __init__(self, margin: int = MARGIN) -> None:
        self._margin = margin
        self._tokens: list[_Token] = []
        self._stack: list[_Token] = []
        self._rtotal = 0
        self._out: list[str] = []
        self._indents: list[int] = []
        self._width = margin

    def atom(self, text: str) -> None:
        tok = _Token("s", text, len(text.encode("utf-8")))
        if not self._stack:
            self._print(tok)
        else:
            self._tokens.append(tok)
            self._rtotal += tok.size

    def begin(self) -> None:
        if not self._stack:
            self._rtotal = 1
        tok = _Token("(", size=-self._rtotal)
        self._tokens.append(tok)
        self._stack.append(tok)
        self.atom("(")

    def end(self) -> None:
        self.atom(")")
        self._tokens.append(_Token(")"))
        top = self._stack.pop()
        top.size += self._rtotal
        if top.kind == " ":
            self._stack.pop().size += self._rtotal
        if not self._stack:
            for tok in self._tokens:
                self._print(tok)
            self._tokens.clear()

    def space(self) -> None:
        top = self._stack[-1]
        if top.kind == " ":
            top.size += self._rtotal
            self._stack.pop()
        tok = _Token(" ", size=-self._rtotal)
        self._tokens.append(tok)
        self._stack.append(tok)
        self._rtotal += 1

    def _print(self, tok: _Token) -> None:
        if tok.kind == "s":
            self._out.append(tok.text)
            self._width -= tok.size
        elif tok.kind == "(":
            self._indents.append(self._width)
        elif tok.kind == ")":
            self._indents.pop()
        elif tok.size > self._width:
            self._width = self._indents[-1] - 1
            self._out.append("\n" + " " * (self._margin - self._width))
        else:
            self._out.append(" ")
            self._width -= 1

    def getvalue(self) -> bytes:
        return "".join(self._out).encode("utf-8")


def _is_struct(value: object) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _walk(v: object, sink: _Sink) -> None:
    if v is None:
        sink.atom("nil")
    elif isinstance(v, bool):
        raise SExprError("unsupported type: bool")
    elif isinstance(v, int):
        sink.atom(str(int(v)))
    elif isinstance(v, str):
        sink.atom(_quote(v))
    elif isinstance(v, (list, tuple)):
        sink.begin()
        for i, item in enumerate(v):
            if i:
                sink.space()
            _walk(item, sink)
        sink.end()
    elif _is_struct(v):
        sink.begin()
        for i, field in enumerate(dataclasses.fields(v)):
            if i:
                sink.space()
            sink.begin()
            sink.atom(field.name)
            sink.space()
            _walk(getattr(v, field.name), sink)
            sink.end()
        sink.end()
    elif isinstance(v, dict):
        sink.begin()
        for i, (key, value) in enumerate(v.items()):
            if i:
                sink.space()
            sink.begin()
            _walk(key, sink)
            sink.space()
            _walk(value, sink)
            sink.end()
        sink.end()
    else:
        raise SExprError(f"unsupported type: {type(v).__name__}")


def marshal(v: object) -> bytes:
    """Encode ``v`` in S-expression form."""
    sink = _PlainSink()
    _walk(v, sink)
    return sink.getvalue()


def marshal_indent(v: object) -> bytes:
    """Encode ``v`` in S-expression form, broken into lines of at most the margin."""
    printer = _PrettyPrinter()
    _walk(v, printer)
    return printer.getvalue()


# ---------------------------------------------------------------- decoding


class _DecodeError(Exception):
    pass


_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
  | (?P<comment>//[^\n]*|/\*.*?\*/)
  | (?P<ident>[^\W\d]\w*)
  | (?P<float>[0-9]+\.[0-9]*(?:[eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+|\.[0-9]+(?:[eE][+-]?[0-9]+)?)
  | (?P<int>0[xX][0-9a-fA-F_]+|[0-9][0-9_]*)
  | (?P<string>"(?:[^"\\\n]|\\.)*")
  | (?P<raw>`[^`]*`)
  | (?P<char>'(?:[^'\\\n]|\\.)*')
  | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPE_RE = re.compile(
    r"""\\(?:([abfnrtv\\'"])|([0-7]{3})|x([0-9a-fA-F]{2})|u([0-9a-fA-F]{4})|U([0-9a-fA-F]{8}))"""
)

_SIMPLE_ESCAPES = {
    "a": b"\a",
    "b": b"\b",
    "f": b"\f",
    "n": b"\n",
    "r": b"\r",
    "t": b"\t",
    "v": b"\v",
    "\\": b"\\",
    "'": b"'",
    '"': b'"',
}


@dataclass(frozen=True)
class _Lexeme:
    kind: str
    text: str
    line: int
    col: int


def _tokenize(text: str) -> Iterator[_Lexeme]:
    line, col = 1, 1
    for m in _TOKEN_RE.finditer(text):
        kind = m.lastgroup or "other"
        value = m.group()
        if kind not in ("ws", "comment"):
            if kind == "other":
                kind = value
            elif kind == "raw":
                kind = "string"
            yield _Lexeme(kind, value, line, col)
        newlines = value.count("\n")
        if newlines:
            line += newlines
            col = len(value) - value.rfind("\n")
        else:
            col += len(value)
    yield _Lexeme("eof", "", line, col)


class _Lexer:
    def __init__(self, text: str) -> None:
        self._tokens = list(_tokenize(text))
        self._index = 0

    @property
    def current(self) -> _Lexeme:
        return self._tokens[self._index]

    @property
    def kind(self) -> str:
        return self.current.kind

    @property
    def text(self) -> str:
        return self.current.text

    @property
    def position(self) -> str:
        return f"{self.current.line}:{self.current.col}"

    def next(self) -> None:
        if self._index < len(self._tokens) - 1:
            self._index += 1

    def consume(self, want: str) -> None:
        if self.kind != want:
            raise _DecodeError(f"got {_quote(self.text)}, want '{want}'")
        self.next()


def _unquote(token: str) -> str:
    if token.startswith("`"):
        return token[1:-1].replace("\r", "")
    body = token[1:-1]
    out = bytearray()
    pos = 0
    while pos < len(body):
        slash = body.find("\\", pos)
        if slash < 0:
            out += body[pos:].encode("utf-8")
            break
        out += body[pos:slash].encode("utf-8")
        m = _ESCAPE_RE.match(body, slash)
        if m is None:
            raise _DecodeError(f"invalid escape in {token}")
        simple, octal, hexa, short, long = m.groups()
        if simple:
            out += _SIMPLE_ESCAPES[simple]
        elif octal:
            value = int(octal, 8)
            if value > 0xFF:
                raise _DecodeError(f"invalid escape in {token}")
            out.append(value)
        elif hexa:
            out.append(int(hexa, 16))
        else:
            try:
                out += chr(int(short or long, 16)).encode("utf-8")
            except (ValueError, UnicodeEncodeError):
                raise _DecodeError(f"invalid escape in {token}") from None
        pos = m.end()
    return out.decode("utf-8", errors="replace")


def _type_name(tp: Any) -> str:
    if typing.get_args(tp):
        return str(tp)
    return getattr(tp, "__name__", str(tp))


def _non_optional(tp: Any) -> Any:
    if typing.get_origin(tp) in _UNION_TYPES:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        return args[0] if len(args) == 1 else Any
    return tp


def _is_dynamic(tp: Any) -> bool:
    return tp is Any or tp is object


def _zero(tp: Any) -> Any:
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin in _UNION_TYPES:
        return None if type(None) in args else _zero(args[0])
    if _is_dynamic(tp) or tp is None or tp is type(None):
        return None
    if isinstance(tp, type):
        if issubclass(tp, bool):
            return False
        if issubclass(tp, (int, float, str)):
            return tp()
        if dataclasses.is_dataclass(tp):
            return _build(tp, {})
    base = origin or tp
    if base in _SEQUENCE_ORIGINS:
        return []
    if base is tuple:
        if not args or (len(args) == 2 and args[1] is Ellipsis):
            return ()
        return tuple(_zero(a) for a in args)
    if base in _MAPPING_ORIGINS:
        return {}
    return None


def _build(cls: type, values: dict[str, Any]) -> Any:
    hints = _field_hints(cls)
    kwargs: dict[str, Any] = {}
    late: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if f.name in values:
            (kwargs if f.init else late)[f.name] = values[f.name]
        elif (
            f.init
            and f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING
        ):
            kwargs[f.name] = _zero(hints.get(f.name, Any))
    obj = cls(**kwargs)
    for name, value in late.items():
        object.__setattr__(obj, name, value)
    return obj


def _check_target(tp: Any, kind: type, what: str) -> None:
    base = _non_optional(tp)
    if _is_dynamic(base):
        return
    if isinstance(base, type) and issubclass(base, kind) and not issubclass(base, bool):
        return
    raise _DecodeError(f"cannot decode {what} into {_type_name(base)}")


def _read(lex: _Lexer, tp: Any) -> Any:
    kind, text = lex.kind, lex.text
    if kind == "ident":
        if text == "nil":
            lex.next()
            return _zero(tp)
    elif kind == "string":
        _check_target(tp, str, "string")
        value = _unquote(text)
        lex.next()
        return value
    elif kind == "int":
        _check_target(tp, int, "integer")
        number = int(text) if re.fullmatch(r"[0-9]+", text) else 0
        lex.next()
        return number
    elif kind == "(":
        lex.next()
        value = _read_list(lex, tp)
        lex.next()  # consume ')'
        return value
    raise _DecodeError(f"unexpected token {_quote(text)}")


def _end_list(lex: _Lexer) -> bool:
    if lex.kind == "eof":
        raise _DecodeError("end of file")
    return lex.kind == ")"


def _read_list(lex: _Lexer, tp: Any) -> Any:
    base = _non_optional(tp)
    origin = typing.get_origin(base) or base
    args = typing.get_args(base)

    if _is_dynamic(base) or origin in _SEQUENCE_ORIGINS:
        elem = args[0] if args else Any
        items = []
        while not _end_list(lex):
            items.append(_read(lex, elem))
        return items

    if origin is tuple:
        if not args or (len(args) == 2 and args[1] is Ellipsis):
            elem = args[0] if args else Any
            collected = []
            while not _end_list(lex):
                collected.append(_read(lex, elem))
            return tuple(collected)
        fixed = [_zero(a) for a in args]
        index = 0
        while not _end_list(lex):
            if index >= len(args):
                raise _DecodeError(f"index out of range for {_type_name(base)}")
            fixed[index] = _read(lex, args[index])
            index += 1
        return tuple(fixed)

    if isinstance(base, type) and dataclasses.is_dataclass(base):
        hints = _field_hints(base)
        names = {f.name for f in dataclasses.fields(base)}
        values: dict[str, Any] = {}
        while not _end_list(lex):
            lex.consume("(")
            if lex.kind != "ident":
                raise _DecodeError(f"got token {_quote(lex.text)}, want field name")
            name = lex.text
            if name not in names:
                raise _DecodeError(f"no field {name} in {base.__name__}")
            lex.next()
            values[name] = _read(lex, hints.get(name, Any))
            lex.consume(")")
        return _build(base, values)

    if origin in _MAPPING_ORIGINS:
        key_type, value_type = args if len(args) == 2 else (Any, Any)
        mapping: dict[Any, Any] = {}
        while not _end_list(lex):
            lex.consume("(")
            key = _read(lex, key_type)
            value = _read(lex, value_type)
            try:
                mapping[key] = value
            except TypeError:
                raise _DecodeError(f"unhashable map key {key!r}") from None
            lex.consume(")")
        return mapping

    raise _DecodeError(f"cannot decode list into {_type_name(base)}")


def unmarshal(data: bytes | str, cls: Any) -> Any:
    """Parse S-expression ``data`` and return a value of type ``cls``."""
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    lex = _Lexer(text)
    try:
        return _read(lex, cls)
    except _DecodeError as err:
        raise SExprError(f"error at {lex.position}: {err}") from None