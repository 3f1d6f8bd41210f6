"""A reader for Rusty Object Notation documents."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .store import ResolveError

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F_]+|0[bB][01_]+|0[oO][0-7_]+"
    r"|(?:\d[\d_]*)?(?:\.\d[\d_]*)?(?:[eE][+-]?\d+)?)"
)
_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "'": "'",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "b": "\b",
    "f": "\f",
}


class RonError(ResolveError):
    """A document is not valid, or does not describe the expected data."""

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ) -> None:
        where = f"{line}:{column}: " if line is not None else ""
        super().__init__(f"{where}{message}")
        self.message = message
        self.line = line
        self.column = column


@dataclass(frozen=True)
class Tagged:
    """A named value: ``Name`` (value None), ``Name(a, b)`` (tuple) or ``Name(f: v)`` (dict)."""

    name: str
    value: Any = None


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def error(self, message: str) -> RonError:
        line = self.text.count("\n", 0, self.pos) + 1
        column = self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1
        return RonError(message, line, column)

    def skip(self) -> None:
        text = self.text
        while self.pos < len(text):
            if text[self.pos].isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = len(text) if end < 0 else end + 1
            elif text.startswith("/*", self.pos):
                self._block_comment()
            else:
                break

    def _block_comment(self) -> None:
        depth = 0
        while True:
            if self.text.startswith("/*", self.pos):
                depth += 1
                self.pos += 2
            elif self.text.startswith("*/", self.pos):
                depth -= 1
                self.pos += 2
                if depth == 0:
                    return
            elif self.pos >= len(self.text):
                raise self.error("unterminated block comment")
            else:
                self.pos += 1

    def peek(self) -> str:
        self.skip()
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expect(self, ch: str) -> None:
        if self.peek() != ch:
            raise self.error(f"expected '{ch}'")
        self.pos += 1

    def value(self) -> Any:
        c = self.peek()
        if not c:
            raise self.error("unexpected end of input")
        if c == "[":
            self.pos += 1
            return self._items("]", self.value)
        if c == "{":
            return self._map()
        if c == "(":
            return self._group(None)
        if c == '"':
            return self._string()
        if c == "'":
            return self._char()
        nxt = self.text[self.pos + 1 : self.pos + 2]
        if c == "r" and nxt in ('"', "#"):
            return self._raw_string()
        if c.isdigit() or c in "+-.":
            return self._number()
        match = _IDENT.match(self.text, self.pos)
        if match is None:
            raise self.error(f"unexpected character {c!r}")
        self.pos = match.end()
        name = match.group()
        if name == "true":
            return True
        if name == "false":
            return False
        if self.peek() == "(":
            return self._group(name)
        return Tagged(name)

    def _items(self, close: str, item: Callable[[], Any]) -> list:
        items = []
        while True:
            if self.peek() == close:
                self.pos += 1
                return items
            items.append(item())
            c = self.peek()
            if c == ",":
                self.pos += 1
            elif c != close:
                raise self.error(f"expected ',' or '{close}'")

    def _map(self) -> dict:
        self.pos += 1
        start = self.pos
        entries = self._items("}", self._entry)
        try:
            return dict(entries)
        except TypeError:
            self.pos = start
            raise self.error("map key is not hashable") from None

    def _entry(self) -> tuple[Any, Any]:
        key = self.value()
        self.expect(":")
        return key, self.value()

    def _at_field(self) -> bool:
        self.skip()
        match = _IDENT.match(self.text, self.pos)
        if match is None:
            return False
        saved = self.pos
        self.pos = match.end()
        self.skip()
        found = self.text.startswith(":", self.pos) and not self.text.startswith("::", self.pos)
        self.pos = saved
        return found

    def _field(self) -> tuple[str, Any]:
        self.skip()
        match = _IDENT.match(self.text, self.pos)
        if match is None:
            raise self.error("expected a field name")
        self.pos = match.end()
        self.expect(":")
        return match.group(), self.value()

    def _group(self, name: Optional[str]) -> Any:
        self.pos += 1
        if self._at_field():
            fields: dict[str, Any] = {}
            for key, val in self._items(")", self._field):
                if key in fields:
                    raise self.error(f"duplicate field `{key}`")
                fields[key] = val
            result: Any = fields
        else:
            result = tuple(self._items(")", self.value))
        return result if name is None else Tagged(name, result)

    def _hex(self, count: int) -> str:
        digits = self.text[self.pos : self.pos + count]
        if len(digits) != count or not all(d in "0123456789abcdefABCDEF" for d in digits):
            raise self.error("invalid hexadecimal escape")
        self.pos += count
        return chr(int(digits, 16))

    def _escape(self) -> str:
        self.pos += 1
        if self.pos >= len(self.text):
            raise self.error("unterminated escape")
        c = self.text[self.pos]
        if c in _SIMPLE_ESCAPES:
            self.pos += 1
            return _SIMPLE_ESCAPES[c]
        if c == "x":
            self.pos += 1
            return self._hex(2)
        if c == "u":
            self.pos += 1
            if self.text.startswith("{", self.pos):
                end = self.text.find("}", self.pos)
                if end < 0:
                    raise self.error("unterminated unicode escape")
                digits = self.text[self.pos + 1 : end]
                try:
                    char = chr(int(digits, 16))
                except ValueError:
                    raise self.error("invalid unicode escape") from None
                self.pos = end + 1
                return char
            return self._hex(4)
        raise self.error(f"unknown escape '\\{c}'")

    def _string(self) -> str:
        self.pos += 1
        parts = []
        while True:
            if self.pos >= len(self.text):
                raise self.error("unterminated string")
            c = self.text[self.pos]
            if c == '"':
                self.pos += 1
                return "".join(parts)
            if c == "\\":
                parts.append(self._escape())
            else:
                parts.append(c)
                self.pos += 1

    def _raw_string(self) -> str:
        self.pos += 1
        hashes = 0
        while self.text.startswith("#", self.pos):
            hashes += 1
            self.pos += 1
        if not self.text.startswith('"', self.pos):
            raise self.error("expected '\"' in raw string")
        self.pos += 1
        closing = '"' + "#" * hashes
        end = self.text.find(closing, self.pos)
        if end < 0:
            raise self.error("unterminated raw string")
        content = self.text[self.pos : end]
        self.pos = end + len(closing)
        return content

    def _char(self) -> str:
        self.pos += 1
        if self.pos >= len(self.text):
            raise self.error("unterminated character")
        if self.text[self.pos] == "\\":
            char = self._escape()
        else:
            char = self.text[self.pos]
            self.pos += 1
        if not self.text.startswith("'", self.pos):
            raise self.error("expected closing \"'\"")
        self.pos += 1
        return char

    def _number(self) -> Any:
        match = _NUMBER.match(self.text, self.pos)
        literal = match.group() if match else ""
        body = literal.lstrip("+-")
        if not body or body == ".":
            raise self.error("invalid number")
        cleaned = literal.replace("_", "")
        try:
            if body[:2].lower() in ("0x", "0b", "0o"):
                number: Any = int(cleaned, 0)
            elif any(ch in body for ch in ".eE"):
                number = float(cleaned)
            else:
                number = int(cleaned, 10)
        except ValueError:
            raise self.error(f"invalid number {literal!r}") from None
        self.pos = match.end()
        return number


def loads(text: str) -> Any:
    """Parse one document into lists, dicts, tuples, scalars and :class:`Tagged` values."""
    parser = _Parser(text)
    result = parser.value()
    if parser.peek():
        raise parser.error("trailing characters after value")
    return result