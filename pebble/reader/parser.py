"""
  Pebble Reader: Lexer and Parser

- Streaming, lazy tokenisation
- Emits Pebble values directly:

    - nil -> Nil
    - true / false -> bool
    - integers -> int (64-bit range enforced)
    - strings -> str (escapes decoded)
    - ( ... ) -> List, [ ... ] -> Vector, { ... } -> HashMap
    - 'x `x ~x ~@x @x -> (quote x) (quasiquote x) (unquote x) (splice-unquote x) (deref x)
    - ^m x -> (with-meta x m)
    - everything else -> Symbol

Whitespace and commas separate tokens; ';' starts a comment running to end of line.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from pebble import SExpression
from pebble.errors import PebbleParseError
from pebble.reader.reader_macros import reader_macros
from pebble.types.nil import Nil, EndOfInput
from pebble.types.seq import List, Vector, HashMap
from pebble.types.symbol import Symbol

logger = logging.getLogger("pebble.reader")

TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<macro>~@|[\'`~@^])"  # reader-macro prefixes
    r"|(?P<open>[(\[{])"  # ( [ {
    r"|(?P<close>[)\]}])"  # ) ] }
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # double-quoted strings, possibly unterminated
    r"|(?P<atom>[^\s\[\]{}()\'\"`,;~@^]+)"  # numbers, symbols, keywords, constants
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"-?[0-9]+")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

SEQUENCES: dict[str, tuple[str, type[List]]] = {
    "(": (")", List),
    "[": ("]", Vector),
    "{": ("}", HashMap),
}

ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
}

FORM_START = frozenset({"(", "[", "{", "string", "atom", "reader macro"})

Token = tuple[str, str, int]


def location(source: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of `offset` in `source`."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # only separators remain
            break
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind), m.start(kind)


def unescape(body: str) -> str:
    """Decode string escapes; unknown escapes keep their backslash."""
    out: list[str] = []
    chars = iter(body)
    for c in chars:
        if c != "\\":
            out.append(c)
            continue
        nxt = next(chars, None)
        if nxt is None:
            out.append("\\")
        elif nxt in ESCAPES:
            out.append(ESCAPES[nxt])
        else:
            out.append("\\" + nxt)
    return "".join(out)


class TokenStream:
    def __init__(self, source: str):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(
        self, message: str, token: Optional[Token], expected: frozenset[str] = frozenset()
    ) -> PebbleParseError:
        offset = len(self.source) if token is None else token[2]
        line, column = location(self.source, offset)
        found = None if token is None else token[1]
        return PebbleParseError(message, line, column, found, expected)

    def read_form(self) -> SExpression:
        """Read the next complete form, or EndOfInput when the stream is exhausted."""
        if self.peek() is None:
            logger.debug("EndOfInput")
            return EndOfInput
        return self.read_required_form()

    def read_required_form(self) -> SExpression:
        token = self.advance()
        if token is None:
            raise self.error("Expected a form", None, FORM_START)

        kind, text, _ = token

        if kind == "macro":
            return reader_macros.dispatch(text, self)

        if kind == "open":
            return self.read_sequence(token)

        if kind == "close":
            raise self.error(f"Unexpected '{text}'", token, FORM_START)

        if kind == "string":
            if len(text) < 2 or not text.endswith('"') or self._escaped_close(text):
                raise self.error("Unterminated string", None, frozenset({'"'}))
            value = unescape(text[1:-1])
            logger.debug("STRING content: %r", value)
            return value

        return self.read_atom(token)

    @staticmethod
    def _escaped_close(text: str) -> bool:
        # "abc\" matches the string pattern but its final quote is escaped
        body = text[1:-1]
        trailing = len(body) - len(body.rstrip("\\"))
        return trailing % 2 == 1

    def read_sequence(self, open_token: Token) -> List:
        closer, flavor = SEQUENCES[open_token[1]]
        items: list[SExpression] = []
        while True:
            token = self.peek()
            if token is None:
                raise self.error(f"Expected '{closer}'", None, FORM_START | {closer})
            if token[0] == "close":
                self.advance()
                if token[1] != closer:
                    raise self.error(
                        f"Unexpected '{token[1]}'", token, FORM_START | {closer}
                    )
                break
            items.append(self.read_required_form())
        value = flavor(items)
        logger.debug("%s content: %r", flavor.__name__, value)
        return value

    def read_atom(self, token: Token) -> SExpression:
        text = token[1]
        if text == "nil":
            return Nil
        if text == "true":
            return True
        if text == "false":
            return False
        if INT_RE.fullmatch(text):
            # int() refuses very long digit strings, so reject by length first
            digits = text.lstrip("-").lstrip("0") or "0"
            if len(digits) > 19:
                raise self.error("Integer literal out of 64-bit range", token)
            value = -int(digits) if text.startswith("-") else int(digits)
            if not INT64_MIN <= value <= INT64_MAX:
                raise self.error("Integer literal out of 64-bit range", token)
            logger.debug("NUMBER content: %d", value)
            return value
        logger.debug("SYMBOL content: %s", text)
        return Symbol(text)

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.read_form()) is not EndOfInput:
            yield expr


def read_str(source: str) -> list[SExpression]:
    """Parse every top-level form in `source`."""
    return list(TokenStream(source).parse_all())
