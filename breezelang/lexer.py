"""Tokenizer for breeze source text."""

from __future__ import annotations

import copy
import string
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator

_SPACES = frozenset(" \t\n\v\f\r")
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALNUM = _LETTERS | _DIGITS
_TYPE_HINTS = frozenset("ful")


class TokenType(Enum):
    """Kinds of token; each value is the name used when printing a token."""

    EOF = "EOF"

    NAME = "NAME"
    STRING = "STR"
    NUMBER = "NUM"
    CHAR = "CHR"

    COLON = ":"
    LEFT_DIAMOND = "<"
    RIGHT_DIAMOND = ">"
    LEFT_SQ = "["
    RIGHT_SQ = "]"
    LEFT_CURLY = "{"
    RIGHT_CURLY = "}"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    DOT = "."
    EXCLAMATION = "!"
    COMMA = ","

    ELLIPSE = "..."
    STATIC_SEPARATOR = "::"

    FUNC = "func"
    FOR = "for"
    USING = "using"


RESERVED = {kind.value: kind for kind in (TokenType.FUNC, TokenType.FOR, TokenType.USING)}

_PUNCTUATION = {
    "[": TokenType.LEFT_SQ,
    "]": TokenType.RIGHT_SQ,
    "<": TokenType.LEFT_DIAMOND,
    ">": TokenType.RIGHT_DIAMOND,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_CURLY,
    "}": TokenType.RIGHT_CURLY,
    "!": TokenType.EXCLAMATION,
    ",": TokenType.COMMA,
}


@dataclass(frozen=True)
class Location:
    """A position in a source file; line and column count from 1."""

    line: int
    col: int
    pos: int
    filename: str


@dataclass(frozen=True)
class Token:
    """A lexed token; ``value`` holds the text of names, literals and numbers."""

    type: TokenType
    where: Location
    value: str | None = None

    def text(self) -> str:
        """The token's own text, or the spelling of its kind if it carries none."""
        return self.value if self.value is not None else self.type.value


def format_error(source: str, where: Location, header: str, footer: str | None = None) -> str:
    """Render a diagnostic: the header, the offending line and an underline."""
    lines = [f"{where.filename}({where.line}:{where.col}): {header}"]
    source_lines = source.split("\n")
    text = source_lines[where.line - 1] if 1 <= where.line <= len(source_lines) else ""
    text = text.replace("\t", "    ")
    if text:
        underline = ["~"] * max(len(text), where.col)
        underline[where.col - 1] = "^"
        lines.append(text)
        lines.append("".join(underline))
        if footer is not None:
            lines.append(f"\t{footer}")
    return "\n".join(lines)


class LexError(Exception):
    """Raised when the source text cannot be tokenized."""

    def __init__(self, source: str, where: Location, header: str, footer: str | None = None):
        super().__init__(format_error(source, where, header, footer))
        self.where = where
        self.header = header
        self.footer = footer


class Lexer:
    """Turns source text into tokens, one call to :meth:`next` at a time.

    A character that starts no token yields a token of type ``EOF``, which
    ends iteration just as the end of the text does.
    """

    def __init__(self, filename: str, source: str):
        self.filename = filename
        self.source = source
        self.where = Location(1, 1, 0, filename)
        self._lookahead: tuple[Token, Location] | None = None

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next()).type is not TokenType.EOF:
            yield token

    def next(self) -> Token:
        """Return the next token and advance past it."""
        if self._lookahead is not None:
            token, self.where = self._lookahead
            self._lookahead = None
            return token

        self._skip_trivia()
        start = self.where
        ch = self.peek_char(0)
        if ch in _LETTERS:
            token = self._name(start)
        elif ch == '"':
            token = self._string(start)
        elif ch == "'":
            token = self._char(start)
        elif ch in _DIGITS:
            token = self._number(start)
        else:
            token = self._punctuation(start)
        self.consume_spaces()
        return token

    def peek(self, n: int = 0) -> Token:
        """Return the token ``n`` places ahead without advancing."""
        if n == 0 and self._lookahead is not None:
            return self._lookahead[0]
        probe = copy.copy(self)
        token = probe.next()
        self._lookahead = (token, probe.where) if token.type is not TokenType.EOF else None
        for _ in range(n):
            token = probe.next()
        return token

    def consume(self) -> str | None:
        """Advance one character and return it, or None past the end."""
        where = self.where
        ch = self.source[where.pos] if where.pos < len(self.source) else None
        if ch == "\n":
            line, col = where.line + 1, 1
        else:
            line, col = where.line, where.col + 1
        self.where = replace(where, line=line, col=col, pos=where.pos + 1)
        return ch

    def consume_spaces(self) -> None:
        """Advance past any whitespace."""
        while self.peek_char(0) in _SPACES:
            self.consume()

    def peek_char(self, n: int = 0) -> str | None:
        """Return the character ``n`` places ahead, or None past the end."""
        pos = self.where.pos + n
        if 0 <= pos < len(self.source):
            return self.source[pos]
        return None

    def error(self, where: Location, header: str, footer: str | None = None) -> None:
        """Raise a :class:`LexError` pointing at ``where``."""
        raise LexError(self.source, where, header, footer)

    def _skip_trivia(self) -> None:
        while True:
            ch = self.peek_char(0)
            if ch in _SPACES:
                self.consume_spaces()
            elif ch == ";":
                self.consume()
            elif ch == "/" and self.peek_char(1) == "/":
                while self.consume() not in ("\n", None):
                    pass
            else:
                return

    def _name(self, start: Location) -> Token:
        pos = self.where.pos
        while self.peek_char(0) in _ALNUM:
            self.consume()
        word = self.source[pos:self.where.pos]
        kind = RESERVED.get(word)
        if kind is not None:
            return Token(kind, start)
        return Token(TokenType.NAME, start, word)

    def _string(self, start: Location) -> Token:
        self.consume()
        pos = self.where.pos
        while (ch := self.peek_char(0)) != '"':
            if ch is None:
                self.error(self.where, "unterminated string literal")
            if ch == "\n":
                self.error(start, "string contains newline")
            self.consume()
        value = self.source[pos:self.where.pos]
        self.consume()
        return Token(TokenType.STRING, start, value)

    def _char(self, start: Location) -> Token:
        self.consume()
        value = self.consume()
        if self.consume() != "'":
            self.error(self.where, "unterminated char literal")
        return Token(TokenType.CHAR, start, value)

    def _number(self, start: Location) -> Token:
        pos = self.where.pos
        seen_dot = False
        while True:
            ch = self.peek_char(0)
            if ch == ".":
                if seen_dot:
                    self.error(self.where, "multiple dots in numeric literal")
                seen_dot = True
            elif ch in _LETTERS:
                self._type_hint()
                break
            elif ch not in _DIGITS:
                break
            self.consume()
        return Token(TokenType.NUMBER, start, self.source[pos:self.where.pos])

    def _type_hint(self) -> None:
        ch = self.peek_char(0)
        if ch not in _TYPE_HINTS:
            self.error(self.where, "unknown type hint")
        self.consume()
        if ch == "l":
            if self.peek_char(0) == "l":
                self.consume()
            if self.peek_char(0) == "u":
                self.consume()

    def _punctuation(self, start: Location) -> Token:
        ch = self.consume()
        if ch == ":":
            if self.peek_char(0) == ":":
                self.consume()
                return Token(TokenType.STATIC_SEPARATOR, start)
            return Token(TokenType.COLON, start)
        if ch == ".":
            if self.peek_char(0) == ".":
                self.consume()
                if self.peek_char(0) != ".":
                    self.error(self.where, "unexpected extraneous period")
                self.consume()
                return Token(TokenType.ELLIPSE, start)
            return Token(TokenType.DOT, start)
        return Token(_PUNCTUATION.get(ch, TokenType.EOF), start)