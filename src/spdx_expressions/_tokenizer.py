from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, NoReturn

from .errors import LexError, ParserSyntaxError

# Characters that may appear in a license, license ref or exception identifier.
IDSTRING_CHARACTERS = r"a-zA-Z0-9.\-"


@dataclass
class Token:
    name: str
    text: str
    position: int

    @property
    def end(self) -> int:
        """Offset of the last character of this token (inclusive)."""
        return self.position + max(len(self.text), 1) - 1


def _keyword(word: str) -> str:
    # Operators are either all upper or all lower case, and only whole words.
    return rf"(?:{word.upper()}|{word.lower()})(?![{IDSTRING_CHARACTERS}])"


DEFAULT_RULES: dict[str, str | re.Pattern[str]] = {
    "LPAREN": r"\(",
    "RPAREN": r"\)",
    "PLUS": r"\+",
    "AND": _keyword("and"),
    "OR": _keyword("or"),
    "WITH": _keyword("with"),
    "ID": rf"[{IDSTRING_CHARACTERS}]+",
}

_WHITESPACE = re.compile(r"\s+")


class Tokenizer:
    """Stream of tokens for a LL(1) parser.

    The whole source is lexed up front, so a :class:`LexError` is raised
    before any parsing happens. Provides methods to examine the next token to
    be read, and to read it (advance to the next token).
    """

    def __init__(
        self,
        source: str,
        *,
        rules: dict[str, str | re.Pattern[str]] = DEFAULT_RULES,
    ) -> None:
        self.source = source
        self.rules: dict[str, re.Pattern[str]] = {
            name: re.compile(pattern) for name, pattern in rules.items()
        }
        self.tokens = list(self._tokenize())
        self.index = 0

    @property
    def position(self) -> int:
        return self.peek().position

    def peek(self) -> Token:
        """
        Return the next token to be read.
        """
        return self.tokens[self.index]

    def match(self, *names: str) -> bool:
        """
        Return True if the next token is of one of the given kinds.
        """
        return self.peek().name in names

    def expect(self, *names: str, error_message: str) -> Token:
        """
        Raise ParserSyntaxError if the next token doesn't match given arguments.
        """
        if not self.match(*names):
            self.raise_syntax_error(error_message)
        return self.peek()

    def read(self, *names: str, error_message: str = "") -> Token:
        """Return the next token and advance to the next token.

        Raise ParserSyntaxError if the token doesn't match. Without any
        names, the next token is read whatever it is.
        """
        if names:
            token = self.expect(*names, error_message=error_message)
        else:
            token = self.peek()
        if token.name != "END":
            self.index += 1
        return token

    def try_read(self, *names: str) -> Token | None:
        """read() if the next token matches the given arguments.

        Do nothing if it does not match.
        """
        if self.match(*names):
            return self.read()
        return None

    def raise_syntax_error(
        self,
        message: str,
        *,
        token: Token | None = None,
    ) -> NoReturn:
        """Raise ParserSyntaxError at the given token (the next one by default)."""
        if token is None:
            token = self.peek()
        raise ParserSyntaxError(
            message,
            source=self.source,
            span=(token.position, token.end),
        )

    def _tokenize(self) -> Iterator[Token]:
        """
        Split the source into tokens, ending with an END token.
        """
        position = 0
        while position < len(self.source):
            whitespace = _WHITESPACE.match(self.source, position)
            if whitespace:
                position = whitespace.end()
                continue

            for name, expression in self.rules.items():
                match = expression.match(self.source, position)
                if match:
                    yield Token(name, match[0], position)
                    position = match.end()
                    break
            else:
                raise LexError(
                    f"Unexpected character {self.source[position]!r}",
                    source=self.source,
                    span=(position, position),
                )
        yield Token("END", "", len(self.source))


def describe(token: Token) -> str:
    """Human readable name of a token, for error messages."""
    if token.name == "END":
        return "end of expression"
    return repr(token.text)
