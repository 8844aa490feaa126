"""
Lexer (tokenizer) for Caddyfile-style directive blocks.

Supports:
- Words separated by whitespace (directive names, arguments, option strings)
- Quoted strings (double quotes with escape sequences)
- Braces as standalone words opening and closing blocks
- Single-line (#) comments starting at a word boundary

Line numbers are kept on every token: the parser uses them to decide
which words belong to the same directive.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    """Token types for the directive block syntax."""

    WORD = auto()          # bare word: name, argument, option string
    STRING = auto()        # "quoted string"
    LBRACE = auto()        # {
    RBRACE = auto()        # }
    EOF = auto()           # end of input


@dataclass
class Token:
    """A single token from the lexer."""

    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class LexerError(Exception):
    """Exception raised for lexer errors."""

    def __init__(self, message: str, line: int, column: int):
        self.line = line
        self.column = column
        super().__init__(f"Line {line}, column {column}: {message}")


class Lexer:
    """
    Tokenizer for Caddyfile-style configuration blocks.

    Example input:
        login /context {
            jwt-secret "my secret"
            simple bob=secret,alice=secret
        }
    """

    WHITESPACE = " \t\r\n"

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _advance(self) -> str:
        """Advance position and return current character."""
        if self.pos >= len(self.source):
            return ""

        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def _skip_whitespace(self) -> None:
        char = self._current()
        while char and char in self.WHITESPACE:
            self._advance()
            char = self._current()

    def _skip_comment(self) -> bool:
        """Skip a comment up to the end of line. Returns True if skipped."""
        if self._current() != "#":
            return False
        while self._current() and self._current() != "\n":
            self._advance()
        return True

    def _skip_whitespace_and_comments(self) -> None:
        while True:
            self._skip_whitespace()
            if not self._skip_comment():
                break

    def _read_string(self) -> Token:
        """Read a double-quoted string literal."""
        start_line = self.line
        start_col = self.column
        self._advance()  # skip opening quote

        result = []

        while self._current() and self._current() != '"':
            char = self._current()

            if char == "\\":
                self._advance()
                escape_char = self._current()

                if escape_char == "n":
                    result.append("\n")
                elif escape_char == "t":
                    result.append("\t")
                elif escape_char in ('"', "\\"):
                    result.append(escape_char)
                elif escape_char == "":
                    raise LexerError("Unexpected end of string", self.line, self.column)
                else:
                    # Unknown escapes are kept verbatim
                    result.append("\\" + escape_char)

                self._advance()
            elif char == "\n":
                raise LexerError("Unterminated string literal", start_line, start_col)
            else:
                result.append(char)
                self._advance()

        if not self._current():
            raise LexerError("Unterminated string literal", start_line, start_col)

        self._advance()  # skip closing quote

        return Token(
            type=TokenType.STRING,
            value="".join(result),
            line=start_line,
            column=start_col,
        )

    def _read_word(self) -> Token:
        """Read a bare word up to the next whitespace."""
        start_line = self.line
        start_col = self.column
        start_pos = self.pos

        while self._current() and self._current() not in self.WHITESPACE:
            self._advance()

        text = self.source[start_pos:self.pos]

        if text == "{":
            token_type = TokenType.LBRACE
        elif text == "}":
            token_type = TokenType.RBRACE
        else:
            token_type = TokenType.WORD

        return Token(
            type=token_type,
            value=text,
            line=start_line,
            column=start_col,
        )

    def next_token(self) -> Token:
        """Get the next token from the source."""
        self._skip_whitespace_and_comments()

        if self.pos >= len(self.source):
            return Token(
                type=TokenType.EOF,
                value="",
                line=self.line,
                column=self.column,
            )

        if self._current() == '"':
            return self._read_string()

        return self._read_word()

    def tokenize(self) -> Iterator[Token]:
        """Generate all tokens from the source."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                break

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()


def tokenize(source: str) -> list[Token]:
    """Convenience function to tokenize a source string."""
    return list(Lexer(source))
