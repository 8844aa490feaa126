"""
Recursive descent parser for Caddyfile-style directive blocks.

Groups lexer tokens into directives (all words on the directive's line)
and nested blocks (a line ending in '{' up to the matching '}').
"""

from dataclasses import dataclass, field

from .lexer import Lexer, Token, TokenType


class ParseError(Exception):
    """Exception raised for parser errors."""

    def __init__(self, message: str, token: Token | None = None):
        self.token = token
        if token:
            super().__init__(f"Line {token.line}, column {token.column}: {message}")
        else:
            super().__init__(message)


@dataclass
class Directive:
    """
    A directive line with a name and its remaining words.

    Examples:
        jwt-secret s3cr3t          -> Directive(name="jwt-secret", args=["s3cr3t"])
        backend provider=simple,a=b -> Directive(name="backend", args=["provider=simple,a=b"])
    """
    name: str
    args: list[str] = field(default_factory=list)
    line: int = 0
    column: int = 0
    block: "Block | None" = None

    def __repr__(self) -> str:
        return f"Directive({self.name}, {self.args})"


@dataclass
class Block:
    """
    A brace-delimited group of directives.

    Examples:
        login { ... }              -> Block(name="login", args=[], ...)
        loginsrv /context { ... }  -> Block(name="loginsrv", args=["/context"], ...)
    """
    name: str
    args: list[str] = field(default_factory=list)
    directives: list[Directive] = field(default_factory=list)
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        return f"Block({self.name}, {self.args}, directives={len(self.directives)})"


@dataclass
class ConfigDocument:
    """Root document containing all top-level blocks."""
    blocks: list[Block] = field(default_factory=list)
    filename: str = "<string>"


class ConfigParser:
    """
    Recursive descent parser for directive blocks.

    Grammar:
        document  := entry*
        entry     := WORD arg* ['{' entry* '}']
        arg       := WORD | STRING            (on the same line as WORD)
    """

    def __init__(self, source: str, filename: str = "<string>"):
        self.lexer = Lexer(source)
        self.filename = filename

        self.current_token: Token | None = None
        self.peek_token: Token | None = None

        # Prime the parser with first two tokens
        self._advance()
        self._advance()

    def _advance(self) -> Token | None:
        """Advance to next token and return previous."""
        previous = self.current_token
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()
        return previous

    def _expect(self, token_type: TokenType, message: str = "") -> Token:
        """Expect current token to be of given type, advance and return it."""
        if self.current_token is None:
            raise ParseError("Unexpected end of input")

        if self.current_token.type != token_type:
            msg = message or f"Expected {token_type.name}, got {self.current_token.type.name}"
            raise ParseError(msg, self.current_token)

        return self._advance()  # type: ignore

    def _check(self, token_type: TokenType) -> bool:
        return self.current_token is not None and self.current_token.type == token_type

    def _check_arg(self, line: int) -> bool:
        """Check if current token is an argument on the given line."""
        if self.current_token is None or self.current_token.line != line:
            return False
        return self.current_token.type in (TokenType.WORD, TokenType.STRING)

    def parse(self) -> ConfigDocument:
        """Parse the entire document."""
        doc = ConfigDocument(filename=self.filename)

        while not self._check(TokenType.EOF):
            if not self._check(TokenType.WORD):
                raise ParseError(
                    f"Expected block name, got {self.current_token.type.name}",
                    self.current_token,
                )
            entry = self._parse_entry()
            if entry.block is not None:
                doc.blocks.append(entry.block)
            else:
                doc.blocks.append(
                    Block(name=entry.name, args=entry.args, line=entry.line, column=entry.column)
                )

        return doc

    def _parse_entry(self) -> Directive:
        """Parse a directive line and its optional nested block."""
        name_token = self._expect(TokenType.WORD)
        line = name_token.line

        args: list[str] = []
        while self._check_arg(line):
            args.append(self._advance().value)  # type: ignore[union-attr]

        directive = Directive(
            name=name_token.value,
            args=args,
            line=line,
            column=name_token.column,
        )

        if self._check(TokenType.LBRACE) and self.current_token.line == line:
            directive.block = self._parse_block_body(directive)

        return directive

    def _parse_block_body(self, header: Directive) -> Block:
        """Parse the body of a block (starting at the opening brace)."""
        brace = self._expect(TokenType.LBRACE)

        if (
            self.current_token is not None
            and self.current_token.line == brace.line
            and not self._check(TokenType.RBRACE)
            and not self._check(TokenType.EOF)
        ):
            raise ParseError(
                f"Unexpected '{self.current_token.value}' after '{{' in '{header.name}' block",
                self.current_token,
            )

        block = Block(
            name=header.name,
            args=header.args,
            line=header.line,
            column=header.column,
        )

        while not self._check(TokenType.RBRACE) and not self._check(TokenType.EOF):
            if not self._check(TokenType.WORD):
                raise ParseError(
                    f"Expected directive in '{header.name}' block",
                    self.current_token,
                )
            block.directives.append(self._parse_entry())

        self._expect(TokenType.RBRACE, f"Expected '}}' to close '{header.name}' block")

        return block


def parse_config(source: str, filename: str = "<string>") -> ConfigDocument:
    """
    Convenience function to parse a configuration string.

    Args:
        source: Configuration source text
        filename: Name of the source, recorded on the document

    Returns:
        Parsed ConfigDocument
    """
    return ConfigParser(source, filename).parse()

