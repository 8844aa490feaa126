"""
Compilation of login directive blocks into LoginConfig objects.
"""

from .builder import ConfigBuilder, build_config
from .directives import DIRECTIVES, DirectiveHandler, HandlerKind, lookup
from .errors import (
    ArityError,
    ConfigError,
    DirectiveError,
    EmptyBlockError,
    MalformedOptionError,
    MissingProviderError,
    MissingSecretError,
    NoBackendsDeclaredError,
    TooManyArgumentsError,
    UnknownDirectiveError,
    ValueParseError,
)
from .lexer import Lexer, LexerError, Token, TokenType
from .loader import ConfigLoader, load_config, load_string
from .options import parse_options
from .parser import Block, ConfigParser, Directive, ParseError
from .paths import resolve_paths
from .schema import LoginConfig

__all__ = [
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "ConfigParser",
    "ParseError",
    "Block",
    "Directive",
    "DIRECTIVES",
    "DirectiveHandler",
    "HandlerKind",
    "lookup",
    "parse_options",
    "ConfigBuilder",
    "build_config",
    "resolve_paths",
    "LoginConfig",
    "ConfigLoader",
    "load_config",
    "load_string",
    "ConfigError",
    "DirectiveError",
    "UnknownDirectiveError",
    "ArityError",
    "TooManyArgumentsError",
    "ValueParseError",
    "MalformedOptionError",
    "MissingProviderError",
    "NoBackendsDeclaredError",
    "EmptyBlockError",
    "MissingSecretError",
]
