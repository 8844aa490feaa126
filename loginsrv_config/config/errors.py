"""
Errors raised while compiling a login configuration block.

Every build failure is terminal: the first error aborts the block and no
configuration is produced.
"""


class ConfigError(Exception):
    """Exception raised for configuration errors."""

    pass


class DirectiveError(ConfigError):
    """
    Error attributed to a single directive line.

    Attributes:
        directive: Name of the offending directive as written
        value: The malformed token or value, if any
        line: Source line of the directive (0 when unknown)
    """

    def __init__(
        self,
        message: str,
        directive: str = "",
        value: str | None = None,
        line: int = 0,
    ):
        self.directive = directive
        self.value = value
        self.line = line
        if line:
            message = f"Line {line}: {message}"
        super().__init__(message)


class UnknownDirectiveError(DirectiveError):
    """Directive name is not registered."""


class ArityError(DirectiveError):
    """Directive received the wrong number of arguments."""


class TooManyArgumentsError(ArityError):
    """Block header carries more positional arguments than allowed."""


class ValueParseError(DirectiveError):
    """Boolean, duration or integer literal could not be parsed."""

    def __init__(self, message: str, directive: str, value: str, field: str, line: int = 0):
        self.field = field
        super().__init__(message, directive=directive, value=value, line=line)


class MalformedOptionError(DirectiveError):
    """Option string does not follow the key=value,key=value grammar."""


class MissingProviderError(DirectiveError):
    """Legacy backend declaration without a usable provider."""


class NoBackendsDeclaredError(DirectiveError):
    """No authentication backend was declared in the block."""


class EmptyBlockError(NoBackendsDeclaredError):
    """Block contains no directives at all."""


class MissingSecretError(DirectiveError):
    """JWT secret is empty after the block was processed."""
