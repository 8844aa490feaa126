"""
Directive registry: maps every directive name to the handler that owns it.

The registry is built once at import time and exposed read-only. Each
handler is a tagged variant (HandlerKind) that consumes the arguments of
one directive line and writes exactly the field it owns.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable

from .errors import (
    ArityError,
    MalformedOptionError,
    MissingProviderError,
    UnknownDirectiveError,
    ValueParseError,
)
from .options import parse_options
from .parser import Directive
from .values import parse_bool, parse_duration, parse_int


class HandlerKind(Enum):
    """Closed set of directive behaviors."""
    STRING = "string"          # store the argument verbatim
    BOOL = "bool"              # parse a boolean literal
    DURATION = "duration"      # parse a duration literal
    INT = "int"                # parse a decimal integer
    BACKEND = "backend"        # legacy 'backend provider=<name>,k=v'
    PROVIDER = "provider"      # '<provider> k=v,k=v' keyed by directive name


# Provider names accepted as directives, by target collection
BACKEND_PROVIDERS = ("simple", "osiam", "htpasswd", "httpupstream")
OAUTH_PROVIDERS = ("github", "google", "bitbucket", "facebook", "gitlab")

PROVIDER_KEY = "provider"

_COERCERS: dict[HandlerKind, Callable[[str], Any]] = {
    HandlerKind.STRING: str,
    HandlerKind.BOOL: parse_bool,
    HandlerKind.DURATION: parse_duration,
    HandlerKind.INT: parse_int,
}


@dataclass(frozen=True)
class DirectiveHandler:
    """
    Handler for a single directive.

    Attributes:
        name: Canonical directive name
        kind: Behavior of the handler
        field: Configuration field written by the handler
        aliases: Alternative spellings mapping to this handler
    """
    name: str
    kind: HandlerKind
    field: str
    aliases: tuple[str, ...] = ()

    def apply(self, directive: Directive, state: dict[str, Any]) -> None:
        """
        Consume the directive arguments and write into state.

        Raises:
            DirectiveError: On wrong arity or unparsable values
        """
        if directive.block is not None:
            raise ArityError(
                f"'{directive.name}' does not take a block",
                directive=directive.name,
                line=directive.line,
            )

        if self.kind is HandlerKind.BACKEND:
            self._apply_backend(directive, state)
        elif self.kind is HandlerKind.PROVIDER:
            state[self.field][self.name] = self._options(directive)
        else:
            state[self.field] = self._coerce(directive)

    def _coerce(self, directive: Directive) -> Any:
        if len(directive.args) != 1:
            raise ArityError(
                f"wrong number of arguments for '{directive.name}': "
                f"expected 1, got {len(directive.args)}",
                directive=directive.name,
                value=" ".join(directive.args),
                line=directive.line,
            )

        value = directive.args[0]
        try:
            return _COERCERS[self.kind](value)
        except ValueError as e:
            raise ValueParseError(
                f"invalid {self.kind.value} '{value}' for '{directive.name}'",
                directive=directive.name,
                value=value,
                field=self.field,
                line=directive.line,
            ) from e

    def _joined_args(self, directive: Directive) -> str:
        if not directive.args:
            raise ArityError(
                f"'{directive.name}' requires at least one key=value argument",
                directive=directive.name,
                line=directive.line,
            )
        return ",".join(directive.args)

    def _options(self, directive: Directive) -> dict[str, str]:
        return parse_options(self._joined_args(directive), directive.name, directive.line)

    def _apply_backend(self, directive: Directive, state: dict[str, Any]) -> None:
        head, comma, rest = self._joined_args(directive).partition(",")

        # The first pair names the provider; only the pairs after it are options
        first = parse_options(head, directive.name, directive.line)
        provider = first.get(PROVIDER_KEY)
        if not provider:
            raise MissingProviderError(
                f"'{directive.name}' must start with {PROVIDER_KEY}=<name>",
                directive=directive.name,
                value=" ".join(directive.args),
                line=directive.line,
            )

        if not comma:
            raise MissingProviderError(
                f"no options given for provider '{provider}'",
                directive=directive.name,
                value=" ".join(directive.args),
                line=directive.line,
            )

        options = parse_options(rest, directive.name, directive.line)
        if PROVIDER_KEY in options:
            raise MalformedOptionError(
                f"'{directive.name}' names {PROVIDER_KEY} more than once",
                directive=directive.name,
                value=f"{PROVIDER_KEY}={options[PROVIDER_KEY]}",
                line=directive.line,
            )

        state[self.field][provider] = options


def _spellings(name: str) -> tuple[str, ...]:
    """Alternate underscore/hyphen spelling of a directive name, if any."""
    alternates = {name.replace("-", "_"), name.replace("_", "-")} - {name}
    return tuple(sorted(alternates))


def _handler(name: str, kind: HandlerKind, field: str | None = None) -> DirectiveHandler:
    return DirectiveHandler(
        name=name,
        kind=kind,
        field=field or name.replace("-", "_"),
        aliases=_spellings(name),
    )


HANDLERS: tuple[DirectiveHandler, ...] = (
    _handler("jwt-secret", HandlerKind.STRING),
    _handler("jwt_algo", HandlerKind.STRING),
    _handler("jwt_expiry", HandlerKind.DURATION),
    _handler("jwt_refreshes", HandlerKind.INT),
    _handler("success_url", HandlerKind.STRING),
    _handler("logout_url", HandlerKind.STRING),
    _handler("redirect", HandlerKind.BOOL),
    _handler("redirect_query_parameter", HandlerKind.STRING),
    _handler("redirect_check_referer", HandlerKind.BOOL),
    _handler("redirect_host_file", HandlerKind.STRING),
    _handler("login_path", HandlerKind.STRING),
    _handler("cookie_name", HandlerKind.STRING),
    _handler("cookie_domain", HandlerKind.STRING),
    _handler("cookie_expiry", HandlerKind.DURATION),
    _handler("cookie_http_only", HandlerKind.BOOL),
    _handler("template", HandlerKind.STRING),
    _handler("backend", HandlerKind.BACKEND, "backends"),
    *(_handler(name, HandlerKind.PROVIDER, "backends") for name in BACKEND_PROVIDERS),
    *(_handler(name, HandlerKind.PROVIDER, "oauth") for name in OAUTH_PROVIDERS),
)


def _build_registry(handlers: tuple[DirectiveHandler, ...]) -> MappingProxyType:
    registry: dict[str, DirectiveHandler] = {}
    for handler in handlers:
        for name in (handler.name, *handler.aliases):
            if name in registry:
                raise RuntimeError(f"Duplicate directive name: {name}")
            registry[name] = handler
    return MappingProxyType(registry)


# Directive name or alias -> handler
DIRECTIVES: MappingProxyType = _build_registry(HANDLERS)

# Alias -> canonical name
ALIASES: MappingProxyType = MappingProxyType(
    {alias: handler.name for handler in HANDLERS for alias in handler.aliases}
)


def canonical_name(name: str) -> str:
    """Translate an alias to its canonical directive name."""
    return ALIASES.get(name, name)


def lookup(name: str, line: int = 0) -> DirectiveHandler:
    """
    Get the handler registered for a directive name or alias.

    Raises:
        UnknownDirectiveError: If the name is not registered
    """
    handler = DIRECTIVES.get(name)
    if handler is None:
        raise UnknownDirectiveError(
            f"unknown directive '{name}'",
            directive=name,
            value=name,
            line=line,
        )
    return handler
