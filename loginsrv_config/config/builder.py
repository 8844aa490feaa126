"""
Config builder: compiles one login directive block into a LoginConfig.

The build is a single pass:
1. normalize the legacy dialect (hyphenated aliases, positional context path)
2. seed all defaults
3. dispatch every directive in document order through the registry
4. validate, resolve file references and freeze the result

The first error aborts the build; no partial configuration is returned.
"""

import dataclasses
import posixpath
import secrets
from typing import Any

from ..const import DEFAULT_SECRET_BYTES
from ..logging import get_logger
from .directives import HandlerKind, canonical_name, lookup
from .errors import EmptyBlockError, MissingSecretError, NoBackendsDeclaredError, TooManyArgumentsError
from .parser import Block, Directive
from .paths import resolve_paths
from .schema import LoginConfig


logger = get_logger("config.builder")


def seed_state() -> dict[str, Any]:
    """Return a fresh, mutable set of default field values."""
    state: dict[str, Any] = {}
    for f in dataclasses.fields(LoginConfig):
        if f.default is not dataclasses.MISSING:
            state[f.name] = f.default

    # Without a configured secret every instance signs with its own random key
    state["jwt_secret"] = secrets.token_hex(DEFAULT_SECRET_BYTES)
    state["backends"] = {}
    state["oauth"] = {}
    return state


def context_login_path(context_path: str) -> str:
    """Default login path below a context path ('/' gives '/login')."""
    return posixpath.normpath(posixpath.join(context_path, "login"))


class ConfigBuilder:
    """
    Builds LoginConfig objects from parsed directive blocks.

    Usage:
        builder = ConfigBuilder(document_root="/var/www")
        config = builder.build(block)
    """

    def __init__(self, document_root: str = ""):
        self.document_root = document_root

    def build(self, block: Block, context_path: str | None = None) -> LoginConfig:
        """
        Compile a block into a validated configuration.

        Args:
            block: Parsed login block
            context_path: Context path hint; taken from the block argument
                when not given

        Returns:
            Immutable LoginConfig

        Raises:
            DirectiveError: On the first malformed directive or failed check
        """
        context_path = self._context_path(block, context_path)
        directives = self._normalize(block)

        if not directives:
            raise EmptyBlockError(
                f"'{block.name}' block has no directives; at least one backend is required",
                directive=block.name,
                line=block.line,
            )

        state = seed_state()
        if context_path:
            state["login_path"] = context_login_path(context_path)

        for directive in directives:
            handler = lookup(directive.name, directive.line)
            if handler.kind is HandlerKind.BACKEND:
                logger.warning(
                    f"Line {directive.line}: 'backend provider=...' is deprecated, "
                    f"declare the provider directly"
                )
            logger.debug(f"Line {directive.line}: applying '{directive.name}'")
            handler.apply(directive, state)

        self._validate(block, state)

        config = resolve_paths(LoginConfig(**state), self.document_root)
        logger.info(
            f"Built '{block.name}' configuration: login path {config.login_path}, "
            f"backends {', '.join(config.backends)}"
        )
        return config

    def _context_path(self, block: Block, context_path: str | None) -> str | None:
        if len(block.args) > 1:
            raise TooManyArgumentsError(
                f"'{block.name}' takes at most one argument, got {len(block.args)}",
                directive=block.name,
                value=" ".join(block.args),
                line=block.line,
            )

        if context_path is None and block.args:
            context_path = block.args[0]
            logger.warning(
                f"Line {block.line}: context path argument of '{block.name}' is deprecated, "
                f"use login_path instead"
            )
        return context_path

    def _normalize(self, block: Block) -> list[Directive]:
        """Rewrite alias spellings to canonical directive names."""
        normalized = []
        for directive in block.directives:
            name = canonical_name(directive.name)
            if name != directive.name:
                logger.debug(f"Line {directive.line}: '{directive.name}' read as '{name}'")
                directive = dataclasses.replace(directive, name=name)
            normalized.append(directive)
        return normalized

    def _validate(self, block: Block, state: dict[str, Any]) -> None:
        if not state["jwt_secret"]:
            raise MissingSecretError(
                "jwt secret must not be empty",
                directive="jwt-secret",
                line=block.line,
            )

        if not state["backends"]:
            raise NoBackendsDeclaredError(
                f"no login backend declared in '{block.name}' block",
                directive=block.name,
                line=block.line,
            )


def build_config(
    block: Block,
    context_path: str | None = None,
    document_root: str = "",
) -> LoginConfig:
    """
    Convenience function to compile a single block.

    Args:
        block: Parsed login block
        context_path: Optional context path hint
        document_root: Base path for relative file references

    Returns:
        Validated LoginConfig
    """
    return ConfigBuilder(document_root).build(block, context_path)
