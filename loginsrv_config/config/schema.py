"""
Configuration schema for the login middleware.

A LoginConfig is built once per directive block and never mutated
afterwards; provider option sets are exposed as read-only mappings.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import timedelta
from types import MappingProxyType

from ..const import (
    DEFAULT_COOKIE_NAME,
    DEFAULT_GRACE_PERIOD,
    DEFAULT_JWT_ALGO,
    DEFAULT_JWT_EXPIRY,
    DEFAULT_JWT_REFRESHES,
    DEFAULT_LOGIN_PATH,
    DEFAULT_REDIRECT_QUERY_PARAMETER,
    DEFAULT_SUCCESS_URL,
)

ProviderOptions = Mapping[str, Mapping[str, str]]


def freeze_options(options: Mapping[str, Mapping[str, str]]) -> ProviderOptions:
    """Wrap a provider -> options mapping (and each option set) read-only."""
    return MappingProxyType(
        {name: MappingProxyType(dict(opts)) for name, opts in options.items()}
    )


def _empty_options() -> ProviderOptions:
    return MappingProxyType({})


@dataclass(frozen=True)
class LoginConfig:
    """Complete configuration of one login middleware instance."""
    jwt_secret: str
    jwt_algo: str = DEFAULT_JWT_ALGO
    jwt_expiry: timedelta = DEFAULT_JWT_EXPIRY
    jwt_refreshes: int = DEFAULT_JWT_REFRESHES
    success_url: str = DEFAULT_SUCCESS_URL
    logout_url: str = ""
    redirect: bool = True
    redirect_query_parameter: str = DEFAULT_REDIRECT_QUERY_PARAMETER
    redirect_check_referer: bool = True
    redirect_host_file: str = ""
    login_path: str = DEFAULT_LOGIN_PATH
    cookie_name: str = DEFAULT_COOKIE_NAME
    cookie_domain: str = ""
    cookie_expiry: timedelta = timedelta(0)  # zero means session cookie
    cookie_http_only: bool = True
    template: str = ""
    grace_period: timedelta = DEFAULT_GRACE_PERIOD
    backends: ProviderOptions = field(default_factory=_empty_options)
    oauth: ProviderOptions = field(default_factory=_empty_options)

    def __post_init__(self) -> None:
        # Callers may pass plain dicts; store read-only copies
        object.__setattr__(self, "backends", freeze_options(self.backends))
        object.__setattr__(self, "oauth", freeze_options(self.oauth))

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of all configuration fields in declaration order."""
        return tuple(f.name for f in fields(cls))

    def __repr__(self) -> str:
        # Keep the secret out of logs and tracebacks
        shown = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name in self.field_names()
            if name != "jwt_secret"
        )
        return f"LoginConfig(jwt_secret='***', {shown})"
