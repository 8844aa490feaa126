"""
Parser for provider option strings of the form ``k1=v1,k2=v2``.
"""

from .errors import MalformedOptionError


def parse_options(text: str, directive: str = "", line: int = 0) -> dict[str, str]:
    """
    Parse a comma-separated option string into an ordered mapping.

    Only the first '=' of each segment separates key from value, so values
    may contain further '=' or ':' characters. Nothing is trimmed.

    Args:
        text: Option string, e.g. "endpoint=http://localhost:8080,client_id=x"
        directive: Directive name used in error messages
        line: Source line used in error messages

    Returns:
        Mapping of option name to value in declaration order

    Raises:
        MalformedOptionError: If text is empty or a segment has no '='
    """
    if not text:
        raise MalformedOptionError(
            f"empty option string for '{directive}'",
            directive=directive,
            value=text,
            line=line,
        )

    options: dict[str, str] = {}
    for segment in text.split(","):
        key, sep, value = segment.partition("=")
        if not sep:
            raise MalformedOptionError(
                f"option '{segment}' of '{directive}' is not of the form key=value",
                directive=directive,
                value=segment,
                line=line,
            )
        options[key] = value

    return options
