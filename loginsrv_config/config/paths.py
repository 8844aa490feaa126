"""
Resolution of file references against the site document root.
"""

import dataclasses
import os

from .schema import LoginConfig

# Fields joined with the document root when relative.
# redirect_host_file is deliberately absent: it is kept exactly as typed
# and opened relative to the working directory.
ROOT_RELATIVE_FIELDS = ("template",)


def resolve_paths(config: LoginConfig, document_root: str) -> LoginConfig:
    """
    Resolve relative file references against a document root.

    Args:
        config: Configuration to resolve
        document_root: Base directory of the site, may be empty

    Returns:
        The same configuration if nothing changed, otherwise a copy with
        resolved paths
    """
    if not document_root:
        return config

    changes = {}
    for name in ROOT_RELATIVE_FIELDS:
        value = getattr(config, name)
        if value and not os.path.isabs(value):
            changes[name] = os.path.normpath(os.path.join(document_root, value))

    if not changes:
        return config
    return dataclasses.replace(config, **changes)
