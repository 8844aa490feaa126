"""
Compiler for login middleware configuration blocks.
"""

from .const import APP_VERSION

__version__ = APP_VERSION
