"""
Configuration loader: reads directive text and builds one LoginConfig
per login block.
"""

from pathlib import Path

from ..const import BLOCK_NAMES
from ..logging import get_logger
from .builder import ConfigBuilder
from .errors import ConfigError, UnknownDirectiveError
from .lexer import LexerError
from .parser import ConfigDocument, ParseError, parse_config
from .schema import LoginConfig


logger = get_logger("config.loader")


class ConfigLoader:
    """
    Loads login configurations from files or strings.

    Usage:
        loader = ConfigLoader(document_root="/var/www")
        configs = loader.load_file("/etc/caddy/login.conf")
        # or
        configs = loader.load_string(config_text)
    """

    def __init__(self, document_root: str | Path = ""):
        self.document_root = str(document_root)

    def load_file(self, path: str | Path) -> list[LoginConfig]:
        """
        Load configurations from a file.

        Args:
            path: Path to the configuration file

        Returns:
            One LoginConfig per block, in file order

        Raises:
            ConfigError: If the file cannot be read, parsed or compiled
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigError(f"Not a file: {path}")

        try:
            source = path.read_text()
        except OSError as e:
            raise ConfigError(f"Failed to read configuration: {e}") from e

        return self.load_string(source, str(path))

    def load_string(self, source: str, filename: str = "<string>") -> list[LoginConfig]:
        """
        Load configurations from a string.

        Args:
            source: Configuration source text
            filename: Filename for error messages

        Returns:
            One LoginConfig per block, in source order

        Raises:
            ConfigError: If the text cannot be parsed or compiled
        """
        try:
            document = parse_config(source, filename)
        except (LexerError, ParseError) as e:
            raise ConfigError(f"{filename}: failed to parse configuration: {e}") from e

        return self.build_document(document)

    def build_document(self, document: ConfigDocument) -> list[LoginConfig]:
        """Build every block of a parsed document."""
        builder = ConfigBuilder(self.document_root)
        configs = []

        for block in document.blocks:
            if block.name not in BLOCK_NAMES:
                raise UnknownDirectiveError(
                    f"unknown block '{block.name}', expected one of: {', '.join(BLOCK_NAMES)}",
                    directive=block.name,
                    value=block.name,
                    line=block.line,
                )
            configs.append(builder.build(block))

        logger.info(f"Loaded {len(configs)} login block(s) from {document.filename}")

        return configs


def load_config(path: str | Path, document_root: str | Path = "") -> list[LoginConfig]:
    """
    Convenience function to load configurations from a file.

    Args:
        path: Path to the configuration file
        document_root: Base path for relative file references

    Returns:
        One LoginConfig per block
    """
    return ConfigLoader(document_root).load_file(path)


def load_string(source: str, document_root: str | Path = "") -> LoginConfig:
    """
    Compile a source text holding exactly one login block.

    Raises:
        ConfigError: If the text holds no block, several blocks, or an
            invalid block
    """
    configs = ConfigLoader(document_root).load_string(source)
    if len(configs) != 1:
        raise ConfigError(f"Expected exactly one login block, found {len(configs)}")
    return configs[0]
