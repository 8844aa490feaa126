"""
Entry point for loginsrv-config.

Usage:
    python -m loginsrv_config /path/to/login.conf
    python -m loginsrv_config /path/to/login.conf --root /var/www
    python -m loginsrv_config --help
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .const import APP_NAME
from .config.errors import ConfigError
from .config.loader import ConfigLoader
from .config.schema import LoginConfig
from .config.values import format_duration
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("main")


def print_summary(index: int, config: LoginConfig) -> None:
    """Print a human readable summary of one configuration."""
    print(f"Block #{index}:")
    print(f"  Login path: {config.login_path}")
    print(f"  Success URL: {config.success_url}")
    print(f"  JWT: {config.jwt_algo}, expires after {format_duration(config.jwt_expiry)}")
    print(f"  Cookie: {config.cookie_name}"
          f"{' (domain ' + config.cookie_domain + ')' if config.cookie_domain else ''}, "
          f"{'http-only' if config.cookie_http_only else 'script readable'}, "
          f"{format_duration(config.cookie_expiry) if config.cookie_expiry else 'session'}")
    print(f"  Redirect: {'enabled' if config.redirect else 'disabled'}"
          f" (parameter '{config.redirect_query_parameter}')")
    if config.redirect_host_file:
        print(f"  Redirect host file: {config.redirect_host_file}")
    if config.template:
        print(f"  Template: {config.template}")
    for name, options in config.backends.items():
        print(f"  Backend {name}: {', '.join(options)}")
    for name, options in config.oauth.items():
        print(f"  OAuth {name}: {', '.join(options)}")


def validate_config(config_path: str, document_root: str = "") -> int:
    """Compile a configuration file and print a summary of each block."""
    try:
        configs = ConfigLoader(document_root).load_file(config_path)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if not configs:
        print(f"Configuration error: no login block in {config_path}", file=sys.stderr)
        return 1

    for index, config in enumerate(configs, start=1):
        print_summary(index, config)

    print(f"\nConfiguration is valid ({len(configs)} block(s))!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Validate login middleware directive blocks",
    )

    parser.add_argument(
        "config",
        help="Path to the file holding one or more login blocks",
    )

    parser.add_argument(
        "-r", "--root",
        metavar="DIR",
        default="",
        help="Document root used to resolve relative template paths",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Configuration file not found: {config_path}", file=sys.stderr)
        return 1

    logger.debug(f"Validating {config_path}")
    return validate_config(str(config_path), args.root)


if __name__ == "__main__":
    sys.exit(main())
