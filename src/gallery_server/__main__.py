"""Gallery Server entry point.

Changes:
  - 2026-10-18: --root flag to serve a directory other than the working directory.
  - 2026-10-18: Rich logging, --dev auto-reload.
"""

from __future__ import annotations

import argparse
import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

from pydantic import ValidationError

from gallery_server.config import DEFAULT_PORT, Settings
from gallery_server.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _package_version() -> str:
    try:
        return get_version("gallery-server")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gallery-server",
        description="Browse a directory tree of images in your browser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gallery-server                     Serve the current directory on port 3000
  gallery-server --root ~/Pictures   Serve another directory
  gallery-server --host 0.0.0.0      Listen on all interfaces
  gallery-server --dev               Auto-reload on code changes
""",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind (default: 127.0.0.1, or GALLERY_HOST)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help=f"Port to listen on (default: {DEFAULT_PORT}, or GALLERY_PORT)",
    )
    parser.add_argument(
        "--root",
        "-r",
        type=str,
        default=None,
        help="Gallery root directory (default: working directory, or GALLERY_ROOT_DIR)",
    )
    parser.add_argument(
        "--dev", action="store_true", help="Development mode with auto-reload"
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.load(host=args.host, port=args.port, root_dir=args.root)
    except ValidationError as exc:
        parser.error(str(exc))

    setup_logging(level=settings.log_level)

    if not settings.resolved_root.is_dir():
        parser.error(f"gallery root is not a directory: {settings.root_dir}")

    from gallery_server.app import run_server

    try:
        run_server(settings, dev=args.dev)
    except KeyboardInterrupt:
        logger.info("Gallery server stopped")


if __name__ == "__main__":
    main()
