"""CLI entry point and argument parsing"""

import argparse
import logging
import sys

from rich.console import Console

import settings
from api.errors import ConfigurationError, TransportError
from oauth import Authenticator
from cli.auth_handlers import (
    EXIT_CONFIG_ERROR,
    EXIT_TRANSPORT_ERROR,
    handle_exchange,
    handle_hello,
    handle_refresh,
    handle_url,
)


console = Console()


def setup_logging(debug: bool = False):
    """Configure the root logger for CLI use"""
    level = logging.DEBUG if debug else getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(console_handler)

    # httpx logs every request at INFO
    if not debug:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="HMRC Making Tax Digital OAuth helper")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    parser.add_argument("--base-url", default=None, help="Override API base URL (default: from config)")
    parser.add_argument("--client-id", default=None, help="Client ID (default: HMRC_CLIENT_ID)")
    parser.add_argument("--client-secret", default=None, help="Client secret (default: HMRC_CLIENT_SECRET)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    url_parser = subparsers.add_parser("url", help="Print the authorisation URL")
    url_parser.add_argument("--scope", required=True, help="Scope to request, e.g. read:vat")
    url_parser.add_argument("--redirect-uri", default=settings.DEFAULT_REDIRECT_URI)
    url_parser.add_argument("--state", default=None, help="Opaque value echoed back on redirect")
    url_parser.add_argument("--open", action="store_true", help="Open the URL in a browser")

    exchange_parser = subparsers.add_parser("exchange", help="Exchange an authorisation code for tokens")
    exchange_parser.add_argument("--code", required=True, help="Authorisation code")
    exchange_parser.add_argument("--redirect-uri", default=settings.DEFAULT_REDIRECT_URI)

    refresh_parser = subparsers.add_parser("refresh", help="Refresh tokens")
    refresh_parser.add_argument("--refresh-token", required=True)

    hello_parser = subparsers.add_parser("hello", help="Call a HelloWorld endpoint")
    hello_parser.add_argument("endpoint", choices=["world", "application", "user"])
    hello_parser.add_argument("--access-token", default=None, help="Access token for the user endpoint")

    return parser


def run(argv=None) -> int:
    """Parse arguments, run one command and return the exit code"""
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    overrides = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.client_id:
        overrides["client_id"] = args.client_id
    if args.client_secret:
        overrides["client_secret"] = args.client_secret

    try:
        auth = Authenticator.from_settings(**overrides)

        if args.command == "url":
            return handle_url(auth, console, args.scope, args.redirect_uri, args.state, args.open)
        if args.command == "exchange":
            return handle_exchange(auth, console, args.code, args.redirect_uri)
        if args.command == "refresh":
            auth.set_tokens(refresh_token=args.refresh_token)
            return handle_refresh(auth, console)
        if args.access_token:
            auth.set_tokens(access_token=args.access_token)
        return handle_hello(auth, console, args.endpoint)

    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return EXIT_CONFIG_ERROR
    except TransportError as e:
        console.print(f"[red]Network error:[/red] {e}")
        return EXIT_TRANSPORT_ERROR


def main():
    """Entry point for the CLI"""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
