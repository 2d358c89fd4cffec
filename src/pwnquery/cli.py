"""Command-line interface for pwnquery.

One sub-command per endpoint; results are printed as JSON.
"""

import argparse
import json
import sys

import structlog
from pydantic import ValidationError

from pwnquery import __version__
from pwnquery.exceptions import ConfigurationError, PwnQueryError

# Configure structlog for simple console output on stderr
structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.BoundLogger,
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    cache_logger_on_first_use=True,
)


def get_logger(name: str):
    """Get a structured logger."""
    return structlog.get_logger(name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwnquery",
        description="Query the Have I Been Pwned breach API",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--user-agent",
        default=None,
        help="User agent sent with every request (default: PWNQUERY_USER_AGENT)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="API base URL (default: PWNQUERY_BASE_URL)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    account_parser = subparsers.add_parser("account", help="Breaches an account appears in")
    account_parser.add_argument("account", help="Email address or username")
    account_parser.add_argument(
        "--truncate",
        action="store_true",
        help="Return breach names only",
    )
    account_parser.add_argument("--domain", default=None, help="Only breaches on this domain")

    breaches_parser = subparsers.add_parser("breaches", help="List all breaches")
    breaches_parser.add_argument("--domain", default=None, help="Only breaches on this domain")

    breach_parser = subparsers.add_parser("breach", help="Show a single breach")
    breach_parser.add_argument("name", help="Breach name (e.g., Adobe)")

    subparsers.add_parser("dataclasses", help="List all data classes")

    pastes_parser = subparsers.add_parser("pastes", help="Pastes an account appears in")
    pastes_parser.add_argument("account", help="Email address")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    log = get_logger(args.command)

    try:
        return run_query(args)
    except PwnQueryError as e:
        log.error("Query failed", error=str(e))
        return 1


def run_query(args: argparse.Namespace) -> int:
    """Run the selected query and print the result."""
    from pwnquery.config import get_settings
    from pwnquery.executors import PwnClient

    try:
        settings = get_settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid settings", detail=str(e)) from e

    config = settings.client_config()
    if args.user_agent is not None:
        config = config.model_copy(update={"user_agent": args.user_agent})
    if args.base_url is not None:
        config = config.model_copy(update={"base_url": args.base_url})

    if not config.user_agent.strip():
        raise ConfigurationError("A user agent is required", setting="PWNQUERY_USER_AGENT")

    with PwnClient(config) as client:
        if args.command == "account":
            result = client.account_breaches(args.account, truncate=args.truncate, domain=args.domain)
        elif args.command == "breaches":
            result = client.all_breaches(domain=args.domain)
        elif args.command == "breach":
            result = client.breach(args.name)
        elif args.command == "pastes":
            result = client.pastes(args.account)
        else:
            print(json.dumps(client.data_classes(), indent=2))
            return 0

    records = [r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in result]
    print(json.dumps(records, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
