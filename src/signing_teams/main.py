"""
Command-line entry point — wires dependencies and prints discovered teams.

Composition root: loads settings, configures structlog, creates the
`security` adapter and runs discovery inside a LoggingExecutionContext.

    $ signing-teams list
    Acme Corp (ABC123DEF4)
    Example Ltd (ZYX987WVU6)

    $ signing-teams list --json
    [{"name": "Acme Corp", "id": "ABC123DEF4"}, ...]

Exit status: 0 on success (including no teams), 1 when discovery fails,
2 on a configuration error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

import structlog
from railway import LoggingExecutionContext

from signing_teams import __version__
from signing_teams.adapters.security_command import SecurityCommandProvider
from signing_teams.config import AppSettings
from signing_teams.domain.models import Team
from signing_teams.pipeline import find_development_teams

EXIT_OK = 0
EXIT_DISCOVERY_FAILED = 1
EXIT_CONFIGURATION_ERROR = 2


def configure_structlog(log_level: str = "WARNING") -> None:
    """
    Configure structlog for human-readable console logging on stderr.

    stdout carries the command's output only.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _create_provider(settings: AppSettings) -> SecurityCommandProvider:
    return SecurityCommandProvider(
        executable=settings.security.executable,
        certificate_name=settings.security.certificate_name,
        keychains=settings.security.keychains,
    )


def render_teams(teams: Sequence[Team], as_json: bool = False) -> str:
    """Render teams one per line as `name (id)`, or as a JSON array."""
    if as_json:
        return json.dumps([{"name": team.name, "id": team.id} for team in teams])
    return "\n".join(f"{team.name} ({team.id})" for team in teams)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signing-teams",
        description="List the code-signing development teams found in the keychain.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        help="Override SIGNING_TEAMS_LOG_LEVEL (e.g. DEBUG, INFO, WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_list = subparsers.add_parser("list", help="List available development teams")
    parser_list.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON array of {name, id} objects",
    )
    return parser


def _list_teams(settings: AppSettings, as_json: bool) -> int:
    log = structlog.get_logger()
    provider = _create_provider(settings)
    ctx = LoggingExecutionContext(operation="DiscoverTeams")

    result = ctx.execute(lambda: find_development_teams(provider))

    if result.is_failure():
        error = result.error()
        log.error("app.discovery_failed", code=error.code.value, error=error.message)
        print(f"error: {error.message}", file=sys.stderr)  # noqa: T201
        return EXIT_DISCOVERY_FAILED

    teams = result.value()
    if not teams and not as_json:
        print("No development teams found.", file=sys.stderr)  # noqa: T201
        return EXIT_OK

    print(render_teams(teams, as_json=as_json))  # noqa: T201
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, load settings, and run the requested command."""
    args = build_parser().parse_args(argv)

    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        return EXIT_CONFIGURATION_ERROR

    configure_structlog(args.log_level or settings.log_level)
    structlog.get_logger().debug(
        "app.starting",
        version=__version__,
        executable=settings.security.executable,
        keychains=settings.security.keychains,
    )

    match args.command:
        case "list":
            return _list_teams(settings, as_json=args.json)
    return EXIT_CONFIGURATION_ERROR  # pragma: no cover


if __name__ == "__main__":
    sys.exit(main())
