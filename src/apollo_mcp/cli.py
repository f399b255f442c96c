"""Apollo.io command-line tool.

Usage: apollo-io-cli <command> [--key value | --key=value | --json '{...}']

Options are free-form: every `--key` becomes a field of the Apollo request.
Results are printed to stdout as indented JSON; diagnostics go to stderr.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Optional, Sequence

import httpx

from .config import ConfigError, configure_logging, load_config
from .core.client import ApolloClient
from .core.errors import ApolloError

logger = logging.getLogger(__name__)

COMMANDS: dict[str, str] = {
    "search-people": "Search for people",
    "search-companies": "Search for companies",
    "enrich-person": "Enrich person data by email/LinkedIn",
    "enrich-company": "Enrich company data by domain",
    "bulk-enrich-people": "Bulk enrich multiple people",
    "bulk-enrich-companies": "Bulk enrich multiple companies",
    "org-jobs": "Get job postings for an organization",
    "org-info": "Get complete organization information",
    "search-news": "Search for news articles",
}

HELP_FLAGS = ("--help", "-h")

# Apollo rejects bare scalars for these fields; they are always sent as lists.
ARRAY_FIELDS: frozenset[str] = frozenset({
    # People search
    "person_titles",
    "seniority",
    "departments",
    "industries",
    "technologies",
    "company_domains",
    "person_locations",
    "contact_email_status",
    "years_of_experience",
    "education_degrees",
    "education_schools",
    # Company search
    "organization_locations",
    "organization_not_locations",
    "q_organization_keyword_tags",
    "organization_num_employees_ranges",
    "currently_using_any_of_technology_uids",
    "organization_ids",
    "q_organization_job_titles",
    # Common
    "locations",
})

# Besides ARRAY_FIELDS, these also count as a filter for the --q advisory.
EXTRA_PEOPLE_FILTERS = frozenset({"q_organization_domains", "contact_email_status"})

USAGE = """
Apollo.io CLI Tool

Usage: apollo-io-cli <command> [options]

Commands:
{commands}

Environment Variables:
  APOLLO_API_KEY          Your Apollo.io API key (required)
  APOLLO_BASE_URL         Override the API base URL (optional)
  APOLLO_LOG_LEVEL        Log level for diagnostics on stderr (default: WARNING)

Examples:
  # Search for people
  apollo-io-cli search-people --q "Software Engineer" --person_titles "CEO" --page 1

  # Enrich person by email
  apollo-io-cli enrich-person --email "tim@apollo.io"

  # Search companies
  apollo-io-cli search-companies --q "technology" --organization_num_employees_ranges "11,20"

  # Get organization jobs
  apollo-io-cli org-jobs --id "5f5e2b4b4f3f3d0001234567"

Options are passed as --key value or --key=value
For arrays, use comma-separated values: --titles "CEO,CTO,VP"
For JSON input, use --json '{{"key": "value"}}'
"""


class HelpRequested(Exception):
    """No command, or an explicit --help / -h."""


class CLIError(Exception):
    """A user error on the command line; `show_usage` reprints the help text."""

    def __init__(self, message: str, show_usage: bool = False):
        super().__init__(message)
        self.show_usage = show_usage


def usage() -> str:
    width = max(len(name) for name in COMMANDS) + 4
    commands = "\n".join(f"  {name.ljust(width)}{desc}" for name, desc in COMMANDS.items())
    return USAGE.format(commands=commands)


def parse_value(value: str) -> Any:
    """Coerce a raw option value: integer, boolean, comma list, or string."""
    if value.isdigit() and value.isascii():
        return int(value)
    if value == "true":
        return True
    if value == "false":
        return False
    if "," in value:
        return [part.strip() for part in value.split(",")]
    return value


def normalize_array_fields(params: dict[str, Any]) -> dict[str, Any]:
    """Wrap any scalar in ARRAY_FIELDS into a one-element list, in place."""
    for key, value in params.items():
        if key in ARRAY_FIELDS and not isinstance(value, list):
            params[key] = [value]
    return params


def parse_args(argv: Sequence[str]) -> tuple[str, dict[str, Any]]:
    """Split argv into a command name and its request parameters.

    Raises:
        HelpRequested: argv is empty or starts with a help flag.
        CLIError: the --json value is not valid JSON.
    """
    if not argv or argv[0] in HELP_FLAGS:
        raise HelpRequested()

    command = argv[0]
    params: dict[str, Any] = {}

    i = 1
    while i < len(argv):
        arg = argv[i]

        if arg == "--json" and i + 1 < len(argv):
            try:
                blob = json.loads(argv[i + 1])
            except json.JSONDecodeError as exc:
                raise CLIError(f"Error parsing JSON: {exc}") from exc
            if not isinstance(blob, dict):
                raise CLIError("Error parsing JSON: --json expects an object")
            params.update(blob)
            i += 2
            continue

        if arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            params[key] = parse_value(value)
        elif arg.startswith("--"):
            key = arg[2:]
            if i + 1 < len(argv) and not argv[i + 1].startswith("--"):
                params[key] = parse_value(argv[i + 1])
                i += 1
            else:
                params[key] = True
        i += 1

    return command, normalize_array_fields(params)


def _is_truthy_flag(value: Any) -> bool:
    return value is True or value == "true"


def _pop_reveal_flags(params: dict[str, Any]) -> tuple[bool, bool]:
    return (
        _is_truthy_flag(params.pop("reveal_personal_emails", False)),
        _is_truthy_flag(params.pop("reveal_phone_number", False)),
    )


def _require_id(command: str, params: dict[str, Any]) -> str:
    org_id = params.pop("id", None)
    if not org_id:
        raise CLIError(f"Error: --id is required for {command} command")
    return str(org_id)


def _warn_bare_query(params: dict[str, Any]) -> None:
    has_filter = any(key in ARRAY_FIELDS or key in EXTRA_PEOPLE_FILTERS for key in params)
    if params.get("q") and not has_filter:
        print(
            "Warning: The --q parameter alone will return default results.\n"
            "For better results, combine --q with filters like:\n"
            "  --person_titles, --person_locations, --seniority, --departments, etc.\n"
            "\n"
            'Example: apollo-io-cli search-people --q "engineering" --person_titles "CTO"\n',
            file=sys.stderr,
        )


async def run_command(client: ApolloClient, command: str, params: dict[str, Any]) -> Any:
    """Dispatch one parsed command to the matching Apollo call.

    Usable on its own: a command name outside COMMANDS raises CLIError with
    `show_usage` set, the same failure `main` reports before loading config.
    """
    logger.debug("Running %s with fields %s", command, sorted(params))
    if command == "search-people":
        _warn_bare_query(params)
        return await client.search_people(params)
    if command == "search-companies":
        return await client.search_companies(params)
    if command == "enrich-person":
        reveal_emails, reveal_phone = _pop_reveal_flags(params)
        return await client.match_person(params, reveal_emails, reveal_phone)
    if command == "enrich-company":
        return await client.match_company(params)
    if command == "bulk-enrich-people":
        reveal_emails, reveal_phone = _pop_reveal_flags(params)
        return await client.bulk_match_people(params, reveal_emails, reveal_phone)
    if command == "bulk-enrich-companies":
        return await client.bulk_match_organizations(params)
    if command == "org-jobs":
        return await client.get_job_postings(_require_id(command, params))
    if command == "org-info":
        return await client.get_organization_info(_require_id(command, params))
    if command == "search-news":
        return await client.search_news(params)
    raise CLIError(f'Error: Invalid command "{command}"', show_usage=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the `apollo-io-cli` command. Returns the exit status."""
    configure_logging("WARNING")
    if argv is None:
        argv = sys.argv[1:]

    try:
        command, params = parse_args(argv)
    except HelpRequested:
        print(usage())
        return 0
    except CLIError as exc:
        print(exc, file=sys.stderr)
        return 1

    if command not in COMMANDS:
        print(f'Error: Invalid command "{command}"', file=sys.stderr)
        print(usage(), file=sys.stderr)
        return 1

    # Help and parse errors above must work without a key configured.
    try:
        config = load_config()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        result = asyncio.run(run_command(ApolloClient(config), command, params))
    except CLIError as exc:
        print(exc, file=sys.stderr)
        if exc.show_usage:
            print(usage(), file=sys.stderr)
        return 1
    except (ApolloError, httpx.HTTPError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        logger.debug("Unexpected failure running %s", command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
