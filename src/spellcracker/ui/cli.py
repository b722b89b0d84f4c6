from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from spellcracker.app import DEFAULT_SUGGESTION_LIMIT, CardLookupService, build_service
from spellcracker.config import ConfigurationError, configure_logging
from spellcracker.domain.errors import AliasSourceError, DataSourceError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import FrameType

    from spellcracker.domain.model import CatalogEntry, ResolvedReference

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {parsed}")
    return parsed


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Look up Witches' Revel cards")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup = subparsers.add_parser("lookup", help="Resolve a single card query")
    lookup.add_argument("query", nargs="+", help="Card name, fragment, acronym or alias")

    scan = subparsers.add_parser("scan", help="Extract [[card]] and {{card}} references")
    scan.add_argument(
        "text",
        nargs="?",
        default="-",
        help="Message text to scan, or '-' to read standard input (default: %(default)s)",
    )
    scan.add_argument(
        "--max-results",
        type=_positive_int,
        default=None,
        help="Maximum number of cards to return (defaults to RESULT_LIMIT)",
    )

    suggest = subparsers.add_parser("suggest", help="List card titles starting with a prefix")
    suggest.add_argument("prefix", help="Title prefix")
    suggest.add_argument(
        "--limit",
        type=_positive_int,
        default=DEFAULT_SUGGESTION_LIMIT,
        help="Maximum number of suggestions (default: %(default)s)",
    )

    aliases = subparsers.add_parser("aliases", help="Show the aliases of a card")
    aliases.add_argument("query", nargs="+", help="Card to look up")

    subparsers.add_parser("random", help="Show a random card")

    return parser.parse_args(list(argv))


def _entry_json(entry: CatalogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "title": entry.title,
        "titles": list(entry.titles),
        "prints": [
            {"expansion": printed.expansion_id, "number": printed.number}
            for printed in entry.prints
        ],
    }


def _reference_json(reference: ResolvedReference) -> dict[str, object]:
    return {"query": reference.query, "view": str(reference.view), **_entry_json(reference.entry)}


def _run(args: argparse.Namespace, service: CardLookupService) -> object:
    if args.command == "lookup":
        entry = service.lookup(" ".join(args.query))
        return _entry_json(entry) if entry is not None else None
    if args.command == "scan":
        text = sys.stdin.read() if args.text == "-" else args.text
        references = service.scan(text, max_results=args.max_results)
        return [_reference_json(reference) for reference in references]
    if args.command == "suggest":
        return [
            {"value": value, "name": name}
            for value, name in service.suggest(args.prefix, limit=args.limit)
        ]
    if args.command == "aliases":
        entry, names = service.aliases_for(" ".join(args.query))
        if entry is None:
            return None
        return {"title": entry.title, "aliases": list(names)}
    if args.command == "random":
        return _entry_json(service.random_card())
    raise ValueError(f"Unsupported command: {args.command}")


def main(
    argv: Sequence[str] | None = None,
    *,
    service_factory: Callable[[], CardLookupService] = build_service,
) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.WARNING)

    try:
        service = service_factory()
        result = _run(parsed_args, service)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except (DataSourceError, AliasSourceError):
        log.exception("Could not load card data")
        sys.exit(1)

    print(json.dumps(result, indent=2))  # noqa: T201
    if result is None:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
