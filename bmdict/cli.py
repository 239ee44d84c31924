"""
Interactive dictionary lookup.

Usage:
    bmdict --wordlist data/wordnet.json
    bmdict --query kaks
    bmdict --query basket --mode definition

Inside the prompt:
    <text>   search in the current mode
    <n>      show details for suggestion n of the last search
    :word    search by word
    :def     search in definitions
    :stats   show cache and index statistics
    :quit    exit
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from .config import Settings
from .dictionary_service import DictionaryService
from .display import SUGGESTION_DISPLAY_LIMIT, format_entry, format_suggestion
from .models import SearchMode, WordEntry
from .search_engine import TieredSearchEngine

logger = logging.getLogger(__name__)


def _print_suggestions(query: str, results: Sequence[WordEntry], limit: int) -> None:
    if not results:
        print("  No results found")
        return
    for i, entry in enumerate(results[:limit], 1):
        print(f"  {i:2d}. {format_suggestion(entry, query)}")
    if len(results) > limit:
        print(f"  ... {len(results) - limit} more")


def run_prompt(service: DictionaryService, limit: int = SUGGESTION_DISPLAY_LIMIT) -> None:
    """Read queries from stdin until EOF or :quit."""
    last_query = ""
    last_results: Sequence[WordEntry] = ()

    while True:
        try:
            line = input(f"{service.mode.value}> ").strip()
        except EOFError:
            print()
            break

        if not line:
            continue
        if line in (":quit", ":q"):
            break
        if line == ":word":
            service.set_mode(SearchMode.WORD)
            continue
        if line == ":def":
            service.set_mode(SearchMode.DEFINITION)
            continue
        if line == ":stats":
            print(json.dumps(service.engine.statistics(), indent=2))
            continue
        if line.isdigit() and last_results:
            idx = int(line) - 1
            if 0 <= idx < min(len(last_results), limit):
                print(format_entry(last_results[idx]))
            else:
                print(f"  Pick a number between 1 and {min(len(last_results), limit)}")
            continue

        last_query = line
        last_results = service.search(line)
        _print_suggestions(last_query, last_results, limit)
        stats = service.engine.last_stats
        if stats is not None:
            logger.debug(
                f"{stats.latency_ms:.2f}ms cache_hit={stats.cache_hit} "
                f"tier1={stats.tier1_count} tier2={stats.tier2_count}"
            )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lookup tool."""
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description='Search the BM dictionary word list')
    parser.add_argument('--wordlist', default=settings.wordlist, help='Path or URL of the JSON word list')
    parser.add_argument('--query', help='Run a single search and exit')
    parser.add_argument('--mode', choices=[m.value for m in SearchMode], default=SearchMode.WORD.value,
                        help='Search mode (default: word)')
    parser.add_argument('--limit', type=int, default=SUGGESTION_DISPLAY_LIMIT,
                        help='Suggestions to display (default: 10)')
    parser.add_argument('--log-level', default=settings.log_level, help='Logging level (default: INFO)')

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(levelname)s: %(message)s')

    engine = TieredSearchEngine.from_settings(settings, show_progress=args.query is None)
    service = DictionaryService(settings=settings, engine=engine)
    service.set_mode(args.mode)

    if not service.load(args.wordlist):
        print(f"Error: {service.last_error}", file=sys.stderr)
        return 1

    if args.query is not None:
        _print_suggestions(args.query, service.search(args.query), args.limit)
        return 0

    run_prompt(service, limit=args.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
