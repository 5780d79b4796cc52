#!/usr/bin/env python3
"""
Rank historical propositions most similar to a given one.

Usage:
    python find_similar.py 2024-1              # Top matches for Prop 1 of 2024
    python find_similar.py 2024-1 --limit 10   # More matches
    python find_similar.py 2024-1 --api URL    # Use another propositions API
"""

import asyncio
import sys
from datetime import date
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.errors import InvalidInputError, NotFoundError
from app.services.similarity import SimilarityService
from ballot_client import PropositionClient, set_api_config
from settings import API_TIMEOUT, SIMILAR_LIMIT
from settings.logging import setup_logging

logger = setup_logging(to_file=True)


def _option(args: list[str], name: str) -> str | None:
    if name in args and args.index(name) + 1 < len(args):
        return args[args.index(name) + 1]
    return None


async def run(proposition_id: str, limit: int) -> None:
    async with PropositionClient() as client:
        comparisons = await SimilarityService(client).find_similar_by_id(
            proposition_id, current_year=date.today().year, limit=limit
        )

    if not comparisons:
        print(f"\nNo similar propositions found for {proposition_id}.\n")
        return

    print(f"\nSimilar to {proposition_id}:")
    for c in comparisons:
        print(f"  {c.proposition_id:<10} {c.similarity:.2f}  {c.result:<6}  {c.yes_percentage:.1f}% yes")
    print()


def main():
    args = sys.argv[1:]
    if not args or args[0].startswith("-"):
        print(__doc__)
        sys.exit(1)

    if api := _option(args, "--api"):
        set_api_config(api, API_TIMEOUT)

    limit = _option(args, "--limit")
    try:
        asyncio.run(run(args[0], int(limit) if limit else SIMILAR_LIMIT))
    except (InvalidInputError, NotFoundError) as e:
        logger.error(e.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
