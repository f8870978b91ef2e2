#!/usr/bin/env python3
"""
Seed the database with dog breeds and their sub-breeds.

The input is a JSON object mapping breed names to lists of sub-breed names
(the dog.ceo "list/all" format). Breeds that already exist only receive the
sub-breeds they are missing, so the script can be re-run safely.

Usage:
  python scripts/seed_breeds.py [--file path/to/dogs.json]
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from breedbook.application.use_cases.breeds import seed_breeds
from breedbook.config.settings import get_settings
from breedbook.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)

DEFAULT_DATA_FILE = Path(__file__).parent / "data" / "dogs.json"


def load_catalog(path: Path) -> dict[str, list[str]]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object of breed -> sub-breeds")
    return {str(name): [str(sub) for sub in subs or []] for name, subs in data.items()}


async def seed(path: Path) -> seed_breeds.SeedResult:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            return await seed_breeds.execute(uow, load_catalog(path))
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed dog breeds and sub-breeds")
    parser.add_argument(
        "--file",
        type=Path,
        default=DEFAULT_DATA_FILE,
        help=f"JSON file with breeds (default: {DEFAULT_DATA_FILE})",
    )
    args = parser.parse_args()

    if not args.file.exists():
        print(f"Error: '{args.file}' does not exist")
        sys.exit(1)

    print(f"Seeding database with breeds from {args.file}")
    result = asyncio.run(seed(args.file))
    print(
        f"Seeding complete: {result.breeds_created} breeds, "
        f"{result.sub_breeds_created} sub-breeds created"
    )
