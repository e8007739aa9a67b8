#!/usr/bin/env python3
"""
Seed workout categories and exercises from a YAML file.

Usage:
    python scripts/seed_categories.py                          # scripts/seed_data.yaml
    python scripts/seed_categories.py --file my_categories.yaml
    python scripts/seed_categories.py --database-url sqlite:///./data/dev.db

Entries go through the same validators as the admin API. Invalid entries are
reported and skipped; categories whose name already exists are left alone.
"""

import argparse
import asyncio
import logging
import os
import sys

import yaml
from sqlalchemy import select

from volleytrack import database
from volleytrack.models import WorkoutCategory
from volleytrack.services.categories import add_exercise, create_category
from volleytrack.validators.categories import validate_create_category, validate_create_exercise

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = os.path.join(os.path.dirname(__file__), "seed_data.yaml")


def load_seed_file(path: str) -> list[dict]:
    with open(path, "r", encoding="utf-8") as file:
        data = yaml.safe_load(file) or {}
    return data.get("categories", [])


async def seed(entries: list) -> dict:
    """Create categories that do not exist yet. Returns counts per outcome."""
    counts = {"created": 0, "skipped": 0, "invalid": 0, "exercises": 0}

    async with database.async_session_maker() as session:
        for entry in entries:
            result = validate_create_category(entry)
            if not result.ok:
                label = entry.get("name") if isinstance(entry, dict) else entry
                logger.warning(f"Invalid category {label!r}: {result.message}")
                counts["invalid"] += 1
                continue

            existing = await session.execute(
                select(WorkoutCategory.id).where(WorkoutCategory.name == result.value.name)
            )
            if existing.first():
                counts["skipped"] += 1
                continue

            category = await create_category(session, result.value)
            counts["created"] += 1

            for raw_exercise in entry.get("exercises") or []:
                exercise = validate_create_exercise(raw_exercise)
                if not exercise.ok:
                    logger.warning(f"Invalid exercise in {category.name!r}: {exercise.message}")
                    counts["invalid"] += 1
                    continue
                await add_exercise(session, category.id, exercise.value)
                counts["exercises"] += 1

    return counts


async def main(path: str, database_url: str = None) -> dict:
    await database.init_db(database_url)
    try:
        return await seed(load_seed_file(path))
    finally:
        await database.engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed workout categories")
    parser.add_argument("--file", default=DEFAULT_SEED_FILE, help="YAML file with a 'categories' list")
    parser.add_argument("--database-url", default=None, help="Defaults to $DATABASE_URL")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if not os.path.exists(args.file):
        print(f"Seed file not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    counts = asyncio.run(main(args.file, args.database_url))
    print(
        f"Created {counts['created']} categories with {counts['exercises']} exercises "
        f"({counts['skipped']} already present, {counts['invalid']} invalid)"
    )
