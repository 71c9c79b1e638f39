#!/usr/bin/env python3
"""Initialize the dogs table and optionally seed it from a YAML file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from kennel.config import get_config
from kennel.db.database import Database
from kennel.db.dog_repo import DogRepository


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the dogs table")
    parser.add_argument("--db-path", type=str, help="Override database path")
    parser.add_argument("--drop", action="store_true", help="Drop the dogs table first")
    parser.add_argument("--seed", type=str, help="YAML file with dog definitions")
    parser.add_argument("--list", action="store_true", help="Print every dog when done")
    args = parser.parse_args(argv)

    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    db = Database(path=args.db_path or config.db_path)
    repo = DogRepository(db)
    try:
        if args.drop:
            repo.drop_table()
        repo.create_table()
        print(f"Database initialized at: {db.path}")

        if args.seed:
            _seed_dogs(repo, Path(args.seed))

        if args.list:
            for dog in repo.all():
                print(f"  {dog}")
    finally:
        db.close()
    print("Done.")
    return 0


def _seed_dogs(repo: DogRepository, path: Path) -> int:
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    seeded = 0
    for d in data.get("dogs", []):
        try:
            dog = repo.find_or_create_by(
                name=d["name"],
                breed=d.get("breed"),
                color=d.get("color"),
                instagram=d.get("instagram"),
            )
            print(f"  Seeded dog: {dog}")
            seeded += 1
        except Exception as e:
            print(f"  Skipping {d!r}: {e}")
    return seeded


if __name__ == "__main__":
    sys.exit(main())
