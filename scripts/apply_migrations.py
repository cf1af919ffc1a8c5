#!/usr/bin/env python3
"""Apply the SQL files under db/migrations to JB_DATABASE_URL in name order."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path

import asyncpg  # type: ignore[import-untyped]

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "db" / "migrations"


def migration_files(directory: Path = MIGRATIONS_DIR) -> list[Path]:
    return sorted(path for path in directory.glob("*.sql") if path.is_file())


async def apply_migrations(database_url: str, files: list[Path]) -> None:
    conn = await asyncpg.connect(database_url)
    try:
        for path in files:
            async with conn.transaction():
                await conn.execute(path.read_text(encoding="utf-8"))
            print(f"applied {path.name}")
    finally:
        await conn.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply job board migrations.")
    parser.add_argument(
        "--database-url",
        default=os.getenv("JB_DATABASE_URL") or os.getenv("DATABASE_URL"),
        help="Postgres DSN (defaults to JB_DATABASE_URL)",
    )
    parser.add_argument("--dry-run", action="store_true", help="List migrations without applying them")
    args = parser.parse_args()

    files = migration_files()
    if args.dry_run:
        for path in files:
            print(path.name)
        return

    if not args.database_url:
        parser.error("a database URL is required (set JB_DATABASE_URL or pass --database-url)")
    try:
        asyncio.run(apply_migrations(args.database_url, files))
    except (asyncpg.PostgresError, OSError) as exc:
        print(f"migration failed: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
