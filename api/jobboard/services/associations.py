from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import asyncpg  # type: ignore[import-untyped]


@dataclass(frozen=True, slots=True)
class AssociationTable:
    """A many-to-many map keyed by ``(owner_column, tag_column)``.

    Identifiers are only ever taken from the module-level constants below, so
    they are safe to place in statement text. Ids are always bound.
    """

    name: str
    owner_column: str
    tag_column: str


JOB_SKILLS = AssociationTable("job_skill_map", "job_id", "skill_id")
JOB_CATEGORIES = AssociationTable("job_category_map", "job_id", "category_id")
JOB_FACILITIES = AssociationTable("job_facility_map", "job_id", "facility_id")

JOB_ASSOCIATION_TABLES: tuple[AssociationTable, ...] = (JOB_SKILLS, JOB_CATEGORIES, JOB_FACILITIES)


def coerce_tag_ids(values: Any) -> list[int]:
    """Return unique integer ids in first-seen order; non-numeric entries are dropped."""
    if values is None:
        return []
    if not isinstance(values, (list, tuple, set, frozenset)):
        values = [values]

    seen: set[int] = set()
    tag_ids: list[int] = []
    for value in values:
        tag_id = _coerce_tag_id(value)
        if tag_id is None or tag_id in seen:
            continue
        seen.add(tag_id)
        tag_ids.append(tag_id)
    return tag_ids


def _coerce_tag_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lstrip("-").isdigit():
            return int(stripped)
    return None


async def add_associations(
    conn: asyncpg.Connection,
    *,
    owner_id: int,
    tag_ids: Any,
    table: AssociationTable,
) -> int:
    """Insert one row per tag id, ignoring rows that already exist."""
    normalized = coerce_tag_ids(tag_ids)
    if not normalized:
        return 0
    await conn.execute(
        f"""
        insert into {table.name} ({table.owner_column}, {table.tag_column})
        select $1, tag_id
        from unnest($2::int[]) as t(tag_id)
        on conflict do nothing
        """,
        owner_id,
        normalized,
    )
    return len(normalized)


async def delete_associations(
    conn: asyncpg.Connection,
    *,
    table: AssociationTable,
    owner_id: int | None = None,
) -> None:
    """Delete the association rows of one owner, or of every owner when ``owner_id`` is None."""
    if owner_id is None:
        await conn.execute(f"delete from {table.name}")
        return
    await conn.execute(
        f"delete from {table.name} where {table.owner_column} = $1",
        owner_id,
    )


async def replace_associations(
    conn: asyncpg.Connection,
    *,
    owner_id: int,
    tag_ids: Any,
    table: AssociationTable,
) -> list[int]:
    """Replace the full association set of ``owner_id`` in ``table``.

    Runs on the caller's connection and never commits; the caller owns the
    transaction. Replaying the same set leaves the same rows behind.
    """
    normalized = coerce_tag_ids(tag_ids)
    await delete_associations(conn, table=table, owner_id=owner_id)
    await add_associations(conn, owner_id=owner_id, tag_ids=normalized, table=table)
    return normalized
