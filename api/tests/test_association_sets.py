from __future__ import annotations

import asyncio

import pytest

from jobboard.services.associations import (
    JOB_CATEGORIES,
    JOB_FACILITIES,
    JOB_SKILLS,
    add_associations,
    coerce_tag_ids,
    delete_associations,
    replace_associations,
)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (None, []),
        ([], []),
        ([3, 1, 3, 2], [3, 1, 2]),
        (["4", " 5 ", "x", 4], [4, 5]),
        ([1.0, 2.5, True, None], [1]),
        ("7", [7]),
        ({"nested": 1}, []),
    ],
)
def test_coerce_tag_ids(values: object, expected: list[int]) -> None:
    assert coerce_tag_ids(values) == expected


def test_replace_deletes_then_inserts_bound_ids(fake_conn) -> None:
    result = asyncio.run(replace_associations(fake_conn, owner_id=11, tag_ids=[2, "3", 2], table=JOB_SKILLS))

    assert result == [2, 3]
    assert fake_conn.statements()[0] == "delete from job_skill_map where job_id = $1"
    assert fake_conn.statements()[1].startswith("insert into job_skill_map (job_id, skill_id)")
    assert "on conflict do nothing" in fake_conn.statements()[1]
    assert fake_conn.calls[0][1] == (11,)
    assert fake_conn.calls[1][1] == (11, [2, 3])


def test_replace_with_empty_set_only_deletes(fake_conn) -> None:
    result = asyncio.run(replace_associations(fake_conn, owner_id=11, tag_ids=[], table=JOB_CATEGORIES))

    assert result == []
    assert fake_conn.statements() == ["delete from job_category_map where job_id = $1"]


def test_replaying_the_same_set_issues_the_same_statements(fake_conn) -> None:
    async def replay() -> None:
        await replace_associations(fake_conn, owner_id=5, tag_ids=[1, 2], table=JOB_FACILITIES)
        await replace_associations(fake_conn, owner_id=5, tag_ids=[1, 2], table=JOB_FACILITIES)

    asyncio.run(replay())

    assert fake_conn.calls[:2] == fake_conn.calls[2:]


def test_add_skips_statement_when_no_ids_survive(fake_conn) -> None:
    count = asyncio.run(add_associations(fake_conn, owner_id=1, tag_ids=["x"], table=JOB_SKILLS))

    assert count == 0
    assert fake_conn.statements() == []


def test_delete_without_owner_clears_table(fake_conn) -> None:
    asyncio.run(delete_associations(fake_conn, table=JOB_FACILITIES))

    assert fake_conn.statements() == ["delete from job_facility_map"]
    assert fake_conn.calls[0][1] == ()


def test_statement_failure_propagates_to_caller(fake_conn) -> None:
    fake_conn.fail_on("insert into job_facility_map", RuntimeError("boom"))

    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(replace_associations(fake_conn, owner_id=1, tag_ids=[99], table=JOB_FACILITIES))
