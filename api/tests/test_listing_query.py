from __future__ import annotations

import pytest

from jobboard.core.auth import Principal, Role
from jobboard.services.listing import (
    SORT_ORDERS,
    build_listing_query,
    compute_page_count,
    resolve_page_size,
)

ADMIN = Principal(user_id=1, role=Role.ADMINISTRATOR)
RECRUITER = Principal(user_id=7, role=Role.CREATOR)
APPLICANT = Principal(user_id=9, role=Role.ORDINARY)


def _where(sql: str) -> str:
    return " ".join(sql.split()).rsplit(" where ", 1)[1].split(" order by", 1)[0]


def test_ordinary_listing_filters_to_accepted_jobs() -> None:
    query = build_listing_query(APPLICANT)

    assert _where(query.sql) == "j.visibility_status = $1"
    assert query.params == ["ACCEPTED", 5, 0]
    assert query.count_params == ["ACCEPTED"]


def test_creator_listing_includes_own_jobs() -> None:
    query = build_listing_query(RECRUITER)

    assert _where(query.sql) == "(j.visibility_status = $1 or j.created_by = $2)"
    assert query.params[:2] == ["ACCEPTED", 7]


def test_admin_listing_has_no_role_filter() -> None:
    query = build_listing_query(ADMIN)

    assert _where(query.sql) == "true"
    assert query.params == [5, 0]
    assert query.count_params == []


def test_search_is_bound_and_applied_after_role_filter() -> None:
    query = build_listing_query(APPLICANT, search="  engineer'; drop table jobs; --  ")

    where_sql = _where(query.sql)
    assert where_sql.startswith("j.visibility_status = $1 and (j.company ilike $2")
    assert "j.job_location ilike $2" in where_sql
    assert "drop table" not in query.sql
    assert query.params[1] == "%engineer'; drop table jobs; --%"
    assert query.count_params == query.params[:2]


@pytest.mark.parametrize(
    ("search", "expected"),
    [
        ("50%", "%50\\%%"),
        ("d_ta", "%d\\_ta%"),
        ("c:\\jobs", "%c:\\\\jobs%"),
        ("50%_off\\", "%50\\%\\_off\\\\%"),
    ],
)
def test_search_wildcards_are_escaped(search: str, expected: str) -> None:
    query = build_listing_query(ADMIN, search=search)

    assert query.params[0] == expected
    where_sql = _where(query.sql)
    assert where_sql.count("ilike $1 escape '\\'") == 5
    assert _where(query.count_sql) == where_sql


def test_blank_search_adds_no_condition() -> None:
    query = build_listing_query(APPLICANT, search="   ")

    assert "ilike" not in query.sql


@pytest.mark.parametrize(
    ("sort", "expected"),
    [
        (None, "newest"),
        ("oldest", "oldest"),
        ("A-Z", "a-z"),
        ("z-a", "z-a"),
        ("created_at; drop table jobs", "newest"),
    ],
)
def test_sort_is_whitelisted(sort: str | None, expected: str) -> None:
    query = build_listing_query(ADMIN, sort=sort)

    assert query.sort == expected
    assert f"order by {SORT_ORDERS[expected]}" in " ".join(query.sql.split())


def test_pagination_binds_limit_and_offset_last() -> None:
    query = build_listing_query(APPLICANT, page=3, page_size=5)

    assert query.offset == 10
    assert query.params[-2:] == [5, 10]
    flattened = " ".join(query.sql.split())
    assert flattened.endswith("limit $2 offset $3")


@pytest.mark.parametrize(
    ("page", "page_size", "expected_page", "expected_size"),
    [
        (None, None, 1, 5),
        (0, 0, 1, 5),
        ("2", "20", 2, 20),
        ("x", 500, 1, 100),
    ],
)
def test_page_inputs_are_clamped(page: object, page_size: object, expected_page: int, expected_size: int) -> None:
    query = build_listing_query(ADMIN, page=page, page_size=page_size)

    assert query.page == expected_page
    assert query.page_size == expected_size


def test_configured_default_page_size_is_used() -> None:
    assert resolve_page_size(None, default=10, maximum=50) == 10
    assert resolve_page_size(80, default=10, maximum=50) == 50


def test_count_query_uses_the_same_filter() -> None:
    query = build_listing_query(RECRUITER, search="data")

    assert _where(query.count_sql + " order by") == _where(query.sql)
    assert "limit" not in query.count_sql


@pytest.mark.parametrize(("total", "size", "expected"), [(0, 5, 0), (5, 5, 1), (12, 5, 3), (1, 100, 1)])
def test_page_count(total: int, size: int, expected: int) -> None:
    assert compute_page_count(total, size) == expected
