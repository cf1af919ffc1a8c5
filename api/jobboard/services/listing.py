from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from jobboard.core.auth import Principal
from jobboard.services.associations import JOB_CATEGORIES, JOB_FACILITIES, JOB_SKILLS, AssociationTable
from jobboard.services.moderation import visibility_condition

DEFAULT_SORT = "newest"
SORT_ORDERS: dict[str, str] = {
    "newest": "j.created_at desc, j.id desc",
    "oldest": "j.created_at asc, j.id asc",
    "a-z": "j.position asc, j.id asc",
    "z-a": "j.position desc, j.id desc",
}
SEARCH_COLUMNS = ("j.company", "j.position", "j.job_status", "j.job_type", "j.job_location")


def _tag_array_sql(table: AssociationTable, label: str) -> str:
    return (
        f"array(select m.{table.tag_column} from {table.name} m "
        f"where m.{table.owner_column} = j.id order by m.{table.tag_column}) as {label}"
    )


JOB_AGGREGATE_COLUMNS_SQL = f"""
  j.id,
  j.company,
  j.position,
  j.job_status,
  j.job_type,
  j.job_location,
  j.workplace_type,
  j.created_by,
  j.job_vacancy,
  j.job_deadline,
  j.job_description,
  j.job_contact,
  j.visibility_status,
  j.admin_comment,
  j.eligibility,
  j.student_currently_studying,
  j.year_selection,
  j.experience_min,
  j.experience_max,
  j.created_at,
  j.updated_at,
  sd.salary_type,
  sd.fixed_amount,
  sd.min_amount,
  sd.max_amount,
  sd.incentive_details,
  sd.is_salary_hidden,
  sd.is_negotiable,
  sd.currency,
  sd.salary_period,
  {_tag_array_sql(JOB_SKILLS, "skills")},
  {_tag_array_sql(JOB_CATEGORIES, "categories")},
  {_tag_array_sql(JOB_FACILITIES, "facilities")}
"""

JOB_AGGREGATE_FROM_SQL = "from jobs j left join salary_details sd on sd.id = j.id"


@dataclass(slots=True)
class ListingQuery:
    sql: str
    params: list[Any]
    count_sql: str
    count_params: list[Any]
    sort: str
    page: int
    page_size: int
    offset: int


def resolve_sort(sort: str | None) -> str:
    if isinstance(sort, str) and sort.strip().lower() in SORT_ORDERS:
        return sort.strip().lower()
    return DEFAULT_SORT


def resolve_page(page: Any) -> int:
    try:
        value = int(page)
    except (TypeError, ValueError):
        return 1
    return value if value >= 1 else 1


def resolve_page_size(page_size: Any, *, default: int, maximum: int) -> int:
    try:
        value = int(page_size)
    except (TypeError, ValueError):
        return default
    if value < 1:
        return default
    return min(value, maximum)


def compute_page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return math.ceil(total / page_size)


def escape_like(text: str) -> str:
    """Escape ``\\``, ``%`` and ``_`` so ``text`` matches literally inside ``like ... escape '\\'``."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_listing_query(
    principal: Principal,
    *,
    search: str | None = None,
    sort: str | None = None,
    page: Any = None,
    page_size: Any = None,
    default_page_size: int = 5,
    max_page_size: int = 100,
) -> ListingQuery:
    """Build the page query and its count query for a role-filtered job listing.

    The role filter is always the first condition. Filter values, limit and
    offset are bound parameters; only whitelisted fragments reach the SQL text.
    """
    conditions: list[str] = []
    params: list[Any] = []

    def bind(value: Any) -> str:
        params.append(value)
        return f"${len(params)}"

    role_condition = visibility_condition(principal, bind)
    if role_condition is not None:
        conditions.append(role_condition)

    normalized_search = search.strip() if isinstance(search, str) else None
    if normalized_search:
        token = bind(f"%{escape_like(normalized_search)}%")
        conditions.append(
            "(" + " or ".join(f"{column} ilike {token} escape '\\'" for column in SEARCH_COLUMNS) + ")"
        )

    where_sql = " and ".join(conditions) if conditions else "true"
    count_params = list(params)

    resolved_sort = resolve_sort(sort)
    resolved_page = resolve_page(page)
    resolved_page_size = resolve_page_size(page_size, default=default_page_size, maximum=max_page_size)
    offset = (resolved_page - 1) * resolved_page_size

    limit_token = bind(resolved_page_size)
    offset_token = bind(offset)

    sql = f"""
        select
        {JOB_AGGREGATE_COLUMNS_SQL}
        {JOB_AGGREGATE_FROM_SQL}
        where {where_sql}
        order by {SORT_ORDERS[resolved_sort]}
        limit {limit_token}
        offset {offset_token}
        """
    count_sql = f"""
        select count(*)
        from jobs j
        where {where_sql}
        """
    return ListingQuery(
        sql=sql,
        params=params,
        count_sql=count_sql,
        count_params=count_params,
        sort=resolved_sort,
        page=resolved_page,
        page_size=resolved_page_size,
        offset=offset,
    )
