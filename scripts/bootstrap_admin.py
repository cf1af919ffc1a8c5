#!/usr/bin/env python3
"""Emit deterministic SQL that assigns a job board role to an existing user."""

from __future__ import annotations

import argparse


def _quote_sql(value: str) -> str:
    escaped = value.replace("'", "''")
    return f"'{escaped}'"


def render_sql(*, role: str, user_id: int | None, email: str | None) -> str:
    role_value = _quote_sql(role)

    if user_id is not None:
        target_where = f"id = {int(user_id)}"
    else:
        assert email is not None
        target_where = f"lower(email) = lower({_quote_sql(email)})"

    return f"""-- Job board role bootstrap SQL
-- Run this in a privileged Postgres session against JB_DATABASE_URL.

update users
set role = {role_value}
where {target_where};
"""


def main() -> None:
    parser = argparse.ArgumentParser(description="Emit SQL to assign a job board role to a user.")
    parser.add_argument(
        "--role",
        choices=["user", "recruiter", "admin"],
        default="admin",
        help="Role to store in users.role",
    )
    identity_group = parser.add_mutually_exclusive_group(required=True)
    identity_group.add_argument("--user-id", type=int, help="users.id of the target account")
    identity_group.add_argument("--email", help="users.email of the target account")
    args = parser.parse_args()

    print(render_sql(role=args.role, user_id=args.user_id, email=args.email))


if __name__ == "__main__":
    main()
