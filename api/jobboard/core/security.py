from fastapi import Header, HTTPException, status

from jobboard.core.auth import Principal, parse_role


async def get_principal(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_role: str | None = Header(default=None, alias="X-User-Role"),
) -> Principal:
    """Resolve the caller identity forwarded by the authentication gateway."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "unauthenticated", "message": "caller identity requires X-User-Id"},
        )

    try:
        user_id = int(x_user_id.strip())
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "unauthenticated", "message": "invalid X-User-Id"},
        ) from exc

    return Principal(user_id=user_id, role=parse_role(x_user_role))
