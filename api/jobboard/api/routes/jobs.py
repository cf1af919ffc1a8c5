import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status as http_status

from jobboard.core.auth import Principal, Role
from jobboard.core.security import get_principal
from jobboard.schemas.jobs import (
    CreatorJobOut,
    JobBulkDeleteOut,
    JobCreateRequest,
    JobDeleteOut,
    JobOut,
    JobPageOut,
    JobStatusPatchRequest,
    JobUpdateRequest,
    VisibilityStatus,
)
from jobboard.services.repository import (
    RepositoryConflictError,
    RepositoryError,
    RepositoryForbiddenError,
    RepositoryNotFoundError,
    RepositoryUnavailableError,
    RepositoryValidationError,
    get_repository,
)

router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[RepositoryError], int] = {
    RepositoryValidationError: http_status.HTTP_400_BAD_REQUEST,
    RepositoryForbiddenError: http_status.HTTP_403_FORBIDDEN,
    RepositoryNotFoundError: http_status.HTTP_404_NOT_FOUND,
    RepositoryConflictError: http_status.HTTP_409_CONFLICT,
    RepositoryUnavailableError: http_status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _http_error(exc: RepositoryError) -> HTTPException:
    status_code = next(
        (code for error_type, code in ERROR_STATUS_CODES.items() if isinstance(exc, error_type)),
        http_status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    return HTTPException(status_code=status_code, detail={"error": exc.kind, "message": str(exc)})


def _require_roles(principal: Principal, allowed: set[Role]) -> None:
    try:
        principal.require_roles(allowed)
    except PermissionError as exc:
        raise HTTPException(
            status_code=http_status.HTTP_403_FORBIDDEN,
            detail={"error": RepositoryForbiddenError.kind, "message": str(exc)},
        ) from exc


@router.get("", response_model=JobPageOut)
async def list_jobs(
    search: str | None = Query(default=None, min_length=1),
    sort: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    principal: Principal = Depends(get_principal),
    repository=Depends(get_repository),
) -> JobPageOut:
    try:
        result = await repository.list_jobs(
            principal=principal,
            search=search,
            sort=sort,
            page=page,
            page_size=limit,
        )
    except RepositoryError as exc:
        raise _http_error(exc) from exc
    return JobPageOut(**result)


@router.get("/moderation", response_model=list[CreatorJobOut])
async def list_jobs_for_moderation(
    visibility_status: VisibilityStatus | None = Query(default=None, alias="status"),
    principal: Principal = Depends(get_principal),
    repository=Depends(get_repository),
) -> list[CreatorJobOut]:
    _require_roles(principal, {Role.ADMINISTRATOR})
    try:
        rows = await repository.list_jobs_for_moderation(visibility_status=visibility_status)
    except RepositoryError as exc:
        raise _http_error(exc) from exc
    return [CreatorJobOut(**row) for row in rows]


@router.get("/mine", response_model=list[CreatorJobOut])
async def list_my_jobs(
    principal: Principal = Depends(get_principal),
    repository=Depends(get_repository),
) -> list[CreatorJobOut]:
    try:
        rows = await repository.list_my_jobs(creator_id=principal.user_id)
    except RepositoryError as exc:
        raise _http_error(exc) from exc
    return [CreatorJobOut(**row) for row in rows]


@router.get("/{job_id}", response_model=JobOut)
async def get_job(
    job_id: int,
    principal: Principal = Depends(get_principal),
    repository=Depends(get_repository),
) -> JobOut:
    try:
        row = await repository.get_job(job_id, principal=principal)
    except RepositoryError as exc:
        raise _http_error(exc) from exc
    return JobOut(**row)


@router.post("", response_model=JobOut, status_code=http_status.HTTP_201_CREATED)
async def create_job(
    payload: JobCreateRequest,
    principal: Principal = Depends(get_principal),
    repository=Depends(get_repository),
) -> JobOut:
    _require_roles(principal, {Role.CREATOR, Role.ADMINISTRATOR})
    try:
        row = await repository.create_job(
            creator_id=principal.user_id,
            payload=payload.model_dump(exclude_unset=True),
        )
    except RepositoryError as exc:
        raise _http_error(exc) from exc
    return JobOut(**row)


@router.patch("/{job_id}", response_model=JobOut)
async def update_job(
    job_id: int,
    payload: JobUpdateRequest,
    principal: Principal = Depends(get_principal),
    repository=Depends(get_repository),
) -> JobOut:
    try:
        row = await repository.update_job(
            job_id=job_id,
            principal=principal,
            payload=payload.model_dump(exclude_unset=True),
        )
    except RepositoryError as exc:
        raise _http_error(exc) from exc
    return JobOut(**row)


@router.patch("/{job_id}/status", response_model=JobOut)
async def set_job_status(
    job_id: int,
    payload: JobStatusPatchRequest,
    principal: Principal = Depends(get_principal),
    repository=Depends(get_repository),
) -> JobOut:
    _require_roles(principal, {Role.ADMINISTRATOR})
    try:
        row = await repository.set_job_status(
            job_id=job_id,
            status=payload.visibility_status,
            comment=payload.admin_comment,
            principal=principal,
        )
    except RepositoryError as exc:
        raise _http_error(exc) from exc
    logger.info("job moderated id=%s status=%s actor_id=%s", job_id, payload.visibility_status, principal.user_id)
    return JobOut(**row)


@router.delete("/{job_id}", response_model=JobDeleteOut)
async def delete_job(
    job_id: int,
    principal: Principal = Depends(get_principal),
    repository=Depends(get_repository),
) -> JobDeleteOut:
    try:
        result = await repository.delete_job(job_id=job_id, principal=principal)
    except RepositoryError as exc:
        raise _http_error(exc) from exc
    return JobDeleteOut(**result)


@router.delete("", response_model=JobBulkDeleteOut)
async def delete_all_jobs(
    principal: Principal = Depends(get_principal),
    repository=Depends(get_repository),
) -> JobBulkDeleteOut:
    _require_roles(principal, {Role.ADMINISTRATOR})
    try:
        result = await repository.delete_all_jobs(principal=principal)
    except RepositoryError as exc:
        raise _http_error(exc) from exc
    return JobBulkDeleteOut(**result)
