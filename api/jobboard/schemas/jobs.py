from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from jobboard.schemas.salary import SalaryDetail, SalaryOut

JobStatus = Literal["pending", "interview", "declined"]
JobType = Literal["full-time", "part-time", "internship", "contract"]
VisibilityStatus = Literal["UNDER_REVIEW", "ACCEPTED", "REJECTED", "ARCHIVED"]
ModerationStatus = Literal["UNDER_REVIEW", "ACCEPTED", "REJECTED"]

TagIds = list[int | str]


class _JobFields(BaseModel):
    job_status: JobStatus | None = None
    job_type: JobType | None = None
    job_location: str | None = None
    job_vacancy: str | None = Field(default=None, min_length=1)
    job_description: str | None = Field(default=None, min_length=10)
    eligibility: Literal[1, 2, 3] | None = None
    student_currently_studying: bool | None = None
    year_selection: list[str] | None = None
    experience_min: Decimal | None = Field(default=None, ge=0)
    experience_max: Decimal | None = Field(default=None, ge=0)
    skills: TagIds | None = None
    categories: TagIds | None = None
    facilities: TagIds | None = None


class JobCreateRequest(_JobFields):
    company: str = Field(min_length=5, max_length=100)
    position: str = Field(min_length=5, max_length=200)
    workplace_type: int = Field(ge=1, le=4)
    job_vacancy: str = Field(min_length=1)
    job_deadline: date
    job_description: str = Field(min_length=10)
    job_contact: str = Field(min_length=3)
    salary: SalaryDetail
    skills: TagIds = Field(min_length=1)
    facilities: TagIds = Field(min_length=1)


class JobUpdateRequest(_JobFields):
    company: str | None = Field(default=None, min_length=5, max_length=100)
    position: str | None = Field(default=None, min_length=5, max_length=200)
    workplace_type: int | None = Field(default=None, ge=1, le=4)
    job_deadline: date | None = None
    job_contact: str | None = Field(default=None, min_length=3)
    salary: SalaryDetail | None = None


class JobStatusPatchRequest(BaseModel):
    visibility_status: ModerationStatus
    admin_comment: str | None = None


class CreatorOut(BaseModel):
    id: int
    username: str | None = None
    email: str | None = None


class JobOut(BaseModel):
    id: int
    company: str
    position: str
    job_status: JobStatus
    job_type: JobType
    job_location: str | None = None
    workplace_type: int
    created_by: int
    job_vacancy: str
    job_deadline: date
    job_description: str
    job_contact: str
    visibility_status: VisibilityStatus
    admin_comment: str | None = None
    eligibility: int
    student_currently_studying: bool | None = None
    year_selection: list[str] | None = None
    experience_min: Decimal | None = None
    experience_max: Decimal | None = None
    salary: SalaryOut | None = None
    skills: list[int] = Field(default_factory=list)
    categories: list[int] = Field(default_factory=list)
    facilities: list[int] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class CreatorJobOut(JobOut):
    creator: CreatorOut


class JobPageOut(BaseModel):
    rows: list[JobOut]
    total_count: int
    current_page: int
    page_size: int
    page_count: int


class JobDeleteOut(BaseModel):
    deleted: bool
    id: int


class JobBulkDeleteOut(BaseModel):
    count: int
