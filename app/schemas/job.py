from pydantic import Field, field_validator
from typing import List, Optional

from app.schemas.base import CamelModel, RequestModel


class JobCreateRequest(RequestModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1, max_length=200)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(RequestModel):
    """Partial update; a job cannot move to another company"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("title may not be null")
        return v


class JobFilter(CamelModel):
    """Search criteria for GET /jobs; salary and equity are minimums"""
    title: Optional[str] = None
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)


class JobResponse(CamelModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company_handle: str


class JobEnvelope(CamelModel):
    job: JobResponse


class JobListResponse(CamelModel):
    jobs: List[JobResponse]


class JobDeletedResponse(CamelModel):
    deleted: int
