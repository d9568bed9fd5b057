"""
Pydantic schemas for Company API requests/responses.
"""

from typing import List, Optional
from pydantic import Field, field_validator

from app.schemas.base import CamelModel, RequestModel


class CompanyCreateRequest(RequestModel):
    """Schema for creating a company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdateRequest(RequestModel):
    """Partial update; the handle cannot be changed"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("name may not be null")
        return v


class CompanyFilter(CamelModel):
    """Search criteria for GET /companies; every field is optional"""
    name: Optional[str] = None
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)


class CompanyJob(CamelModel):
    """Job summary nested in a company response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None


class CompanyResponse(CamelModel):
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyDetailResponse(CompanyResponse):
    jobs: List[CompanyJob] = []


class CompanyEnvelope(CamelModel):
    company: CompanyResponse


class CompanyDetailEnvelope(CamelModel):
    company: CompanyDetailResponse


class CompanyListResponse(CamelModel):
    companies: List[CompanyResponse]


class CompanyDeletedResponse(CamelModel):
    deleted: str
