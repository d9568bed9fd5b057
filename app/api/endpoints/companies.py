import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import company as company_crud
from app.schemas.company import (
    CompanyCreateRequest,
    CompanyDeletedResponse,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyFilter,
    CompanyListResponse,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=CompanyEnvelope, dependencies=[Depends(get_admin_user)])
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db)
):
    """Create a company. Admin only."""
    company = company_crud.create(db, request)
    return {"company": company}


@router.get("/", response_model=CompanyListResponse)
def list_companies(
    name_like: Optional[str] = Query(None, alias="nameLike", description="Case-insensitive partial name match"),
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0),
    db: Session = Depends(get_db)
):
    """
    List companies ordered by name.

    Optional filters:
        nameLike: Case-insensitive substring of the company name
        minEmployees / maxEmployees: Inclusive bounds on head count
            (400 if minEmployees > maxEmployees)
    """
    criteria = CompanyFilter(
        name=name_like,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    return {"companies": company_crud.find_all(db, criteria)}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company and its jobs."""
    return {"company": company_crud.get(db, handle)}


@router.patch("/{handle}", response_model=CompanyEnvelope, dependencies=[Depends(get_admin_user)])
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Update some of name, description, numEmployees, logoUrl. Admin only.
    """
    company = company_crud.update(db, handle, request.to_fields())
    return {"company": company}


@router.delete("/{handle}", response_model=CompanyDeletedResponse, dependencies=[Depends(get_admin_user)])
def delete_company(handle: str, db: Session = Depends(get_db)):
    """Delete a company and its jobs. Admin only."""
    company_crud.remove(db, handle)
    return {"deleted": handle}
