import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import job as job_crud
from app.schemas.job import (
    JobCreateRequest,
    JobDeletedResponse,
    JobEnvelope,
    JobFilter,
    JobListResponse,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobEnvelope, dependencies=[Depends(get_admin_user)])
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db)
):
    """Create a job posting for an existing company. Admin only."""
    return {"job": job_crud.create(db, request)}


@router.get("/", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive partial title match"),
    salary: Optional[int] = Query(None, ge=0, description="Minimum salary"),
    equity: Optional[float] = Query(None, ge=0, le=1, description="Minimum equity"),
    db: Session = Depends(get_db)
):
    """
    List jobs ordered by title, optionally filtered by title, minimum
    salary and minimum equity.
    """
    criteria = JobFilter(title=title, salary=salary, equity=equity)
    return {"jobs": job_crud.find_all(db, criteria)}


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope, dependencies=[Depends(get_admin_user)])
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db)
):
    """Update some of title, salary, equity. Admin only."""
    return {"job": job_crud.update(db, job_id, request.to_fields())}


@router.delete("/{job_id}", response_model=JobDeletedResponse, dependencies=[Depends(get_admin_user)])
def delete_job(job_id: int, db: Session = Depends(get_db)):
    """Delete a job by ID. Admin only."""
    job_crud.remove(db, job_id)
    return {"deleted": job_id}
