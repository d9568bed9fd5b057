"""
CRUD operations for jobs.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.core.filters import job_filter_sql
from app.core.sql import execute, sql_for_partial_update
from app.schemas.job import JobCreateRequest, JobFilter

logger = logging.getLogger(__name__)

COLUMN_MAP = {
    "companyHandle": "company_handle",
}

_JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


def create(db: Session, job_data: JobCreateRequest) -> dict:
    """
    Create a new job for an existing company.

    Raises:
        ValidationError: If the company does not exist, or it already has a
            job with this title
    """
    company = execute(
        db,
        "SELECT handle FROM companies WHERE handle = $1",
        [job_data.company_handle],
    ).first()
    if not company:
        raise ValidationError(f"No company: {job_data.company_handle}")

    duplicate = execute(
        db,
        """SELECT id
           FROM jobs
           WHERE title = $1 AND company_handle = $2""",
        [job_data.title, job_data.company_handle],
    ).first()
    if duplicate:
        raise ValidationError(f"Duplicate job for {job_data.company_handle}: {job_data.title}")

    row = execute(
        db,
        f"""INSERT INTO jobs
           (title, salary, equity, company_handle)
           VALUES ($1, $2, $3, $4)
           RETURNING {_JOB_COLUMNS}""",
        [job_data.title, job_data.salary, job_data.equity, job_data.company_handle],
    ).mappings().one()
    db.commit()

    logger.info(f"Created job {row['id']}: {job_data.title} at {job_data.company_handle}")
    return dict(row)


def find_all(db: Session, criteria: Optional[JobFilter] = None) -> List[dict]:
    """
    List jobs ordered by title.

    Args:
        criteria: Optional search; salary and equity are lower bounds

    Returns:
        List of job dicts keyed by wire name
    """
    where = job_filter_sql(criteria or JobFilter())
    where_sql = f"WHERE {where.clause}" if where else ""

    rows = execute(
        db,
        f"""SELECT {_JOB_COLUMNS}
           FROM jobs
           {where_sql}
           ORDER BY title, id""",
        where.values,
    ).mappings().all()
    return [dict(row) for row in rows]


def get(db: Session, job_id: int) -> dict:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no job has this ID
    """
    row = execute(
        db,
        f"""SELECT {_JOB_COLUMNS}
           FROM jobs
           WHERE id = $1""",
        [job_id],
    ).mappings().first()
    if not row:
        raise NotFoundError(f"No job: {job_id}")
    return dict(row)


def update(db: Session, job_id: int, data: dict) -> dict:
    """
    Partially update a job.

    Raises:
        ValidationError: If ``data`` is empty
        NotFoundError: If no job has this ID
    """
    set_sql = sql_for_partial_update(data, COLUMN_MAP)
    id_idx = len(set_sql.values) + 1

    row = execute(
        db,
        f"""UPDATE jobs
           SET {set_sql.clause}
           WHERE id = ${id_idx}
           RETURNING {_JOB_COLUMNS}""",
        [*set_sql.values, job_id],
    ).mappings().first()
    if not row:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return dict(row)


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this ID
    """
    row = execute(
        db,
        """DELETE
           FROM jobs
           WHERE id = $1
           RETURNING id""",
        [job_id],
    ).first()
    if not row:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
