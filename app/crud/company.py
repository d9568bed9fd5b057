"""
CRUD operations for companies.

Statements are plain parameterized SQL; partial updates and searches are
assembled with the builders in app.core.sql and app.core.filters.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.core.filters import company_filter_sql
from app.core.sql import execute, sql_for_partial_update
from app.schemas.company import CompanyCreateRequest, CompanyFilter

logger = logging.getLogger(__name__)

# Wire name -> column name; unlisted names match their column
COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

_COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


def create(db: Session, company_data: CompanyCreateRequest) -> dict:
    """
    Create a company.

    Raises:
        ValidationError: If a company with the same handle or name already exists
    """
    duplicate = execute(
        db,
        """SELECT handle
           FROM companies
           WHERE handle = $1 OR name = $2""",
        [company_data.handle, company_data.name],
    ).first()
    if duplicate:
        raise ValidationError(f"Duplicate company: {company_data.handle}")

    row = execute(
        db,
        f"""INSERT INTO companies
           (handle, name, description, num_employees, logo_url)
           VALUES ($1, $2, $3, $4, $5)
           RETURNING {_COMPANY_COLUMNS}""",
        [
            company_data.handle,
            company_data.name,
            company_data.description,
            company_data.num_employees,
            company_data.logo_url,
        ],
    ).mappings().one()
    db.commit()

    logger.info(f"Created company {company_data.handle}")
    return dict(row)


def find_all(db: Session, criteria: Optional[CompanyFilter] = None) -> List[dict]:
    """
    List companies ordered by name, optionally filtered.

    Raises:
        ValidationError: If criteria.min_employees > criteria.max_employees
    """
    where = company_filter_sql(criteria or CompanyFilter())
    where_sql = f"WHERE {where.clause}" if where else ""

    rows = execute(
        db,
        f"""SELECT {_COMPANY_COLUMNS}
           FROM companies
           {where_sql}
           ORDER BY name""",
        where.values,
    ).mappings().all()
    return [dict(row) for row in rows]


def get(db: Session, handle: str) -> dict:
    """
    Get a company together with its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    row = execute(
        db,
        f"""SELECT {_COMPANY_COLUMNS}
           FROM companies
           WHERE handle = $1""",
        [handle],
    ).mappings().first()
    if not row:
        raise NotFoundError(f"No company: {handle}")

    jobs = execute(
        db,
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle],
    ).mappings().all()

    company = dict(row)
    company["jobs"] = [dict(job) for job in jobs]
    return company


def update(db: Session, handle: str, data: dict) -> dict:
    """
    Partially update a company with the fields present in ``data``.

    Args:
        data: Wire-named fields to change, e.g. {"numEmployees": 10}

    Raises:
        ValidationError: If ``data`` is empty or its name belongs to another company
        NotFoundError: If no company has this handle
    """
    set_sql = sql_for_partial_update(data, COLUMN_MAP)
    if "name" in data:
        taken = execute(
            db,
            """SELECT handle
               FROM companies
               WHERE name = $1 AND handle <> $2""",
            [data["name"], handle],
        ).first()
        if taken:
            raise ValidationError(f"Duplicate company name: {data['name']}")

    handle_idx = len(set_sql.values) + 1

    row = execute(
        db,
        f"""UPDATE companies
           SET {set_sql.clause}
           WHERE handle = ${handle_idx}
           RETURNING {_COMPANY_COLUMNS}""",
        [*set_sql.values, handle],
    ).mappings().first()
    if not row:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Updated company {handle}: {', '.join(data)}")
    return dict(row)


def remove(db: Session, handle: str) -> None:
    """
    Delete a company.

    Raises:
        NotFoundError: If no company has this handle
    """
    row = execute(
        db,
        """DELETE
           FROM companies
           WHERE handle = $1
           RETURNING handle""",
        [handle],
    ).first()
    if not row:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Deleted company {handle}")
