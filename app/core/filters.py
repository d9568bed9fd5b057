"""
WHERE-clause builders for the company and job search endpoints.

Each builder turns optional search criteria into a SqlFragment. Terms are
appended in a fixed order and each one takes the next placeholder number,
so ``$n`` depends on which criteria were supplied. An empty fragment means
no filtering; callers leave the WHERE keyword out entirely.
"""

from typing import Any, List

from app.core.exceptions import ValidationError
from app.core.sql import SqlFragment
from app.schemas.company import CompanyFilter
from app.schemas.job import JobFilter


class _WhereBuilder:
    """Collects AND-joined terms, numbering placeholders as they are added."""

    def __init__(self) -> None:
        self._terms: List[str] = []
        self._values: List[Any] = []

    def add(self, template: str, value: Any) -> None:
        self._values.append(value)
        self._terms.append(template.format(param=f"${len(self._values)}"))

    def build(self) -> SqlFragment:
        return SqlFragment(clause=" AND ".join(self._terms), values=tuple(self._values))


def company_filter_sql(criteria: CompanyFilter) -> SqlFragment:
    """
    Build the WHERE clause for a company search.

    Terms, in order: case-insensitive name substring, minimum employees,
    maximum employees.

    Raises:
        ValidationError: If both employee bounds are given and min > max
    """
    if (
        criteria.min_employees is not None
        and criteria.max_employees is not None
        and criteria.min_employees > criteria.max_employees
    ):
        raise ValidationError("Minimum employees cannot be greater than maximum employees")

    where = _WhereBuilder()
    if criteria.name:
        where.add("LOWER(name) LIKE '%' || {param} || '%'", criteria.name.lower())
    if criteria.min_employees is not None:
        where.add("num_employees >= {param}", criteria.min_employees)
    if criteria.max_employees is not None:
        where.add("num_employees <= {param}", criteria.max_employees)
    return where.build()


def job_filter_sql(criteria: JobFilter) -> SqlFragment:
    """
    Build the WHERE clause for a job search.

    Terms, in order: case-insensitive title substring, minimum salary,
    minimum equity.
    """
    where = _WhereBuilder()
    if criteria.title:
        where.add("LOWER(title) LIKE '%' || {param} || '%'", criteria.title.lower())
    if criteria.salary is not None:
        where.add("salary >= {param}", criteria.salary)
    if criteria.equity is not None:
        where.add("equity >= {param}", criteria.equity)
    return where.build()
