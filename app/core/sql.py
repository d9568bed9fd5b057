"""
Helpers for building parameterized SQL.

Statements are written with positional ``$1..$n`` placeholders. The builders
here return a ``SqlFragment`` (clause text plus ordered bind values) that the
data-access layer embeds into a full statement; ``execute`` rewrites the
placeholders into SQLAlchemy bind parameters and runs the statement.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Result
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import TextClause

from app.core.exceptions import ValidationError

_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


@dataclass(frozen=True)
class SqlFragment:
    """A clause with ``$n`` placeholders and the values bound to them, in order."""

    clause: str = ""
    values: Tuple[Any, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.clause)


def sql_for_partial_update(fields: Mapping[str, Any], column_map: Optional[Mapping[str, str]] = None) -> SqlFragment:
    """
    Build the SET portion of an UPDATE from the fields being changed.

    Args:
        fields: Logical field name -> new value. Must not be empty.
        column_map: Logical field name -> column name. Names missing from the
            map are used as the column name verbatim.

    Returns:
        SqlFragment such as ('"first_name"=$1, "age"=$2', ("Aliya", 32)).
        Placeholders follow the iteration order of ``fields`` so the caller
        can bind its own key as ``$<len(values) + 1>``.

    Raises:
        ValidationError: If ``fields`` is empty
    """
    if not fields:
        raise ValidationError("No data")

    column_map = column_map or {}
    terms = []
    values = []
    for idx, (name, value) in enumerate(fields.items(), start=1):
        terms.append(f'"{column_map.get(name, name)}"=${idx}')
        values.append(value)

    return SqlFragment(clause=", ".join(terms), values=tuple(values))


def bind_statement(sql: str, values: Sequence[Any] = ()) -> Tuple[TextClause, Dict[str, Any]]:
    """
    Convert a ``$n`` statement into a TextClause with named parameters.

    ``$1`` becomes ``:p1`` and so on, so the same statement runs on any
    SQLAlchemy dialect.
    """
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}

    def _named(match: "re.Match[str]") -> str:
        name = f"p{match.group(1)}"
        if name not in params:
            raise ValueError(f"No value supplied for placeholder ${match.group(1)}")
        return f":{name}"

    return text(_PLACEHOLDER_RE.sub(_named, sql)), params


def execute(db: Session, sql: str, values: Sequence[Any] = ()) -> Result:
    """Run a ``$n`` statement on the session with positional values."""
    statement, params = bind_statement(sql, values)
    return db.execute(statement, params)
