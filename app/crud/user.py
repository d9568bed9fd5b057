"""
CRUD operations for users and their job applications.
"""

import logging
from typing import List, Union

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, UnauthorizedError, ValidationError
from app.core.security import get_password_hash, verify_password
from app.core.sql import execute, sql_for_partial_update
from app.crud import job as job_crud
from app.schemas.user import UserCreateRequest, UserRegisterRequest

logger = logging.getLogger(__name__)

COLUMN_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}

_USER_COLUMNS = 'username, first_name AS "firstName", last_name AS "lastName", email, is_admin AS "isAdmin"'


def authenticate(db: Session, username: str, password: str) -> dict:
    """
    Check a username/password pair.

    Raises:
        UnauthorizedError: If the user does not exist or the password is wrong
    """
    row = execute(
        db,
        f"""SELECT {_USER_COLUMNS}, password
           FROM users
           WHERE username = $1""",
        [username],
    ).mappings().first()

    if row and verify_password(password, row["password"]):
        user = dict(row)
        del user["password"]
        return user

    logger.warning(f"Failed login for {username}")
    raise UnauthorizedError("Invalid username/password")


def register(db: Session, user_data: Union[UserRegisterRequest, UserCreateRequest]) -> dict:
    """
    Create a user with a hashed password.

    Self-registration never grants admin; only UserCreateRequest (used by
    admins) carries is_admin.

    Raises:
        ValidationError: If the username is taken
    """
    duplicate = execute(
        db,
        """SELECT username
           FROM users
           WHERE username = $1""",
        [user_data.username],
    ).first()
    if duplicate:
        raise ValidationError(f"Duplicate username: {user_data.username}")

    is_admin = getattr(user_data, "is_admin", False)
    row = execute(
        db,
        f"""INSERT INTO users
           (username, password, first_name, last_name, email, is_admin)
           VALUES ($1, $2, $3, $4, $5, $6)
           RETURNING {_USER_COLUMNS}""",
        [
            user_data.username,
            get_password_hash(user_data.password),
            user_data.first_name,
            user_data.last_name,
            user_data.email,
            is_admin,
        ],
    ).mappings().one()
    db.commit()

    logger.info(f"Registered user {user_data.username} (admin={is_admin})")
    return dict(row)


def find_all(db: Session) -> List[dict]:
    rows = execute(
        db,
        f"""SELECT {_USER_COLUMNS}
           FROM users
           ORDER BY username""",
    ).mappings().all()
    return [dict(row) for row in rows]


def get(db: Session, username: str) -> dict:
    """
    Get a user and the jobs they have applied to.

    Raises:
        NotFoundError: If the user does not exist
    """
    row = execute(
        db,
        f"""SELECT {_USER_COLUMNS}
           FROM users
           WHERE username = $1""",
        [username],
    ).mappings().first()
    if not row:
        raise NotFoundError(f"No user: {username}")

    jobs = execute(
        db,
        """SELECT jobs.id,
                  jobs.title,
                  jobs.company_handle AS "companyHandle"
           FROM applications
           JOIN jobs ON applications.job_id = jobs.id
           WHERE applications.username = $1
           ORDER BY jobs.id""",
        [username],
    ).mappings().all()

    user = dict(row)
    user["jobs"] = [dict(job) for job in jobs]
    return user


def update(db: Session, username: str, data: dict) -> dict:
    """
    Partially update a user. A new password is hashed before storing.

    WARNING: this can set a new password or make a user an admin. Callers
    must have validated and authorized ``data``.

    Raises:
        ValidationError: If ``data`` is empty
        NotFoundError: If the user does not exist
    """
    data = dict(data)
    if data.get("password"):
        data["password"] = get_password_hash(data["password"])

    set_sql = sql_for_partial_update(data, COLUMN_MAP)
    username_idx = len(set_sql.values) + 1

    row = execute(
        db,
        f"""UPDATE users
           SET {set_sql.clause}
           WHERE username = ${username_idx}
           RETURNING {_USER_COLUMNS}""",
        [*set_sql.values, username],
    ).mappings().first()
    if not row:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"Updated user {username}: {', '.join(data)}")
    return dict(row)


def remove(db: Session, username: str) -> None:
    row = execute(
        db,
        """DELETE
           FROM users
           WHERE username = $1
           RETURNING username""",
        [username],
    ).first()
    if not row:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"Deleted user {username}")


def apply_for_job(db: Session, username: str, job_id: int) -> None:
    """
    Record that a user applied to a job.

    Raises:
        NotFoundError: If the user or the job does not exist
        ValidationError: If the user already applied to this job
    """
    user = execute(db, "SELECT username FROM users WHERE username = $1", [username]).first()
    if not user:
        raise NotFoundError(f"No user: {username}")
    job_crud.get(db, job_id)

    existing = execute(
        db,
        """SELECT job_id
           FROM applications
           WHERE username = $1 AND job_id = $2""",
        [username, job_id],
    ).first()
    if existing:
        raise ValidationError(f"{username} already applied to job {job_id}")

    execute(
        db,
        """INSERT INTO applications
           (username, job_id)
           VALUES ($1, $2)""",
        [username, job_id],
    )
    db.commit()
    logger.info(f"User {username} applied to job {job_id}")
