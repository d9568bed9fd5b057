"""
User endpoints.

Admins manage every account; other users may only read, change, delete
and apply for jobs as themselves.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user, get_correct_user_or_admin
from app.core.security import create_access_token
from app.crud import user as user_crud
from app.schemas.user import (
    ApplicationResponse,
    UserCreateRequest,
    UserDeletedResponse,
    UserDetailEnvelope,
    UserEnvelope,
    UserListResponse,
    UserTokenResponse,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=UserTokenResponse, dependencies=[Depends(get_admin_user)])
def create_user(
    request: UserCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Add a user (possibly an admin). This is not the registration endpoint.

    Returns the new user and a token for them.
    """
    user = user_crud.register(db, request)
    token = create_access_token(user["username"], is_admin=user["isAdmin"])
    return {"user": user, "token": token}


@router.get("/", response_model=UserListResponse, dependencies=[Depends(get_admin_user)])
def list_users(db: Session = Depends(get_db)):
    """List all users. Admin only."""
    return {"users": user_crud.find_all(db)}


@router.get("/{username}", response_model=UserDetailEnvelope, dependencies=[Depends(get_correct_user_or_admin)])
def get_user(username: str, db: Session = Depends(get_db)):
    """Retrieve a user and the jobs they applied to."""
    return {"user": user_crud.get(db, username)}


@router.patch("/{username}", response_model=UserEnvelope, dependencies=[Depends(get_correct_user_or_admin)])
def update_user(
    username: str,
    request: UserUpdateRequest,
    db: Session = Depends(get_db)
):
    """Update some of firstName, lastName, password, email."""
    return {"user": user_crud.update(db, username, request.to_fields())}


@router.delete("/{username}", response_model=UserDeletedResponse, dependencies=[Depends(get_correct_user_or_admin)])
def delete_user(username: str, db: Session = Depends(get_db)):
    """Delete a user account."""
    user_crud.remove(db, username)
    return {"deleted": username}


@router.post("/{username}/jobs/{job_id}", response_model=ApplicationResponse, dependencies=[Depends(get_correct_user_or_admin)])
def apply_for_job(username: str, job_id: int, db: Session = Depends(get_db)):
    """Apply to a job as this user."""
    user_crud.apply_for_job(db, username, job_id)
    return {"applied": job_id}
