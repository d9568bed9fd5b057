"""
Authentication endpoints.

- POST /token: Exchange username/password for a JWT
- POST /register: Create a (non-admin) account and receive a JWT
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import create_access_token
from app.crud import user as user_crud
from app.schemas.user import TokenResponse, UserAuthRequest, UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
def login(
    request: UserAuthRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate and return a JWT for use in the Authorization header.
    """
    user = user_crud.authenticate(db, request.username, request.password)
    token = create_access_token(user["username"], is_admin=user["isAdmin"])
    return TokenResponse(token=token)


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account and return a JWT for immediate login.
    """
    new_user = user_crud.register(db, request)
    token = create_access_token(new_user["username"], is_admin=new_user["isAdmin"])
    return TokenResponse(token=token)
