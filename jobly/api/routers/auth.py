import logging

from fastapi import APIRouter, Depends, Form
from sqlalchemy.orm import Session

from jobly.api.deps import get_current_user, get_db
from jobly.core.security import create_access_token, verify_password
from jobly.db.models.user import User as UserModel
from jobly.errors import UnauthorizedError
from jobly.repositories.user import get_user_by_username
from jobly.schemas.user import Token, User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
def login(
    username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    """
    Login endpoint - returns JWT token.
    Uses form data for OAuth2 compatibility (Swagger UI authorization).
    """
    user = get_user_by_username(db, username)
    if not user or not verify_password(password, user.password_hash):
        logger.info(f"Rejected login for {username}")
        raise UnauthorizedError("Incorrect username or password")

    access_token = create_access_token(data={"sub": user.id})

    return Token(
        access_token=access_token,
        token_type="bearer",
        user=User.model_validate(user),
    )


@router.get("/me", response_model=User)
def get_current_user_info(current_user: UserModel = Depends(get_current_user)):
    """Get current authenticated user information."""
    return User.model_validate(current_user)
