from typing import Any

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from jobly.core.config import settings
from jobly.core.security import decode_token
from jobly.db import SessionLocal
from jobly.db.models.user import User
from jobly.domain.validation import ValidationResult
from jobly.errors import ForbiddenError, UnauthorizedError, classify_validation
from jobly.repositories.company import CompanyRepository
from jobly.repositories.user import get_user_by_id

# auto_error=False so a missing token goes through the same error writer as a bad one
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_company_repository(db: Session = Depends(get_db)) -> CompanyRepository:
    """Data-access collaborator for the company handlers, bound to the request session."""
    return CompanyRepository(db)


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Get the current authenticated user from JWT token."""
    if not token:
        raise UnauthorizedError("Not authenticated")

    payload = decode_token(token)
    # Only "access" tokens authenticate requests
    if payload is None or payload.get("type") != "access":
        raise UnauthorizedError("Could not validate credentials")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise UnauthorizedError("Could not validate credentials")

    user = get_user_by_id(db, user_id)
    if user is None:
        raise UnauthorizedError("User not found")

    return user


def require_roles(*role_names: str):
    """
    Create a dependency that requires the current user to have one of the specified roles.

    Args:
        *role_names: Variable number of role name strings to allow

    Returns:
        A dependency function that checks if the user has one of the required roles

    Example:
        Depends(require_roles("admin"))
    """
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role.name not in role_names:
            raise ForbiddenError("Not enough permissions")
        return current_user

    return role_checker


# Access gate: any authenticated user, or admins only.
require_logged_in = get_current_user
require_admin = require_roles("admin")


async def read_json_payload(request: Request) -> Any:
    """
    Decode the JSON request body.

    Declare it after the access gate dependency: the body is only read once
    the caller is authorized. Undecodable bodies are validation failures; an
    empty body decodes to None and is rejected by the schema check.
    """
    body = await request.body()
    if not body:
        return None
    try:
        return await request.json()
    except ValueError as exc:
        checked = ValidationResult(errors=(f"payload: Invalid JSON ({exc})",))
        raise classify_validation(checked, settings.validation_error_status)
