import logging
from typing import Annotated, cast

from fastapi import Cookie, Depends
from sqlalchemy.orm import Session

from app.auth.models.user import BACK_OFFICE_ROLES, User
from app.auth.repositories.user_repository import UserRepository
from app.core import security
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.db.session import get_db

logger = logging.getLogger(__name__)


async def get_access_token_from_cookie(
    access_token: Annotated[str | None, Cookie()] = None,
) -> str:
    """Extract access token from cookie"""
    if not access_token:
        raise ForbiddenError("Not authenticated")
    return access_token


async def get_validated_token_payload(
    token: str,
    expected_type: str = "access",
) -> dict:
    """Decode and validate JWT token"""
    payload = security.decode_token(token)

    if payload is None:
        raise UnauthorizedError("Could not validate credentials")

    if payload.get("type") != expected_type:
        raise UnauthorizedError(f"Invalid token type, expected {expected_type}")

    return payload


async def get_current_user(
    access_token: str = Depends(get_access_token_from_cookie),
    db: Session = Depends(get_db),
) -> User:
    """Get current authenticated user from access token"""
    payload = await get_validated_token_payload(access_token, expected_type="access")

    user_id: str | None = payload.get("sub")
    if user_id is None:
        raise UnauthorizedError("Could not validate credentials")

    user = UserRepository(db).find_by_id_str(user_id)
    if user is None:
        raise UnauthorizedError("User not found")

    if not user.is_active:
        raise ForbiddenError("Account is inactive")

    return cast(User, user)


async def require_staff_or_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role not in BACK_OFFICE_ROLES:
        logger.info(
            "Back-office access denied",
            extra={"user_id": str(current_user.id), "role": current_user.role},
        )
        raise ForbiddenError("Staff or admin role required")
    return current_user
