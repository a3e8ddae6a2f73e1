import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_user
from app.auth.models.user import User, UserRole
from app.auth.repositories.user_repository import UserRepository
from app.auth.schemas.auth import LoginRequest, LoginResponse, LogoutResponse, RegisterRequest
from app.auth.schemas.user import UserResponse
from app.core import security
from app.core.exceptions import ConflictError, ForbiddenError, UnauthorizedError
from app.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> UserResponse:
    users = UserRepository(db)
    if users.find_by_email(payload.email) is not None:
        raise ConflictError("Email is already registered", resource="user")

    user = users.create(
        email=payload.email.lower(),
        name=payload.name,
        hashed_password=security.get_password_hash(payload.password),
        role=UserRole.CUSTOMER.value,
        is_active=True,
    )
    logger.info("User registered", extra={"user_id": str(user.id)})
    return UserResponse.from_user(user)


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> LoginResponse:
    user = UserRepository(db).find_by_email(credentials.email)

    if not user or not security.verify_password(credentials.password, str(user.hashed_password)):
        raise UnauthorizedError("Invalid email or password")

    if not user.is_active:
        raise ForbiddenError("Account is inactive")

    token_data = {"sub": str(user.id), "email": user.email, "role": user.role}
    security.set_access_cookie(response, security.create_access_token(token_data))

    return LoginResponse(user=UserResponse.from_user(user))


@router.post("/logout", response_model=LogoutResponse)
def logout(response: Response) -> LogoutResponse:
    security.clear_auth_cookies(response)
    return LogoutResponse()


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.from_user(current_user)
