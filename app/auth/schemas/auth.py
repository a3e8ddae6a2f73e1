from pydantic import BaseModel, EmailStr, Field

from app.auth.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Login request schema"""

    email: EmailStr
    password: str


class RegisterRequest(BaseModel):
    """Self-service registration; new accounts always get the customer role"""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=8, max_length=128)


class LoginResponse(BaseModel):
    """Login response; the access token itself travels in an httpOnly cookie"""

    user: UserResponse


class LogoutResponse(BaseModel):
    """Response schema for logout"""

    message: str = "Successfully logged out"
