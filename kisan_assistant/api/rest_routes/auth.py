from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from kisan_assistant.api.dependencies import get_auth_service, get_current_user
from kisan_assistant.models.user import User
from kisan_assistant.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=1)


class SignupRequest(LoginRequest):
    name: str = Field(..., min_length=2)
    password: str = Field(..., min_length=6)
    location: Optional[str] = None


class ResetPasswordRequest(BaseModel):
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class StatusResponse(BaseModel):
    message: str


@router.post("/signup", response_model=User, status_code=status.HTTP_201_CREATED)
async def signup(request_data: SignupRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Creates a new account and starts its session.
    """
    return await auth.signup(
        name=request_data.name,
        email=request_data.email,
        password=request_data.password,
        location=request_data.location,
    )


@router.post("/login", response_model=User)
async def login(request_data: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return await auth.login(request_data.email, request_data.password)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(auth: AuthService = Depends(get_auth_service)):
    auth.logout()
    return


@router.get("/user", response_model=User, response_model_exclude_none=True)
async def current_user(user: User = Depends(get_current_user)):
    return user


@router.post("/default-user", response_model=User)
async def default_user(auth: AuthService = Depends(get_auth_service)):
    """
    Returns the logged-in user, signing in the demo farmer when nobody is.
    """
    return await auth.ensure_default_user()


@router.post("/reset-password", response_model=StatusResponse)
async def reset_password(request_data: ResetPasswordRequest, auth: AuthService = Depends(get_auth_service)):
    await auth.reset_password(request_data.email)
    return StatusResponse(message="Password reset link sent.")
