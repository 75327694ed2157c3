"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response
from pydantic import BaseModel

from datespot.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    SignInRequest,
    SignInUseCase,
)
from datespot.config import Settings
from datespot.domain.value import VoteType
from datespot.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

COOKIE_NAME = "auth_token"


class SignInAPIResponse(BaseModel):
    """Sign-in response; the session token itself travels in the cookie."""

    user_id: str
    display_name: str | None
    avatar_url: str | None
    votes: dict[str, VoteType]


class SignOutResponse(BaseModel):
    """Sign-out response."""

    success: bool


@router.post("/session", response_model=SignInAPIResponse)
async def sign_in(
    request: SignInRequest,
    response: Response,
    sign_in_use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
) -> SignInAPIResponse:
    """Sign in with an identity provider ID token.

    Sets the session cookie and returns the user with their vote index.

    Example:
        POST /auth/session
        {"id_token": "eyJhbGciOi..."}
    """
    result = await sign_in_use_case.execute(request)
    logger.info(f"Signed in user {result.user_id}")

    is_production = settings.environment == "production"
    response.set_cookie(
        key=COOKIE_NAME,
        value=result.token,
        httponly=True,
        secure=settings.auth.cookie_secure or is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )

    return SignInAPIResponse(
        user_id=result.user_id,
        display_name=result.display_name,
        avatar_url=result.avatar_url,
        votes=result.votes,
    )


@router.delete("/session", response_model=SignOutResponse)
async def sign_out(response: Response) -> SignOutResponse:
    """Sign out by clearing the session cookie."""
    response.delete_cookie(key=COOKIE_NAME, path="/")
    logger.info("Session cookie cleared")
    return SignOutResponse(success=True)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Current user, or ``authenticated: false`` when signed out."""
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
