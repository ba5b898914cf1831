"""Login and current-user endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from articles_api.application.schemas import (
    CurrentUserResponse,
    ErrorResponse,
    LoginRequest,
    TokenResponse,
)
from articles_api.application.services import AuthService
from articles_api.domain.entities import User
from articles_api.domain.exceptions import InvalidCredentialsError, InvalidTokenError
from articles_api.infrastructure.dependencies import get_auth_service

router = APIRouter(tags=["Auth"])

bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED = {status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}}


@router.post("/login", response_model=TokenResponse, responses=_UNAUTHORIZED)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Exchange an email and password for a signed session token."""
    try:
        issued = await service.login(data.email, data.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return TokenResponse(token=issued.token, expires_at=issued.claims.expires_at)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    service: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve the bearer token on the request to a user, or fail with 401."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=str(InvalidTokenError()),
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception
    try:
        return await service.current_user(credentials.credentials)
    except InvalidTokenError:
        raise credentials_exception


@router.get("/me", response_model=CurrentUserResponse, responses=_UNAUTHORIZED)
async def read_current_user(user: User = Depends(get_current_user)) -> CurrentUserResponse:
    """Return the identity carried by a valid session token."""
    return CurrentUserResponse.model_validate(user, from_attributes=True)
