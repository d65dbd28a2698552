from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import Settings
from infrastructure.context import RequestContextBundle
from routers.dependencies import (
    get_db,
    get_settings,
    get_token_service,
    get_user_context_bundle,
)
from schemas import (
    AuthTokenResponse,
    GetUserResponse,
    UpdateProfileResponse,
    UserProfile,
    UserSummary,
)
from schemas.requests import LoginRequest, SignupRequest, UpdateProfileRequest
from services.auth import AccountService, TokenService

router = APIRouter()


def _account_service(db: AsyncSession, token_service: TokenService, settings: Settings) -> AccountService:
    return AccountService(db, token_service, cart_slots=settings.cart_legacy_slots)


@router.post("/signup", response_model=AuthTokenResponse, response_model_exclude_none=True)
async def signup(
    payload: SignupRequest,
    db: AsyncSession = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
) -> AuthTokenResponse:
    service = _account_service(db, token_service, settings)
    token = await service.signup(name=payload.name, email=payload.email, password=payload.password)
    return AuthTokenResponse(success=True, token=token)


@router.post("/login", response_model=AuthTokenResponse, response_model_exclude_none=True)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
) -> AuthTokenResponse:
    service = _account_service(db, token_service, settings)
    result = await service.login(email=payload.email, password=payload.password)
    return AuthTokenResponse(success=result.success, token=result.token, errors=result.errors)


@router.get("/getuser", response_model=GetUserResponse)
async def get_user(
    context_bundle: RequestContextBundle = Depends(get_user_context_bundle),
    token_service: TokenService = Depends(get_token_service),
) -> GetUserResponse:
    service = AccountService(context_bundle.db, token_service)
    user = await service.get_user(context_bundle.scope.user_id)
    return GetUserResponse(user=UserSummary(name=user.name, email=user.email, date=user.date))


@router.put("/updateprofile", response_model=UpdateProfileResponse)
async def update_profile(
    payload: UpdateProfileRequest,
    context_bundle: RequestContextBundle = Depends(get_user_context_bundle),
    token_service: TokenService = Depends(get_token_service),
) -> UpdateProfileResponse:
    service = AccountService(context_bundle.db, token_service)
    user = await service.update_profile(
        context_bundle.scope.user_id,
        name=payload.name,
        email=payload.email,
    )
    return UpdateProfileResponse(user=UserProfile.model_validate(user))
