from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from config.settings import Settings
from infrastructure.context import ContextScope, RequestContextBundle
from infrastructure.database.database import Database
from services.auth.token_service import INVALID_TOKEN_MESSAGE, TokenService
from services.errors import InvalidTokenError
from services.file.image_storage_service import ImageStorageService
from services.payment.payment_gateway import PaymentGateway


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_image_storage(request: Request) -> ImageStorageService:
    return request.app.state.image_storage


def get_payment_gateway(settings: Settings = Depends(get_settings)) -> PaymentGateway:
    return PaymentGateway(settings.stripe_secret_key)


async def get_db(request: Request):
    database: Database = request.app.state.database
    db = database.SessionLocal()
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    finally:
        await db.close()


async def get_authenticated_user_id(
    auth_token: Optional[str] = Header(None, alias="auth-token"),
    token_service: TokenService = Depends(get_token_service),
) -> int:
    user_id = token_service.verify(auth_token)
    try:
        return int(user_id)
    except (TypeError, ValueError) as exc:
        raise InvalidTokenError(INVALID_TOKEN_MESSAGE) from exc


async def get_user_context_bundle(
    user_id: int = Depends(get_authenticated_user_id),
    db=Depends(get_db),
) -> RequestContextBundle:
    # The token is verified before a database session is opened.
    return RequestContextBundle(db=db, scope=ContextScope(user_id=user_id))
