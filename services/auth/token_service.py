from __future__ import annotations

import logging
from typing import Any, Optional, Union

import jwt

from services.errors import InvalidTokenError, MissingTokenError

logger = logging.getLogger(__name__)

UserId = Union[int, str]

INVALID_TOKEN_MESSAGE = "Please authenticate using valid token"


class TokenService:
    """Issues and verifies the signed ``auth-token`` credential.

    The payload is ``{"user": {"id": <user id>}}`` and carries no expiry, so a
    token stays valid for as long as the signing secret does.
    """

    algorithm = "HS256"

    def __init__(self, secret: str) -> None:
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret

    def issue(self, user_id: UserId) -> str:
        payload = {"user": {"id": user_id}}
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> UserId:
        if not token:
            raise MissingTokenError(INVALID_TOKEN_MESSAGE)

        try:
            payload: Any = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as exc:
            logger.warning("Rejected auth token: %s", exc)
            raise InvalidTokenError(INVALID_TOKEN_MESSAGE) from exc

        user = payload.get("user") if isinstance(payload, dict) else None
        user_id = user.get("id") if isinstance(user, dict) else None
        if user_id is None or user_id == "":
            logger.warning("Rejected auth token: payload has no user id")
            raise InvalidTokenError(INVALID_TOKEN_MESSAGE)
        return user_id
