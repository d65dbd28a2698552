"""Domain errors raised by services and rendered by the app's exception handler."""

from __future__ import annotations

from typing import Any, Dict


class ShopError(Exception):
    status_code = 500
    detail_key = "message"

    def __init__(self, message: str, *, detail_key: str | None = None) -> None:
        self.message = message
        if detail_key is not None:
            self.detail_key = detail_key
        self.extra: Dict[str, Any] = {}
        super().__init__(message)

    def with_payload(self, **fields: Any) -> "ShopError":
        """Override or add response fields, e.g. ``success=0`` for upload errors."""
        self.extra.update(fields)
        return self

    def to_payload(self) -> Dict[str, Any]:
        return {"success": False, self.detail_key: self.message, **self.extra}


class AuthError(ShopError):
    status_code = 401
    detail_key = "errors"


class MissingTokenError(AuthError):
    pass


class InvalidTokenError(AuthError):
    pass


class ValidationError(ShopError):
    status_code = 400


class NotFoundError(ShopError):
    status_code = 404


class ConflictError(ShopError):
    # Duplicate signups have always been answered with a 400
    status_code = 400
    detail_key = "errors"


class ServerError(ShopError):
    status_code = 500


class PaymentError(ServerError):
    detail_key = "error"
