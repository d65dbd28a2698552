from .account_service import AccountService, LoginResult
from .token_service import TokenService

__all__ = ["AccountService", "LoginResult", "TokenService"]
