from . import catalog  # noqa: F401
from . import users  # noqa: F401

__all__ = [
    "catalog",
    "users",
]
