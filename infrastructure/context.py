from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


@dataclass
class ContextScope:
    user_id: int


@dataclass
class RequestContextBundle:
    db: "AsyncSession"
    scope: ContextScope
