from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String

from infrastructure.database.database import Base


class Product(Base):
    __tablename__ = "products"

    # Assigned by the catalog service (max + 1), never by the database
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False, index=True)
    images = Column(JSON, nullable=False, default=list)
    category = Column(String(255), nullable=False)
    new_price = Column(Float, nullable=False)
    old_price = Column(Float, nullable=False)
    sizes = Column(JSON, nullable=False, default=list)
    date = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    available = Column(Boolean, nullable=False, default=True)
