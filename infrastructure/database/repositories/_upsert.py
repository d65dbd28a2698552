from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession


def dialect_insert(db: AsyncSession, table):
    """Return an INSERT construct that supports ``ON CONFLICT`` for the bound dialect."""
    dialect = db.bind.dialect.name
    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    else:
        raise NotImplementedError(f"ON CONFLICT upserts are not supported for dialect '{dialect}'")
    return insert(table)
