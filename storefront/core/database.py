from typing import Optional

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

from storefront.core.config import DB_DRIVER, DB_HOST, DB_PASSWORD

Base = declarative_base()


def build_database_url(
    dbname: str,
    port: int,
    user: str,
    password: Optional[str] = None,
    host: Optional[str] = None,
) -> URL:
    """Build the connection URL from the startup arguments."""
    return URL.create(
        DB_DRIVER,
        username=user,
        password=(password if password is not None else DB_PASSWORD) or None,
        host=host or DB_HOST,
        port=port,
        database=dbname,
    )


def create_engine(url) -> AsyncEngine:
    # A single connection is held for the whole session
    url = make_url(url)
    if url.get_backend_name() == "sqlite":
        return create_async_engine(url, echo=False, future=True)
    return create_async_engine(
        url, echo=False, future=True, pool_size=1, max_overflow=0
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables; existing tables are left as they are."""
    import storefront.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
