# goal_tracker/database.py
from typing import AsyncGenerator
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from goal_tracker.config import settings

db_url = settings.effective_database_url
is_sqlite = db_url.startswith("sqlite")

# SQLite connections are cheap; no pooling keeps them off any single event loop.
engine = create_async_engine(
    db_url,
    echo=settings.SQL_ECHO,
    **({"poolclass": NullPool} if is_sqlite else {}),
)

if is_sqlite:
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

AsyncSessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)
Base = declarative_base()

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
