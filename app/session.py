from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.models import Base
from app.stores import AppState, get_app_state


def create_engine_and_sessionmaker(
    url: str,
    echo: bool = False
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """
    创建连接池。sqlite 文件不存在时由驱动自动创建。
    """
    engine = create_async_engine(url, echo=echo)
    SessionLocal = async_sessionmaker(engine, expire_on_commit=False)
    return engine, SessionLocal


async def init_db(engine: AsyncEngine):
    # 等价于 CREATE TABLE IF NOT EXISTS，可重复执行
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_async_session(
    state: AppState = Depends(get_app_state)
) -> AsyncGenerator[AsyncSession, None]:
    async with state.sessionmaker() as session:
        yield session
