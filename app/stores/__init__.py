from dataclasses import dataclass, field

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.stores.visit_counter import VisitCounter


@dataclass
class AppState:
    """
    所有请求共享的状态：连接池和访问计数。
    """
    engine: AsyncEngine
    sessionmaker: async_sessionmaker[AsyncSession]
    visit_counter: VisitCounter = field(default_factory=VisitCounter)

    async def shutdown(self):
        await self.engine.dispose()


def get_app_state(request: Request) -> AppState:
    return request.app.state.context
