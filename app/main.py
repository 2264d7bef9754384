import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, settings as default_settings
from app.exceptions import SongStoreError
from app.logging_config import setup_logging
from app.routers import root, song
from app.session import create_engine_and_sessionmaker, init_db
from app.stores import AppState

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine, SessionLocal = create_engine_and_sessionmaker(settings.DATABASE_URL, settings.DB_ECHO)
    await init_db(engine)
    logger.info("Database ready at %s", settings.DATABASE_URL)

    app.state.context = AppState(engine=engine, sessionmaker=SessionLocal)
    yield

    logger.info("Shutting down...")
    await app.state.context.shutdown()


async def song_store_error_handler(request: Request, exc: SongStoreError):
    # 所有接口统一用 {"error": ...}，状态码保持 200
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Song Server", lifespan=lifespan)
    app.state.settings = settings

    # 全局中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SongStoreError, song_store_error_handler)

    # 挂载子路由
    app.include_router(root.router)
    app.include_router(song.router)
    return app


app = create_app()


def run():
    import uvicorn

    setup_logging(default_settings.LOG_LEVEL)
    logger.info("Starting server on %s:%s", default_settings.HOST, default_settings.PORT)
    uvicorn.run(
        app,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
