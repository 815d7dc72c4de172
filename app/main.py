# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from app.api import api_router
from app.api.security import AuthorizationMiddleware, POLICIES
from app.data.database import Base, engine as default_engine, make_session_factory
from app.data.seed import seed
from app.services.lock_service import LockService
from app.utils.settings import SEED_ON_STARTUP
from app.utils.logging import get_logger

# IMPORT WSZYSTKICH MODELI PRZED CREATE_ALL
from app.data import models  # noqa: F401

logger = get_logger(__name__)


def create_app(engine=None, lock_service: LockService | None = None, seed_on_startup: bool = SEED_ON_STARTUP) -> FastAPI:
    engine = engine or default_engine
    session_factory = make_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
        try:
            Base.metadata.create_all(bind=engine)
        except Exception as e:
            logger.error(f"Failed to create tables: {e}")
            raise
        logger.info("Database tables ready")

        if seed_on_startup:
            seed(session_factory)
        yield

    app = FastAPI(
        title="Shop Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.session_factory = session_factory
    app.state.lock_service = lock_service or LockService()

    app.add_middleware(AuthorizationMiddleware, policies=POLICIES)
    app.include_router(api_router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
