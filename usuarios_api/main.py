# usuarios_api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usuarios_api import models  # noqa
from usuarios_api.api.v1.endpoints import health, usuarios
from usuarios_api.core.config import Settings, settings as default_settings
from usuarios_api.core.exceptions import register_exception_handlers
from usuarios_api.core.logging_config import setup_logging
from usuarios_api.core.security import PasswordHasher
from usuarios_api.db.base import Base
from usuarios_api.db.session import create_db_engine, create_session_factory

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application with its own engine, session factory and password
    hasher. Handlers get them through dependencies reading ``app.state``.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    engine = create_db_engine(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=engine)
        logger.info(f"{settings.PROJECT_NAME} started (bcrypt rounds={settings.BCRYPT_ROUNDS})")
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(usuarios.router)
    app.include_router(health.router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
