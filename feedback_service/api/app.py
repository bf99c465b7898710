from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import DEFAULT_JWT_SECRET
from feedback_service.adapter.repositories.password_reset_repository import (
    create_password_reset_store,
)
from feedback_service.adapter.services.smtp_notification_sink import SmtpNotificationSink
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())[1:])
        details.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    error_dict = {"code": "BAD_REQUEST", "message": "; ".join(details) or "Invalid request"}
    logger.warning(f"Validation error: {error_dict}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": error_dict})


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    error_dict = {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.getLogger("feedback_service").setLevel(ApplicationConfig.LOG_LEVEL)

    if ApplicationConfig.JWT_SECRET == DEFAULT_JWT_SECRET:
        logger.warning(
            "JWT_SECRET is the development placeholder, tokens are forgeable. "
            "Set JWT_SECRET before deploying."
        )

    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    password_reset_store = create_password_reset_store(ApplicationConfig.RESET_STORE_DB_URI)
    notification_sink = SmtpNotificationSink.from_config(ApplicationConfig)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.DB_AUTO_CREATE:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            await password_reset_store.create_schema()
        yield
        await password_reset_store.close()
        await engine.dispose()

    app = FastAPI(title="Feedback API", version="0.1.0", lifespan=lifespan)

    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.password_reset_store = password_reset_store
    app.state.notification_sink = notification_sink

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from feedback_service.api.routes import auth, feedback, health_check, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(feedback.router, prefix=prefix, tags=["Feedback"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
