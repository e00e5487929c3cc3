# repair_portal/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from repair_portal.core.config import Settings, get_settings
from repair_portal.core.database import build_engine, build_session_factory
from repair_portal.core.errors import register_exception_handlers
from repair_portal.core.logging_config import (
    LOGGER_NAME,
    RequestLoggingMiddleware,
    configure_logging,
    utc_timestamp,
)
from repair_portal.ticket.routes import router as ticket_router
from repair_portal.worker.routes import router as worker_router

logger = logging.getLogger(LOGGER_NAME)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESC,
        version=settings.APP_VERSION,
    )
    # Each app owns its own database; stores are built per request from this
    app.state.session_factory = build_session_factory(build_engine(settings.DATABASE_URL))
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_ORIGIN],
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type"],
    )
    register_exception_handlers(app)

    # Routers
    app.include_router(ticket_router)
    app.include_router(worker_router)

    @app.get("/api/health", tags=["Health"])
    def health():
        return {"status": "ok", "timestamp": utc_timestamp()}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logger.info(f"Repair Request API running on http://{settings.API_HOST}:{settings.API_PORT}")
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
