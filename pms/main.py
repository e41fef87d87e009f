import os
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .config import settings
from .db import Base, engine, SessionLocal
from .logging import setup_logging, RequestIdMiddleware, BodySizeLimitMiddleware
from .routes.initial_data import router as initial_data_router
from .routes.works import router as works_router
from .routes.users import router as users_router
from .routes.tasks import router as tasks_router
from .routes.finance import router as finance_router
from .routes.materials import router as materials_router
from .routes.logs import router as logs_router
from .routes.inventory import router as inventory_router
from .routes.integrations import router as integrations_router
from .services.records import InvalidRecordError


logger = structlog.get_logger(__name__)


def install_rate_limit(app: FastAPI, limit: str) -> Limiter:
    """Apply ``limit`` (slowapi syntax, e.g. ``100/minute``) per client address to every route."""
    limiter = Limiter(key_func=get_remote_address, default_limits=[limit])
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title=settings.app_name)

    # Middlewares
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_mb * 1024 * 1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_rate_limit(app, settings.rate_limit)

    @app.exception_handler(InvalidRecordError)
    async def _invalid_record(request: Request, exc: InvalidRecordError):
        logger.info("invalid_record", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=400, content={"error": "Invalid record", "detail": str(exc)})

    @app.exception_handler(IntegrityError)
    async def _integrity_error(request: Request, exc: IntegrityError):
        logger.warning("db_integrity_error", path=request.url.path, error=str(exc.orig))
        return JSONResponse(status_code=409, content={"error": "Integrity error", "detail": str(exc.orig)})

    @app.exception_handler(SQLAlchemyError)
    async def _db_error(request: Request, exc: SQLAlchemyError):
        logger.error("db_error", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=500, content={"error": "Database error"})

    # Routers
    app.include_router(initial_data_router)
    app.include_router(works_router)
    app.include_router(users_router)
    app.include_router(tasks_router)
    app.include_router(finance_router)
    app.include_router(materials_router)
    app.include_router(logs_router)
    app.include_router(inventory_router)
    app.include_router(integrations_router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "PMS Backend is running."

    # Metrics
    Instrumentator().instrument(app).expose(app)

    @app.on_event("startup")
    def _startup():
        logger.info("startup", environment=settings.environment)
        # Ensure local SQLite directory exists
        if settings.database_url.startswith("sqlite:///./"):
            os.makedirs("var", exist_ok=True)
        if settings.auto_create_db:
            Base.metadata.create_all(bind=engine)
            logger.info("startup_tables_verified", tables=len(Base.metadata.tables))
        if settings.seed_on_startup:
            from .services.seed import seed_if_empty

            db = SessionLocal()
            try:
                if seed_if_empty(db):
                    logger.info("startup_seeded")
            finally:
                db.close()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pms.main:app", host=settings.host, port=settings.port)
