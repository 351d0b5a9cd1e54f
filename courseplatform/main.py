import logging
from logging.config import dictConfig
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from courseplatform.config import AppSettings, LogConfig, config
from courseplatform.controllers import auth, courses, enrollments, users
from courseplatform.database import create_db_engine, create_session_factory, init_db
from courseplatform.exceptions import CoursePlatformError, UnauthorizedError
from courseplatform.middlewares.cors import setup_cors
from courseplatform.seed import seed_demo_data
from courseplatform.services.security import build_crypt_context

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    settings = settings or config
    settings.validate_runtime()
    dictConfig(LogConfig().model_dump())

    engine = create_db_engine(settings)
    app = FastAPI(title="Course Platform API")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.crypt_context = build_crypt_context(settings.BCRYPT_ROUNDS)

    setup_cors(app, settings)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(courses.router)
    app.include_router(enrollments.router)

    @app.exception_handler(CoursePlatformError)
    async def course_platform_error_handler(request: Request, exc: CoursePlatformError):
        logger.info(
            "%s on %s %s: %s",
            type(exc).__name__, request.method, request.url.path, exc.message,
        )
        headers = None
        if isinstance(exc, UnauthorizedError):
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=headers,
        )

    @app.get("/health")
    def health():
        return {"status": "ok", "message": "Course Platform API is running"}

    @app.on_event("startup")
    def startup_event():
        """Initialize application data on startup"""
        init_db(engine)
        if settings.SEED_DEMO_DATA:
            db = app.state.session_factory()
            try:
                seed_demo_data(db, app.state.crypt_context)
            finally:
                db.close()

    return app


app = create_app()
