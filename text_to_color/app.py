import uuid
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .api.admin import router as admin_router
from .api.colors import router as colors_router
from .config import Settings, get_settings
from .db import create_tables, init_engine_and_session
from .models import UserSession, ColorRequest  # noqa: F401 register models
from .openai_client import get_completion_client
from .service import ColorResolver, error_payload
from .utils.logging import get_logger, set_log_level

log = get_logger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    for err in exc.errors():
        if tuple(err.get("loc", ()))[:2] == ("body", "text"):
            return "Text is required"
    return "Invalid request body"


def create_app(settings: Settings = None, completion_client=None, SessionLocal=None) -> FastAPI:
    settings = settings or get_settings()
    set_log_level(settings.log_level)
    if SessionLocal is None:
        _engine, SessionLocal = init_engine_and_session(settings.database_url)

    app = FastAPI(title="Text to Color", version=settings.app_version)
    app.state.settings = settings
    app.state.SessionLocal = SessionLocal
    app.state.resolver = ColorResolver(SessionLocal, completion_client or get_completion_client(settings))

    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        log.warning(f"Rejected request to {request.url.path}: {message}")
        return JSONResponse(status_code=400, content=error_payload(message))

    @app.middleware("http")
    async def issue_session_cookie(request: Request, call_next):
        response = await call_next(request)
        if not request.cookies.get(settings.session_cookie_name):
            response.set_cookie(
                settings.session_cookie_name,
                str(uuid.uuid4()),
                max_age=settings.session_max_age,
                path="/",
                httponly=True,
                samesite="strict",
                secure=settings.secure_cookies,
            )
        return response

    @app.on_event("startup")
    def on_startup():
        create_tables(SessionLocal)
        log.info(f"Text to Color {settings.app_version} started")

    @app.get("/health")
    def health():
        return {"ok": True, "version": settings.app_version}

    app.include_router(colors_router, tags=["colors"])
    app.include_router(admin_router, prefix="/admin", tags=["admin"])
    return app


app = create_app()
