"""FastAPI application factory and lifespan."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from voicelift.api.v1 import api_router
from voicelift.core.app_state import load_app_state
from voicelift.core.config import get_settings
from voicelift.core.logging_config import configure_logging
from voicelift.db.session import engine, init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: create missing tables; shutdown: dispose the engine."""
    init_db()
    yield
    engine.dispose()


def create_application(app_state=None) -> FastAPI:
    """Build the app. app_state defaults to the state file in the documents directory."""
    settings = get_settings()
    configure_logging(settings)
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.app_state = app_state if app_state is not None else load_app_state(settings.app_state_path)

    if settings.debug or settings.environment == "development":
        cors_origins = ["*"]
    else:
        cors_origins = []
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {"status": "ok", "message": app.title}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
