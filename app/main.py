from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import access, events, hook, risk, sessions, tokens
from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.logging import configure_logging
from app.services.access_control import bootstrap_owner

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    db = SessionLocal()
    try:
        owner = bootstrap_owner(db, settings.REGISTRY_OWNER)
        logger.info("registry_ready", owner=owner.owner, policy=settings.HOOK_POLICY.value)
    finally:
        db.close()
    yield


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    app = FastAPI(
        title="OrcaSignal Risk Registry API",
        description="Token risk registry, gasless sessions and swap risk gate",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check
    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "ok"}

    # API Routers
    app.include_router(risk.router, prefix=settings.API_V1_PREFIX, tags=["Risk Registry"])
    app.include_router(access.router, prefix=settings.API_V1_PREFIX, tags=["Access Control"])
    app.include_router(sessions.router, prefix=settings.API_V1_PREFIX, tags=["Sessions"])
    app.include_router(hook.router, prefix=settings.API_V1_PREFIX, tags=["Hook"])
    app.include_router(events.router, prefix=settings.API_V1_PREFIX, tags=["Events"])
    app.include_router(tokens.router, prefix=settings.API_V1_PREFIX, tags=["Tokens"])

    return app


app = create_app()
