from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1 import carriers, projections
from app.core.logging import RequestLoggingMiddleware, setup_logging


def create_app() -> FastAPI:
    setup_logging(
        json_format=settings.log_json,
        debug=settings.debug,
        service=settings.app_name.lower(),
    )

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )

    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(carriers.router, prefix="/api/v1", tags=["energy-carriers"])
    application.include_router(
        projections.router, prefix="/api/v1/projections", tags=["projections"]
    )

    @application.get("/health")
    async def health_check() -> dict:
        return {"status": "ok", "app": settings.app_name}

    return application


app = create_app()
