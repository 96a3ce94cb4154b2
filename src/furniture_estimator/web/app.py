"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from furniture_estimator.web.exceptions import register_exception_handlers
from furniture_estimator.web.routers import (
    estimate_router,
    export_router,
    layout_router,
    rates_router,
    validate_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Furniture Estimator API",
        description="REST API for furniture bills of materials, costs and front-view layouts",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(estimate_router, prefix="/api/v1")
    app.include_router(layout_router, prefix="/api/v1")
    app.include_router(export_router, prefix="/api/v1")
    app.include_router(rates_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")

    @app.get("/api/v1/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
