"""Main FastAPI application for the Smart Task Generator."""
from fastapi import FastAPI

from app.api.routes.tasks import router as tasks_router
from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging
from app.core.middleware import RequestIDMiddleware
from app.observability.client import init_opik

configure_logging(log_level=settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="API for intelligent task list generation using AI",
    license_info={"name": "MIT License", "url": "https://opensource.org/licenses/MIT"},
    debug=settings.debug,
)
app.add_middleware(RequestIDMiddleware)
register_error_handlers(app)
app.include_router(tasks_router)


@app.on_event("startup")
async def startup_observability() -> None:
    """Initialize observability backends after the event loop starts."""
    init_opik()


@app.get("/health", tags=["health"], summary="Readiness probe")
async def health_check() -> dict[str, str]:
    """Return a simple status payload so automation can probe the API."""
    return {"status": "ok"}
