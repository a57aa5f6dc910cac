"""FastAPI application entry point.

Configures CORS, structured logging, error rendering and router registration.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skills_api.config import settings
from skills_api.errors import ApiError
from skills_api.logging_config import setup_logging
from skills_api.routers import skills_router, themes_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks."""
    setup_logging()
    logger.info("Application starting up on port %s", settings.backend_port)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Skills and Themes API",
    description="CRUD API for skill themes and proficiency levels",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Error rendering: every failure is {"error": "..."}
# ---------------------------------------------------------------------------
@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render service errors with their status code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with the first offending field."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything the services did not classify as a 500 with the same body shape."""
    logger.error(
        "%s %s failed unexpectedly", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"error": str(exc)})


# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(themes_router)
app.include_router(skills_router)


@app.get("/")
def index() -> dict:
    """Describe the available endpoints."""
    return {
        "message": "Skills and Themes API",
        "endpoints": {
            "themes": {
                "getAll": "GET /themes",
                "getOne": "GET /themes/:id",
                "create": "POST /themes",
                "update": "PUT /themes/:id",
                "delete": "DELETE /themes/:id",
            },
            "skills": {
                "getAll": "GET /skills",
                "getOne": "GET /skills/:id",
                "create": "POST /skills",
                "update": "PUT /skills/:id",
                "delete": "DELETE /skills/:id",
            },
        },
    }


@app.get("/health")
def health() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "skills_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
    )
