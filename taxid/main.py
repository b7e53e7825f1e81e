"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taxid import __version__
from taxid.core.config import settings
from taxid.core.logging import setup_logging
from taxid.api.routes import countries, health, tax_ids

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Syntactic and checksum validation of European tax / VAT identifiers",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# Include API routers
app.include_router(health.router)
app.include_router(tax_ids.router, prefix="/api")
app.include_router(countries.router, prefix="/api")


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"name": settings.app_name, "status": "running"}


def main() -> None:
    """Run the API with uvicorn.

    Intended for local use (``python -m taxid.main`` or the ``taxid-api``
    script). Deployments can point uvicorn at ``taxid.main:app`` directly.
    """
    import uvicorn

    logger.info("Starting %s (%s) on %s:%d", settings.app_name, settings.env, settings.host, settings.port)
    uvicorn.run(
        "taxid.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
