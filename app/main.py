import logging
from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.config import Settings, get_settings, settings
from app.errors import MethodNotAllowed, RelayError
from app.routers import upload
from app.schemas.upload import ErrorResponse
import structlog

logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

# Create FastAPI app
app = FastAPI(
    title="Static Media Upload API",
    description="Relays brand media uploads to the static content repository",
    version="1.0.0"
)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    """Render relay errors as JSON with the upload CORS headers."""
    body = ErrorResponse(error=exc.error, message=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=upload.CORS_HEADERS
    )


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Answer any method the routes do not serve with the relay's 405 body."""
    if exc.status_code == 405:
        return await relay_error_handler(request, MethodNotAllowed())
    return await http_exception_handler(request, exc)


# Include routers; the Netlify path keeps existing front ends working
app.include_router(upload.router)
app.include_router(upload.router, prefix="/.netlify/functions")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Static Media Upload API is running"}


@app.get("/health")
async def health_check(app_settings: Settings = Depends(get_settings)):
    """Detailed health check endpoint."""
    return {
        "status": "healthy",
        "service": "static-media-upload-api",
        "version": "1.0.0",
        "environment": app_settings.environment
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
