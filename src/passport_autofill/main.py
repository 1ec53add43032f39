"""
Main FastAPI application for the Passport AutoFill parser service
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from passport_autofill.api.endpoints import router
from passport_autofill.core.config import settings
from passport_autofill.core.errors import InvalidInputError, PassportAutofillError
from passport_autofill.core.logging_config import setup_logging
from passport_autofill.models.document_models import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    setup_logging(
        service_name="passport-autofill",
        log_level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
    )
    logger.info("Starting Passport AutoFill API service")
    logger.info("Environment: %s", settings.ENVIRONMENT)
    logger.info("API Key auth: %s", settings.USE_API_KEY)

    yield

    logger.info("Shutting down Passport AutoFill API service")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    version=settings.VERSION,
    root_path=settings.API_ROOT_PATH,
    openapi_url="/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(PassportAutofillError)
async def handle_passport_autofill_error(
    request: Request, exc: PassportAutofillError
) -> JSONResponse:
    """Map tool errors to structured error responses"""
    if isinstance(exc, InvalidInputError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        logger.error("Service error on %s: %s", request.url.path, exc.message)
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    body = ErrorResponse(code=exc.error_code or "ERROR", message=exc.message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Passport AutoFill Parser API",
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


def run() -> None:
    """Run the service with uvicorn"""
    import uvicorn

    uvicorn.run(
        "passport_autofill.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info",
    )


if __name__ == "__main__":
    run()
