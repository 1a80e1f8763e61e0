from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

import structlog

from prr.config import settings
from prr.core.logging import configure_logging

# IMPORT ROUTERS
from prr.routers.health import router as health_router
from prr.routers.services import router as services_router
from prr.routers.sections import router as sections_router
from prr.routers.questions import router as questions_router
from prr.routers.prr import router as prr_router
from prr.routers.search import router as search_router
from prr.routers.errors import validation_exception_handler

configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
logger = structlog.get_logger(__name__)


# SWAGGER UI — tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Services"},
    {"name": "Sections"},
    {"name": "Questions"},
    {"name": "PRR Submissions"},
    {"name": "Search"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=f"{settings.APP_NAME} API",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)      # Health
app.include_router(services_router)    # Services
app.include_router(sections_router)    # Sections
app.include_router(questions_router)   # Questions
app.include_router(prr_router)         # PRR Submissions
app.include_router(search_router)      # Search


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": f"{settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# STARTUP EVENT
@app.on_event("startup")
async def startup_event():
    logger.info("app_starting", app=settings.APP_NAME, env=settings.APP_ENV)


# SHUTDOWN EVENT
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("app_stopping", app=settings.APP_NAME)


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "prr.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
