from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import time
from loguru import logger
from contextlib import asynccontextmanager

from .api.api import api_router
from .core.config import settings
from .core.database import connect_to_mongodb, close_mongodb_connection
from .core.error_handlers import register_error_handlers
from .core.logging import configure_logging
import uvicorn

configure_logging(settings.LOG_LEVEL)


# Define lifespan for startup/shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting up {settings.PROJECT_NAME} ({settings.ENV})")
    await connect_to_mongodb()

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")
    await close_mongodb_connection()


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=settings.DOCS_URL,
    redoc_url=None,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Add request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


register_error_handlers(app)

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    logger.info(f"Server listening on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
