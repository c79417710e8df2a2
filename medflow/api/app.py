"""
MedFlow — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn medflow.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time

from medflow import __version__
from medflow.knowledge import known_symptoms

from .config import config
from .routes import (
    health_router,
    knowledge_router,
    sessions_router,
)

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager — банер при старті.
    """
    logger.info("=" * 60)
    logger.info("🏥 MedFlow API Starting...")
    logger.info("=" * 60)
    logger.info("✅ Knowledge base: %d symptoms", len(known_symptoms()))
    logger.info("⏱️ Delay scale: %s", config.delay_scale)
    logger.info("📍 Swagger UI: http://%s:%s/docs", config.host, config.port)
    logger.info("📍 ReDoc: http://%s:%s/redoc", config.host, config.port)
    logger.info("=" * 60)

    yield

    logger.info("🛑 MedFlow API Stopping...")


# Створюємо додаток
app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # Логуємо тільки API запити
    if request.url.path.startswith(config.api_prefix):
        logger.info(
            "📨 %s %s → %d (%.1fms)",
            request.method, request.url.path, response.status_code, process_time * 1000,
        )

    return response


# Глобальний обробник помилок
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("❌ Error: %s", exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if config.debug else None
        }
    )


# Підключаємо роутери
app.include_router(health_router)
app.include_router(knowledge_router, prefix=config.api_prefix)
app.include_router(sessions_router, prefix=config.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "medflow.api.app:app",
        host=config.host,
        port=config.port,
        reload=config.reload,
        log_level=config.log_level.lower(),
    )
