import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.api.routes_products import router as products_router
from app.config import settings
from app.db import init_db
from app.utils.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL)
log = logging.getLogger("app")
request_log = logging.getLogger("app.requests")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    init_db()
    log.info("Listening on port %s", settings.APP_PORT)
    yield


app = FastAPI(
    title="API Documentation",
    description="API Documentation",
    version="1.0.0",
    servers=[{"url": f"http://localhost:{settings.APP_PORT}"}],
    docs_url="/api-docs",
    openapi_url="/api-docs/openapi.json",
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    request_log.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    log.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse("Something went wrong.", status_code=500)


app.include_router(products_router)


def run():
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
