from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from resizer.config import get_settings
from resizer.errors import BlobNotFoundError, ResizerError
from resizer.models import ErrorResponse
from resizer.handlers import download_handler, form_handler, resize_handler
from resizer.services.blob_store import blob_store

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


async def _sweep_expired_blobs(interval: float) -> None:
    while True:
        await asyncio.sleep(interval)
        try:
            blob_store.sweep()
        except Exception:  # noqa: BLE001
            logger.exception("Blob expiry sweep failed; retrying next interval")


@asynccontextmanager
async def lifespan(_: FastAPI):
    sweeper = asyncio.create_task(_sweep_expired_blobs(settings.blob_sweep_interval_seconds))
    logger.info("Image resizer ready on port %s", settings.port)
    try:
        yield
    finally:
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper


app = FastAPI(title="Product Image Resizer", lifespan=lifespan)

app.include_router(form_handler.router)
app.include_router(resize_handler.router)
app.include_router(download_handler.router)


@app.exception_handler(ResizerError)
async def resizer_error_handler(request: Request, exc: ResizerError):
    if isinstance(exc, BlobNotFoundError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=exc.message).model_dump())


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


def run() -> None:  # pragma: no cover
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover
    run()
