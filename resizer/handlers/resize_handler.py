"""Form processing endpoint: letterbox the image and/or write product copy."""
from __future__ import annotations

import base64
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from resizer.errors import InputValidationError, ResizerError
from resizer.models import ErrorResponse, ResizeResponse
from resizer.services.blob_store import EphemeralBlobStore, get_blob_store
from resizer.services.copywriter import generate_copy
from resizer.services.dimensions import normalize_dimensions
from resizer.services.image_transformer import letterbox_image
from resizer.services.rate_limiter import FixedWindowRateLimiter, get_rate_limiter
from resizer.utils.filenames import build_output_filename

router = APIRouter()
logger = logging.getLogger(__name__)

MAX_PRODUCT_NAME_LENGTH = 100


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _has_text(value: Optional[str]) -> bool:
    return bool(value and value.strip())


async def enforce_copy_quota(
    request: Request,
    productName: Optional[str] = Form(None),  # noqa: N803
    limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
) -> None:
    """Count requests that ask for copy; image-only requests are exempt."""
    if _has_text(productName):
        limiter.check(client_key(request))


def name_length(name: str) -> int:
    """Length in UTF-16 code units, the unit browsers use for ``maxlength``."""
    return len(name.encode("utf-16-le")) // 2


# ---------------------------------------------------------------------------
# POST /resize
# ---------------------------------------------------------------------------


@router.post(
    "/resize",
    response_model=ResizeResponse,
    responses={code: {"model": ErrorResponse} for code in (400, 429, 500)},
    dependencies=[Depends(enforce_copy_quota)],
)
async def resize(
    productName: Optional[str] = Form(None),  # noqa: N803
    resizeWidth: Optional[str] = Form(None),  # noqa: N803
    resizeHeight: Optional[str] = Form(None),  # noqa: N803
    image: Optional[UploadFile] = File(None),
    store: EphemeralBlobStore = Depends(get_blob_store),
):
    try:
        image_bytes = await image.read() if image is not None else b""
        has_image = bool(image_bytes)
        has_name = _has_text(productName)
        name = productName.strip() if has_name else None

        if not has_image and not has_name:
            raise InputValidationError("Provide at least one field: product name or image.")
        if name is not None and name_length(name) > MAX_PRODUCT_NAME_LENGTH:
            raise InputValidationError(
                f"Product name cannot exceed {MAX_PRODUCT_NAME_LENGTH} characters."
            )

        dims = normalize_dimensions(resizeWidth, resizeHeight)
        image_id = None
        preview = None
        if has_image:
            resized = await run_in_threadpool(letterbox_image, image_bytes, dims)
            filename = build_output_filename(name, image.filename if image else None)
            image_id = store.put(resized, filename)
            preview = base64.b64encode(resized).decode("ascii")
            logger.info("Letterboxed image %s into %dx%d box", image_id, dims.width, dims.height)

        # Copy is only requested once the image, if any, has been processed.
        description = await generate_copy(name) if name is not None else None

        return ResizeResponse(description=description, image_id=image_id, preview_base64=preview)

    except ResizerError:
        raise
    except Exception as exc:
        logger.exception("Resize request failed: %s", exc)
        return JSONResponse(status_code=500, content=ErrorResponse(error=str(exc)).model_dump())
