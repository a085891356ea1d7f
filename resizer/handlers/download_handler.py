"""Single-use download of letterboxed images."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from resizer.errors import BlobNotFoundError
from resizer.services.blob_store import EphemeralBlobStore, get_blob_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/download/{blob_id}")
async def download(blob_id: str, store: EphemeralBlobStore = Depends(get_blob_store)):
    blob = store.take_once(blob_id)
    if blob is None:
        raise BlobNotFoundError("File not found or already downloaded.")
    logger.info("Serving %s (%d bytes)", blob.filename, len(blob.content))
    return Response(
        content=blob.content,
        media_type="image/jpeg",
        headers={"Content-Disposition": f'attachment; filename="{blob.filename}"'},
    )
