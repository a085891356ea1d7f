"""Letterbox uploaded images onto a fixed white square canvas using Pillow."""
from __future__ import annotations

import io
import logging

from PIL import Image, UnidentifiedImageError

from resizer.errors import ImageTransformError
from resizer.models import CANVAS_SIZE, NormalizedDimensions

logger = logging.getLogger(__name__)

_BG_COLOR = (255, 255, 255)
JPEG_QUALITY = 90


def letterbox_image(
    file_bytes: bytes,
    dims: NormalizedDimensions,
    *,
    quality: int = JPEG_QUALITY,
) -> bytes:
    """Fit *file_bytes* inside the ``dims`` box and pad to a square JPEG canvas.

    The source keeps its aspect ratio and is never enlarged. It is centred in
    the ``width x height`` box, which in turn sits at ``(pad_left, pad_top)``
    on a ``CANVAS_SIZE`` square filled with white.

    Raises
    ------
    ImageTransformError
        If the bytes cannot be decoded as an image or re-encoded as JPEG.
    """

    try:
        with Image.open(io.BytesIO(file_bytes)) as img:
            img.load()
            fitted = _fit_within(_normalize_mode(img), dims.width, dims.height)

        canvas = Image.new("RGB", (CANVAS_SIZE, CANVAS_SIZE), _BG_COLOR)
        x = dims.pad_left + (dims.width - fitted.width) // 2
        y = dims.pad_top + (dims.height - fitted.height) // 2
        if fitted.mode == "RGBA":
            canvas.paste(fitted, (x, y), fitted)
        else:
            canvas.paste(fitted, (x, y))

        buffer = io.BytesIO()
        canvas.save(buffer, format="JPEG", quality=quality)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        logger.warning("Image transform failed: %s", exc)
        raise ImageTransformError(str(exc)) from exc

    logger.debug("Letterboxed %d bytes into %dx%d box", len(file_bytes), dims.width, dims.height)
    return buffer.getvalue()


def _normalize_mode(img: Image.Image) -> Image.Image:
    """Return an RGB image, or RGBA when the source carries transparency."""

    has_alpha = img.mode in ("RGBA", "LA", "PA") or (img.mode == "P" and "transparency" in img.info)
    return img.convert("RGBA" if has_alpha else "RGB")


def _fit_within(img: Image.Image, box_width: int, box_height: int) -> Image.Image:
    width, height = img.size
    scale = min(box_width / width, box_height / height, 1.0)
    if scale >= 1.0:
        return img
    new_size = (max(1, round(width * scale)), max(1, round(height * scale)))
    return img.resize(new_size, Image.Resampling.LANCZOS)
