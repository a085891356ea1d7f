from .dimensions import NormalizedDimensions, CANVAS_SIZE
from .responses import ResizeResponse, ErrorResponse
from .stored_blob import StoredBlob

__all__ = [
    "CANVAS_SIZE",
    "NormalizedDimensions",
    "ResizeResponse",
    "ErrorResponse",
    "StoredBlob",
]
