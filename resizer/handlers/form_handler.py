"""Serves the single-page upload form."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

_TEMPLATE_PATH = Path(__file__).resolve().parent.parent / "templates" / "index.html"


@lru_cache()
def _load_form() -> str:
    return _TEMPLATE_PATH.read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse)
async def index():
    return HTMLResponse(_load_form())
