"""Shared fixtures for the resizer test-suite.

- Pillow-generated sample images (no binary fixtures on disk)
- A controllable monotonic clock for expiry and rate-limit windows
- Fresh blob store / rate limiter injected through dependency overrides
- A fake LLM facade so no request leaves the process
"""

import io
from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from resizer.main import app
from resizer.services import llm
from resizer.services.blob_store import EphemeralBlobStore, get_blob_store
from resizer.services.rate_limiter import FixedWindowRateLimiter, get_rate_limiter


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeLLM:
    """Stand-in for ``resizer.services.llm.complete``."""

    def __init__(self) -> None:
        self.response: str = '["Spec one — benefit one.", "Spec two — benefit two."]'
        self.error: Exception | None = None
        self.prompts: list[str] = []

    async def __call__(self, prompt: str, *, json_mode: bool = False) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


# ============================================================================
# Images
# ============================================================================


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Factory returning encoded image bytes of the given size and colour."""

    def _make(
        size: tuple[int, int] = (400, 300),
        color: tuple[int, ...] = (255, 0, 0),
        mode: str = "RGB",
        fmt: str = "PNG",
    ) -> bytes:
        buffer = io.BytesIO()
        Image.new(mode, size, color).save(buffer, format=fmt)
        return buffer.getvalue()

    return _make


@pytest.fixture
def png_bytes(make_image) -> bytes:
    return make_image()


# ============================================================================
# Services
# ============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> EphemeralBlobStore:
    return EphemeralBlobStore(ttl_seconds=600, clock=clock)


@pytest.fixture
def limiter(clock) -> FixedWindowRateLimiter:
    return FixedWindowRateLimiter(max_requests=10, window_seconds=3600, clock=clock)


@pytest.fixture
def fake_llm(monkeypatch) -> FakeLLM:
    fake = FakeLLM()
    monkeypatch.setattr(llm, "complete", fake)
    return fake


# ============================================================================
# API client
# ============================================================================


@pytest.fixture
def client(store, limiter, fake_llm) -> Iterator[TestClient]:
    app.dependency_overrides[get_blob_store] = lambda: store
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
