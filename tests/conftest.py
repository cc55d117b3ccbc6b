import io
from typing import List, Sequence, Tuple

import pytest
from PIL import Image

from compressor.logger import configure_logging
from compressor.models.image_model import EncodeParameters, SourceImage


def pytest_configure():
    configure_logging("DEBUG")


class FakeEncoder:
    """Детерминированный кодер: отдаёт байты заранее заданных размеров по очереди."""

    def __init__(self, sizes: Sequence[int], fail_on_call: int = 0, error: Exception | None = None):
        self.sizes = list(sizes)
        self.fail_on_call = fail_on_call
        self.error = error or RuntimeError("encoder exploded")
        self.calls: List[Tuple[bytes, EncodeParameters]] = []

    def encode(self, data: bytes, params: EncodeParameters) -> bytes:
        self.calls.append((data, params))
        if self.fail_on_call == len(self.calls):
            raise self.error
        size = self.sizes[min(len(self.calls), len(self.sizes)) - 1]
        return b"\x7f" * size


@pytest.fixture
def fake_encoder():
    def _make(*sizes: int, fail_on_call: int = 0, error: Exception | None = None) -> FakeEncoder:
        return FakeEncoder(sizes, fail_on_call=fail_on_call, error=error)
    return _make


@pytest.fixture
def make_source():
    def _make(size: int, name: str = "photo.jpg", mime_type: str = "image/jpeg") -> SourceImage:
        return SourceImage(data=b"\x01" * size, mime_type=mime_type, name=name)
    return _make


def _encode(img: Image.Image, fmt: str, **params) -> bytes:
    bio = io.BytesIO()
    img.save(bio, format=fmt, **params)
    return bio.getvalue()


@pytest.fixture
def noisy_jpeg():
    """JPEG с шумом: плохо сжимается, поэтому размеры результатов заметно различаются."""
    def _make(width: int, height: int, quality: int = 95) -> bytes:
        img = Image.effect_noise((width, height), 64).convert("RGB")
        return _encode(img, "JPEG", quality=quality)
    return _make


@pytest.fixture
def png_bytes():
    def _make(width: int, height: int, mode: str = "RGBA") -> bytes:
        color = (200, 40, 40, 128) if mode == "RGBA" else (200, 40, 40)
        return _encode(Image.new(mode, (width, height), color), "PNG")
    return _make
