import io

import pytest
from PIL import Image, UnidentifiedImageError

from compressor.models.image_model import EncodeParameters
from compressor.services.encoder_service import PillowEncoder

LARGE_TARGET = 50 * 1024 * 1024


def _open(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def test_jpeg_downscaled_to_max_dimension(noisy_jpeg):
    out = PillowEncoder().encode(noisy_jpeg(3000, 2000, quality=80), EncodeParameters(0.8, 1920, LARGE_TARGET))
    img = _open(out)
    assert img.format == "JPEG"
    assert img.size == (1920, 1280)


def test_never_upscales(noisy_jpeg):
    out = PillowEncoder().encode(noisy_jpeg(200, 100), EncodeParameters(0.8, 1920, LARGE_TARGET))
    assert _open(out).size == (200, 100)


def test_png_stays_png_with_alpha(png_bytes):
    out = PillowEncoder().encode(png_bytes(2000, 500), EncodeParameters(0.5, 1280, LARGE_TARGET))
    img = _open(out)
    assert img.format == "PNG"
    assert img.mode == "RGBA"
    assert img.size == (1280, 320)


def test_lower_quality_gives_smaller_jpeg(noisy_jpeg):
    data = noisy_jpeg(800, 800)
    encoder = PillowEncoder(max_iterations=0)
    high = encoder.encode(data, EncodeParameters(0.9, 1920, LARGE_TARGET))
    low = encoder.encode(data, EncodeParameters(0.3, 1920, LARGE_TARGET))
    assert len(low) < len(high)


def test_iterates_towards_target(noisy_jpeg):
    data = noisy_jpeg(1000, 1000)
    single_pass = PillowEncoder(max_iterations=0).encode(data, EncodeParameters(0.8, 1920, 20_000))
    iterated = PillowEncoder(max_iterations=10).encode(data, EncodeParameters(0.8, 1920, 20_000))
    assert len(iterated) < len(single_pass)
    assert max(_open(iterated).size) < 1000


def test_stops_when_target_reached(noisy_jpeg):
    data = noisy_jpeg(300, 300)
    out = PillowEncoder().encode(data, EncodeParameters(0.8, 1920, LARGE_TARGET))
    assert _open(out).size == (300, 300)


def test_empty_data_rejected():
    with pytest.raises(ValueError):
        PillowEncoder().encode(b"", EncodeParameters(0.8, 1920, LARGE_TARGET))


def test_garbage_data_rejected():
    with pytest.raises(UnidentifiedImageError):
        PillowEncoder().encode(b"definitely not an image", EncodeParameters(0.8, 1920, LARGE_TARGET))


def test_unsupported_format_rejected():
    bio = io.BytesIO()
    Image.new("RGB", (10, 10)).save(bio, format="GIF")
    with pytest.raises(ValueError):
        PillowEncoder().encode(bio.getvalue(), EncodeParameters(0.8, 1920, LARGE_TARGET))


def test_invalid_step_rejected():
    with pytest.raises(ValueError):
        PillowEncoder(step=1.0)


@pytest.mark.parametrize("quality, max_dim, budget", [(0.0, 1920, 1), (1.1, 1920, 1), (0.5, 0, 1), (0.5, 10, 0)])
def test_encode_parameters_validated(quality, max_dim, budget):
    with pytest.raises(ValueError):
        EncodeParameters(quality, max_dim, budget)
