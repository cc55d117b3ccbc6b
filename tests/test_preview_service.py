import io

import pytest
from PIL import Image

from compressor.services.preview_service import from_data_url, parse_data_url, to_data_url


def test_data_url_prefix():
    assert to_data_url(b"\x00\x01", "image/png") == "data:image/png;base64,AAE="


def test_parse_data_url():
    mime, data = parse_data_url(to_data_url(b"hello", "image/jpeg"))
    assert mime == "image/jpeg"
    assert data == b"hello"


def test_from_data_url_decodes_image():
    bio = io.BytesIO()
    Image.new("RGB", (12, 7), (1, 2, 3)).save(bio, format="PNG")
    img = from_data_url(to_data_url(bio.getvalue(), "image/png"))
    assert img.size == (12, 7)
    assert img.mode == "RGBA"


@pytest.mark.parametrize("url", ["http://example.com/a.png", "data:image/png,raw", "data:image/png;base64,@@@"])
def test_invalid_data_url(url):
    with pytest.raises(ValueError):
        parse_data_url(url)


def test_data_url_without_image():
    with pytest.raises(ValueError):
        from_data_url(to_data_url(b"not an image", "image/png"))
