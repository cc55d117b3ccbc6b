import pytest

from compressor.services.format_utils import compressed_filename, format_size


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 Б"),
        (1023, "1023 Б"),
        (1024, "1.00 КБ"),
        (999 * 1024, "999.00 КБ"),
        (1024 * 1024, "1.00 МБ"),
        (int(1.5 * 1024 * 1024), "1.50 МБ"),
    ],
)
def test_format_size(size, expected):
    assert format_size(size) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("photo.jpg", "photo-compressed.jpg"),
        ("my.holiday.PNG", "my.holiday-compressed.PNG"),
        ("noext", "noext-compressed"),
        ("", "image-compressed"),
        ("/tmp/dir/pic.jpeg", "pic-compressed.jpeg"),
    ],
)
def test_compressed_filename(name, expected):
    assert compressed_filename(name) == expected
