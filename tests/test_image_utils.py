from io import BytesIO
from unittest import mock

import pytest
import requests
from PIL import Image

from anycard import image_utils
from anycard.errors import ArtworkLoadError
from anycard.layout import ImageSpec


def _png_bytes(size=(120, 180)):
    buf = BytesIO()
    Image.new("RGB", size, (255, 0, 0)).save(buf, "PNG")
    return buf.getvalue()


def test_load_artwork_from_path(artwork_file):
    img = image_utils.load_artwork(str(artwork_file))
    assert img.size == (200, 300)
    assert image_utils.image_spec_for(img) == ImageSpec(200, 300)


def test_load_artwork_from_url():
    response = mock.Mock(content=_png_bytes())
    with mock.patch.object(image_utils.requests, "get", return_value=response) as get:
        img = image_utils.load_artwork("https://images.example.com/card.png", timeout=5)
    get.assert_called_once_with("https://images.example.com/card.png", timeout=5)
    response.raise_for_status.assert_called_once()
    assert img.size == (120, 180)


def test_http_error_becomes_artwork_load_error():
    response = mock.Mock()
    response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
    with mock.patch.object(image_utils.requests, "get", return_value=response):
        with pytest.raises(ArtworkLoadError):
            image_utils.load_artwork("https://images.example.com/gone.png")


def test_undecodable_file_becomes_artwork_load_error(tmp_path):
    bogus = tmp_path / "not-an-image.png"
    bogus.write_text("hello")
    with pytest.raises(ArtworkLoadError):
        image_utils.load_artwork(str(bogus))
