"""Loading of the generated artwork from a path or URL."""
from __future__ import annotations

from io import BytesIO

import requests
from PIL import Image

from .errors import ArtworkLoadError
from .layout import ImageSpec


def load_artwork(source: str, timeout: float = 30) -> Image.Image:
    """Open the artwork at source, fetching it first when source is an http(s) URL.

    Raises:
        ArtworkLoadError: if the image cannot be fetched or decoded.
    """
    try:
        if source.startswith(("http://", "https://")):
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            img = Image.open(BytesIO(response.content))
        else:
            img = Image.open(source)
        img.load()
    except (requests.RequestException, OSError) as exc:
        raise ArtworkLoadError(f"Could not load artwork from {source}: {exc}") from exc
    return img


def image_spec_for(img: Image.Image) -> ImageSpec:
    width, height = img.size
    return ImageSpec(intrinsic_width=width, intrinsic_height=height)
