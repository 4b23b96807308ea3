import sys
from pathlib import Path

import pytest
from PIL import Image

# Ensure the repository root is on sys.path for direct pytest runs
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def portrait_artwork():
    """2:3 portrait artwork, the shape the image model is asked for."""
    return Image.new("RGB", (200, 300), (250, 240, 230))


@pytest.fixture
def artwork_file(tmp_path, portrait_artwork):
    path = tmp_path / "birthday.png"
    portrait_artwork.save(path)
    return path
