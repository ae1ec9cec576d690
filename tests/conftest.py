import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import slideshow_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from slideshow_toolkit.core.models import Orientation, Photo


# Common test fixtures
@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def mixed_photos() -> list[Photo]:
    """Two horizontal and four vertical photos with overlapping tags."""
    return [
        Photo(0, Orientation.HORIZONTAL, ("cat", "beach", "sun")),
        Photo(1, Orientation.VERTICAL, ("selfie", "smile")),
        Photo(2, Orientation.VERTICAL, ("garden", "selfie")),
        Photo(3, Orientation.HORIZONTAL, ("garden", "cat")),
        Photo(4, Orientation.VERTICAL, ("sun", "beach")),
        Photo(5, Orientation.VERTICAL, ("cat", "smile", "sun")),
    ]


@pytest.fixture
def sample_input(tmp_path: Path) -> Path:
    """Write a small photo collection file."""
    path = tmp_path / "photos.txt"
    path.write_text(
        "4\n"
        "H 3 cat beach sun\n"
        "V 2 selfie smile\n"
        "V 2 garden selfie\n"
        "H 2 garden cat\n",
        encoding="utf-8",
    )
    return path
