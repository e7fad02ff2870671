"""
Shared fixtures for the cbzpack test suite.
"""
import io
from pathlib import Path

import pytest
from PIL import Image

from models import Config, ImageFormat


PIL_FORMATS = {
    ImageFormat.JPEG: "JPEG",
    ImageFormat.PNG: "PNG",
    ImageFormat.GIF: "GIF",
    ImageFormat.WEBP: "WEBP",
}


# ── File-creation helpers ─────────────────────────────────────────────────────

def make_file(path: Path, content: bytes = b"dummy content") -> Path:
    """Create a file with the given content; create parent dirs as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


def image_bytes(fmt: ImageFormat = ImageFormat.PNG, size=(32, 32)) -> bytes:
    """Encode a small noisy RGB image so the compressed body is not trivial."""
    pixels = bytes((i * 7) % 256 for i in range(size[0] * size[1] * 3))
    image = Image.frombytes("RGB", size, pixels)
    buf = io.BytesIO()
    image.save(buf, format=PIL_FORMATS[fmt])
    return buf.getvalue()


def make_image(path: Path, fmt: ImageFormat = ImageFormat.PNG) -> Path:
    return make_file(path, image_bytes(fmt))


def make_corrupt_image(path: Path, fmt: ImageFormat = ImageFormat.PNG) -> Path:
    """Valid signature and header, truncated pixel data."""
    data = image_bytes(fmt)
    return make_file(path, data[: len(data) // 2])


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def comic(tmp_path: Path) -> Path:
    """Empty source directory named like a comic volume."""
    d = tmp_path / "Vol 01"
    d.mkdir()
    return d


@pytest.fixture
def config() -> Config:
    return Config(use_progress=False)
