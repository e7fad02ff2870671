"""Tests for formats.py — signature matching."""
import pytest

from formats import SNIFF_LENGTH, detect_format
from models import ImageFormat
from tests.conftest import image_bytes


class TestDetectFormat:
    @pytest.mark.parametrize("fmt", list(ImageFormat))
    def test_real_encoded_images(self, fmt):
        assert detect_format(image_bytes(fmt)[:SNIFF_LENGTH]) is fmt

    def test_jpeg_signature(self):
        assert detect_format(b"\xff\xd8\xff\xe0\x00\x10JFIF") is ImageFormat.JPEG

    def test_png_signature(self):
        assert detect_format(b"\x89PNG\r\n\x1a\n\x00\x00") is ImageFormat.PNG

    @pytest.mark.parametrize("sig", [b"GIF87a", b"GIF89a"])
    def test_gif_signatures(self, sig):
        assert detect_format(sig + b"\x01\x00") is ImageFormat.GIF

    def test_webp_signature(self):
        assert detect_format(b"RIFF\x24\x00\x00\x00WEBPVP8 ") is ImageFormat.WEBP

    def test_riff_but_not_webp(self):
        # WAV files share the RIFF container
        assert detect_format(b"RIFF\x24\x00\x00\x00WAVEfmt ") is None

    def test_unsupported_image_format(self):
        assert detect_format(b"BM\x36\x00\x00\x00\x00\x00") is None

    def test_text_is_not_an_image(self):
        assert detect_format(b"<?xml version=") is None

    def test_empty_header(self):
        assert detect_format(b"") is None

    def test_short_header(self):
        assert detect_format(b"\xff\xd8") is None
