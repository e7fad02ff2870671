from typing import Optional

from models import ImageFormat

# Bytes read from the start of a file for signature matching
SNIFF_LENGTH = 16

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"
GIF_SIGNATURES = (b"GIF87a", b"GIF89a")


def detect_format(header: bytes) -> Optional[ImageFormat]:
    """
    Return the supported image format whose magic bytes open `header`,
    or None. File names and extensions play no part in the decision.
    """
    if header.startswith(JPEG_SIGNATURE):
        return ImageFormat.JPEG
    if header.startswith(PNG_SIGNATURE):
        return ImageFormat.PNG
    if header.startswith(GIF_SIGNATURES):
        return ImageFormat.GIF
    # RIFF <4-byte size> WEBP
    if len(header) >= 12 and header[:4] == b"RIFF" and header[8:12] == b"WEBP":
        return ImageFormat.WEBP
    return None
