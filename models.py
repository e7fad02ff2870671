from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ImageFormat(Enum):
    JPEG = "jpg"
    PNG = "png"
    GIF = "gif"
    WEBP = "webp"

    @property
    def extension(self) -> str:
        """Canonical extension used for renamed archive entries (no dot)."""
        return self.value


@dataclass(frozen=True)
class ImageInfo:
    path: Path
    format: ImageFormat


@dataclass
class ScanResult:
    images: List[ImageInfo] = field(default_factory=list)
    non_images: List[Path] = field(default_factory=list)
    excluded: List[Path] = field(default_factory=list)


@dataclass(frozen=True)
class Config:
    no_rename: bool = False
    delete: bool = False
    verify: bool = False
    overwrite: bool = False
    use_progress: bool = True


class DirectoryStatus(Enum):
    CREATED = "created"
    SKIPPED = "skipped"      # existing archive, overwrite declined
    BLOCKED = "blocked"      # non-images present, nothing written
    FAILED = "failed"


@dataclass
class DirectoryReport:
    directory: Path
    status: DirectoryStatus
    archive_path: Optional[Path] = None
    images_written: int = 0
    non_images: List[Path] = field(default_factory=list)
    error: Optional[str] = None
