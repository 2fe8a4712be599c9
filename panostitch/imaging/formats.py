# panostitch/imaging/formats.py
# Image formats the stitcher can read and write, keyed by file suffix.
# Only suffixes that Pillow actually registers are offered, so the list
# shown in --help always matches what the decoder will accept.

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from PIL import Image

_CANDIDATE_EXTENSIONS: Tuple[str, ...] = (".jpg", ".jpeg", ".png", ".tif", ".tiff")


def _registered() -> dict:
    # Image.init() loads every plugin; registered_extensions() calls it lazily
    return Image.registered_extensions()


SUPPORTED_EXTENSIONS: Tuple[str, ...] = tuple(
    ext for ext in _CANDIDATE_EXTENSIONS if ext in _registered()
)


def is_extension_supported(path: str | Path) -> bool:
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def keep_supported(paths: Iterable[str | Path]) -> List[str | Path]:
    return [p for p in paths if is_extension_supported(p)]


def image_format_for(path: str | Path) -> Optional[str]:
    """Pillow format name ("JPEG", "PNG", ...) for a supported path, else None."""
    if not is_extension_supported(path):
        return None
    return _registered().get(Path(path).suffix.lower())
