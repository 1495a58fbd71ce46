# businesscard/resources.py
# ----------------------------------------------------------
# Static resources: card strings + profile picture loading
# ----------------------------------------------------------

from __future__ import annotations
import io
import logging
from pathlib import Path
from typing import Dict

from PIL import Image, ImageOps

logger = logging.getLogger(__name__)

STRINGS: Dict[str, str] = {
    "name": "Sam White",
    "job_title": "Android Developer",
    "github_handle": "@swhite",
    "show_portfolio": "show portfolio",
    "hide_portfolio": "hide portfolio",
    "profile_picture_description": "Profile picture",
}


class ResourceNotFound(LookupError):
    """A string key or asset file the card asked for does not exist."""

    def __init__(self, ref: str):
        super().__init__(f"resource not found: {ref}")
        self.ref = ref


def string_resource(key: str) -> str:
    try:
        return STRINGS[key]
    except KeyError:
        raise ResourceNotFound(key) from None


def profile_image(path: Path, size_px: int = 270) -> bytes:
    """Load ``path``, centre-crop to a ``size_px`` square and return PNG bytes.

    Transparency is kept. Anything that cannot be opened or decoded (missing,
    a directory, truncated, not an image) raises :class:`ResourceNotFound`.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("profile image missing at %s", path)
        raise ResourceNotFound(str(path))
    try:
        with Image.open(path) as im:
            square = ImageOps.fit(im.convert("RGBA"), (size_px, size_px), method=Image.LANCZOS)
    except OSError as e:
        # UnidentifiedImageError is an OSError too
        logger.warning("profile image at %s is not a readable image: %s", path, e)
        raise ResourceNotFound(str(path)) from e
    buf = io.BytesIO()
    square.save(buf, format="PNG")
    return buf.getvalue()
