# businesscard/catalog.py
# ----------------------------------------------------------
# Portfolio projects shown on the card (fixed, in display order)
# ----------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class Project:
    title: str
    description: str
    # None -> the shared profile picture
    image_ref: Optional[Path] = None

    def __post_init__(self):
        if not self.title:
            raise ValueError("project title must not be empty")


PORTFOLIO: Tuple[Project, ...] = (
    Project(
        "ImageViewMVVMApp",
        "Allows the user to search the internet for images based on a search term.",
    ),
    Project(
        "PerfectFit",
        "A fitness app developed as part of my third year dissertation project.",
    ),
    Project(
        "JavaGPSDemo",
        "A demo of accessing and using GPS data using Java.",
    ),
)


class ProjectCatalog:
    """Read-only access to :data:`PORTFOLIO`."""

    @staticmethod
    def list() -> Tuple[Project, ...]:
        return PORTFOLIO

    @staticmethod
    def image_for(project: Project, default: Path) -> Path:
        """Image to draw next to ``project``; falls back to ``default``."""
        return project.image_ref if project.image_ref is not None else default
