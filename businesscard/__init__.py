"""Business card core: toggle state, project catalog and static resources."""

from businesscard.catalog import PORTFOLIO, Project, ProjectCatalog
from businesscard.resources import ResourceNotFound, profile_image, string_resource
from businesscard.state import CardState, PortfolioView

__all__ = [
    "CardState",
    "PORTFOLIO",
    "PortfolioView",
    "Project",
    "ProjectCatalog",
    "ResourceNotFound",
    "profile_image",
    "string_resource",
]
