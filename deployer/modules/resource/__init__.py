"""Coordinate addressed artifact resources."""

from .controller import router as resource_router
from .domain import MavenCoordinates
from .resource import MavenResource
from .service import ResourceService

__all__ = ["MavenCoordinates", "MavenResource", "ResourceService", "resource_router"]
