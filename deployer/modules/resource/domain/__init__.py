from .constants import DEFAULT_EXTENSION, EMPTY_CLASSIFIER
from .coordinates import MavenCoordinates

__all__ = [
    "DEFAULT_EXTENSION",
    "EMPTY_CLASSIFIER",
    "MavenCoordinates",
]
