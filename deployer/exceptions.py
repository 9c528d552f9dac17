"""Error kinds shared by the resource and spi modules."""

from __future__ import annotations


class DeployerError(Exception):
    """Base class for all errors raised by this package."""


class ArgumentError(DeployerError, ValueError):
    """Raised when a required field is missing, blank or malformed."""


class CoordinateFormatError(ArgumentError):
    """Raised when a coordinate string does not match the expected format."""

    def __init__(self, coordinates: object, message: str | None = None) -> None:
        self.coordinates = coordinates
        super().__init__(
            message
            or (
                f"Bad artifact coordinates {coordinates!r}, expected format is "
                "<groupId>:<artifactId>[:<extension>[:<classifier>]]:<version>"
            )
        )


class ResourceResolutionError(DeployerError, OSError):
    """Raised when a resolver cannot produce the bytes or file of an artifact."""


class ArtifactNotFoundError(ResourceResolutionError):
    """Raised when the artifact does not exist in the repository."""
