"""Artifact resource addressed by Maven coordinates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from deployer.exceptions import ResourceResolutionError
from deployer.modules.resource.domain import MavenCoordinates
from deployer.modules.resource.resolver import ArtifactResolver, ResolvedArtifact

log = logging.getLogger(__name__)


class MavenResource:
    """A resource for resolving an artifact via Maven coordinates.

    The resource itself never touches the network or filesystem; every call
    to :meth:`get_input_stream` or :meth:`get_file` asks the resolver again.
    Equality and hashing follow the coordinates only.
    """

    __slots__ = ("_coordinates", "_resolver")

    def __init__(self, coordinates: MavenCoordinates, resolver: ArtifactResolver) -> None:
        self._coordinates = coordinates
        self._resolver = resolver

    @classmethod
    def parse(cls, coordinates: str, resolver: ArtifactResolver) -> "MavenResource":
        return cls(MavenCoordinates.parse(coordinates), resolver)

    @property
    def coordinates(self) -> MavenCoordinates:
        return self._coordinates

    @property
    def group_id(self) -> str:
        return self._coordinates.group_id

    @property
    def artifact_id(self) -> str:
        return self._coordinates.artifact_id

    @property
    def extension(self) -> str:
        return self._coordinates.extension

    @property
    def classifier(self) -> str:
        return self._coordinates.classifier

    @property
    def version(self) -> str:
        return self._coordinates.version

    @property
    def description(self) -> str:
        return str(self._coordinates)

    def get_input_stream(self) -> BinaryIO:
        artifact = self._resolve()
        try:
            return artifact.open()
        except OSError as exc:
            raise ResourceResolutionError(f"Cannot open {self} at {artifact.file}") from exc

    def get_file(self) -> Path:
        return self._resolve().file

    def _resolve(self) -> ResolvedArtifact:
        try:
            return self._resolver.resolve(self._coordinates)
        except ResourceResolutionError:
            raise
        except Exception as exc:
            log.debug("Resolver failed for %s", self, exc_info=True)
            raise ResourceResolutionError(f"Failed to resolve {self}: {exc}") from exc

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, MavenResource):
            return NotImplemented
        return self._coordinates == other._coordinates

    def __hash__(self) -> int:
        return hash(self._coordinates)

    def __str__(self) -> str:
        return str(self._coordinates)

    def __repr__(self) -> str:
        return f"MavenResource({self._coordinates})"
