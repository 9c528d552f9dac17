"""Resolver backed by a local Maven repository directory."""

from __future__ import annotations

import logging
from pathlib import Path

from deployer.exceptions import ArtifactNotFoundError
from deployer.modules.resource.domain import MavenCoordinates

from .base import ResolvedArtifact


class LocalRepositoryResolver:
    """Look up artifacts laid out as ``group/path/artifact/version/file``."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).expanduser()
        self.log = logging.getLogger(self.__class__.__name__)

    def artifact_path(self, coordinates: MavenCoordinates) -> Path:
        return self.root.joinpath(*coordinates.path_segments)

    def resolve(self, coordinates: MavenCoordinates) -> ResolvedArtifact:
        path = self.artifact_path(coordinates)
        if not path.is_file():
            raise ArtifactNotFoundError(f"Artifact {coordinates} not found in {self.root}")
        self.log.debug("Resolved %s from local repository -> %s", coordinates, path)
        return ResolvedArtifact(coordinates=coordinates, file=path)
