"""Contracts for turning coordinates into local artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Protocol

from deployer.modules.resource.domain import MavenCoordinates


@dataclass(frozen=True)
class ResolvedArtifact:
    """An artifact materialized on the local filesystem."""

    coordinates: MavenCoordinates
    file: Path

    def open(self) -> BinaryIO:
        return self.file.open("rb")


class ArtifactResolver(Protocol):
    def resolve(self, coordinates: MavenCoordinates) -> ResolvedArtifact:
        ...
