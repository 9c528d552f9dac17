"""Resource lookup service backing the HTTP routes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from deployer.exceptions import ArgumentError, ArtifactNotFoundError
from deployer.modules.resource.resolver import ArtifactResolver
from deployer.modules.resource.resource import MavenResource

log = logging.getLogger(__name__)

NOT_FOUND = "NOT_FOUND"
BAD_COORDINATES = "BAD_COORDINATES"
RESOLUTION_FAILED = "RESOLUTION_FAILED"


@dataclass
class OperationResult:
    ok: bool
    message: str
    data: Any = None
    code: str | None = None

    def as_dict(self) -> Dict[str, Any]:
        payload = {"status": "true" if self.ok else "false", "msg": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


class ResourceService:
    def __init__(self, resolver: ArtifactResolver) -> None:
        self.resolver = resolver

    def describe(self, *, coordinates: str) -> OperationResult:
        try:
            resource = MavenResource.parse(coordinates, self.resolver)
        except ArgumentError as exc:
            return OperationResult(False, str(exc), code=BAD_COORDINATES)
        return OperationResult(True, "ok", self._build_metadata(resource))

    def download(self, *, coordinates: str) -> OperationResult:
        try:
            resource = MavenResource.parse(coordinates, self.resolver)
            path = resource.get_file()
            file_meta = self._build_file_metadata(path)
        except ArgumentError as exc:
            return OperationResult(False, str(exc), code=BAD_COORDINATES)
        except ArtifactNotFoundError as exc:
            return OperationResult(False, str(exc), code=NOT_FOUND)
        except OSError as exc:
            log.warning("Resolution failed for %s: %s", coordinates, exc)
            return OperationResult(False, str(exc), code=RESOLUTION_FAILED)
        meta = self._build_metadata(resource)
        meta.update(file_meta)
        return OperationResult(True, "ok", meta)

    def _build_metadata(self, resource: MavenResource) -> Dict[str, Any]:
        return {
            "groupId": resource.group_id,
            "artifactId": resource.artifact_id,
            "extension": resource.extension,
            "classifier": resource.classifier,
            "version": resource.version,
            "coordinates": resource.description,
            "repositoryPath": resource.coordinates.repository_path,
        }

    def _build_file_metadata(self, path: Path) -> Dict[str, Any]:
        return {
            "filePath": str(path),
            "fileName": path.name,
            "size": path.stat().st_size,
        }
