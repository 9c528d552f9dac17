"""HTTP resolver that fetches artifacts from a Nexus repository."""

from __future__ import annotations

import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Optional

import httpx

from deployer.exceptions import ArtifactNotFoundError, ResourceResolutionError
from deployer.modules.resource.domain import MavenCoordinates
from deployer.settings import Settings

from .base import ResolvedArtifact
from .local import LocalRepositoryResolver

PROGRESS_LOG_BYTES = 5 * 1024 * 1024


class NexusArtifactResolver:
    """Resolve artifacts from the local repository, downloading from Nexus on a miss."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings
        self.base_url = settings.nexus_base_url.rstrip("/")
        self.repository = settings.nexus_repository
        self.local = LocalRepositoryResolver(settings.local_repository)
        self.log = logging.getLogger(self.__class__.__name__)
        auth = None
        if settings.nexus_username and settings.nexus_password:
            auth = (settings.nexus_username, settings.nexus_password)
        self._auth = auth
        self._client = client or httpx.Client(timeout=settings.http_timeout, verify=True)

    def _build_artifact_url(self, coordinates: MavenCoordinates) -> str:
        return f"{self.base_url}/repository/{self.repository}/{coordinates.repository_path}"

    def resolve(self, coordinates: MavenCoordinates) -> ResolvedArtifact:
        target = self.local.artifact_path(coordinates)
        if target.is_file():
            self.log.info("Reusing local artifact %s -> %s", coordinates, target)
            return ResolvedArtifact(coordinates=coordinates, file=target)
        try:
            self._download(coordinates, target)
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 404:
                raise ArtifactNotFoundError(
                    f"Artifact {coordinates} not found at {exc.request.url}"
                ) from exc
            raise ResourceResolutionError(
                f"Failed to download {coordinates}: HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ResourceResolutionError(f"Failed to download {coordinates}: {exc}") from exc
        except OSError as exc:
            raise ResourceResolutionError(f"Failed to store {coordinates} at {target}: {exc}") from exc
        if not target.is_file():
            raise ResourceResolutionError(f"Artifact {coordinates} missing at {target} after download")
        return ResolvedArtifact(coordinates=coordinates, file=target)

    def _download(self, coordinates: MavenCoordinates, target: Path) -> None:
        url = self._build_artifact_url(coordinates)
        self.log.info("Downloading artifact %s url=%s", coordinates, url)
        target.parent.mkdir(parents=True, exist_ok=True)
        # partial file is private to this download
        fd, partial = tempfile.mkstemp(dir=target.parent, prefix=f"{target.name}.", suffix=".part")
        start_time = time.time()
        downloaded = 0
        try:
            with os.fdopen(fd, "wb") as fh, self._client.stream("GET", url, auth=self._auth) as response:
                response.raise_for_status()
                total = int(response.headers.get("content-length") or 0)
                next_percent = 10
                next_bytes_logged = PROGRESS_LOG_BYTES
                for chunk in response.iter_bytes(65536):
                    if not chunk:
                        continue
                    fh.write(chunk)
                    downloaded += len(chunk)
                    if total:
                        percent = int(downloaded * 100 / total)
                        if percent >= next_percent:
                            self.log.info(
                                "Download progress %s %s%% (%d/%d bytes)",
                                coordinates,
                                percent,
                                downloaded,
                                total,
                            )
                            next_percent += 10
                    elif downloaded >= next_bytes_logged:
                        self.log.info("Download progress %s %d bytes", coordinates, downloaded)
                        next_bytes_logged += PROGRESS_LOG_BYTES
            os.replace(partial, target)
        finally:
            if os.path.exists(partial):
                os.unlink(partial)
        elapsed = max(time.time() - start_time, 1e-3)
        speed_mb_s = (downloaded / 1024 / 1024) / elapsed
        self.log.info(
            "Downloaded artifact %s -> %s (%d bytes, %.2f MB/s, %.2fs)",
            coordinates,
            target,
            downloaded,
            speed_mb_s,
            elapsed,
        )
