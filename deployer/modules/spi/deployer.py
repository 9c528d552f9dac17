"""Contract implemented by runtime specific deployers."""

from __future__ import annotations

from typing import Protocol

from .domain import AppDeploymentId, AppDeploymentRequest


class AppDeployer(Protocol):
    def deploy(self, request: AppDeploymentRequest) -> AppDeploymentId:
        """Launch the app and return the id used for later lookups."""
        ...

    def undeploy(self, deployment_id: AppDeploymentId) -> None:
        ...
