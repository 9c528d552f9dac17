"""Deployer SPI value objects."""

from .deployer import AppDeployer
from .domain import AppDefinition, AppDeploymentId, AppDeploymentRequest

__all__ = ["AppDefinition", "AppDeployer", "AppDeploymentId", "AppDeploymentRequest"]
