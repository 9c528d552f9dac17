"""Artifact resolvers consumed by :class:`MavenResource`."""

from __future__ import annotations

from deployer.settings import Settings

from .base import ArtifactResolver, ResolvedArtifact
from .local import LocalRepositoryResolver
from .nexus import NexusArtifactResolver


def build_resolver(settings: Settings) -> ArtifactResolver:
    if settings.resolver_offline:
        return LocalRepositoryResolver(settings.local_repository)
    return NexusArtifactResolver(settings)


__all__ = [
    "ArtifactResolver",
    "LocalRepositoryResolver",
    "NexusArtifactResolver",
    "ResolvedArtifact",
    "build_resolver",
]
