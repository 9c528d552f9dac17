"""Service wiring for the deployer application."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from deployer.modules.resource import ResourceService
from deployer.modules.resource.resolver import ArtifactResolver, build_resolver

from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    resolver: Optional[ArtifactResolver] = None
    resource_service: ResourceService = field(init=False)

    def __post_init__(self) -> None:
        if self.resolver is None:
            self.resolver = build_resolver(self.settings)
        self.resource_service = ResourceService(self.resolver)
        log.info(
            "Services ready resolver=%s offline=%s localRepository=%s",
            type(self.resolver).__name__,
            self.settings.resolver_offline,
            self.settings.local_repository,
        )
