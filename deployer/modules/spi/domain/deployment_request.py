"""Bundle a deployer receives when asked to launch an app."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from deployer.exceptions import ArgumentError
from deployer.modules.resource import MavenResource

from .app_definition import AppDefinition


@dataclass(frozen=True)
class AppDeploymentRequest:
    definition: AppDefinition
    resource: MavenResource
    deployment_properties: Mapping[str, str] = field(default_factory=dict, hash=False)
    command_line_args: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.definition is None:
            raise ArgumentError("definition must not be null")
        if self.resource is None:
            raise ArgumentError("resource must not be null")
        object.__setattr__(
            self,
            "deployment_properties",
            MappingProxyType(dict(self.deployment_properties or {})),
        )
        object.__setattr__(self, "command_line_args", tuple(self.command_line_args or ()))
