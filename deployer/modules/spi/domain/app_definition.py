"""Description of an application instance handed to a runtime."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from deployer.exceptions import ArgumentError


@dataclass(frozen=True)
class AppDefinition:
    """Information about an app itself.

    A deployer must not modify these values; its only job is to pass the
    properties into the runtime so they are visible to the running app.
    ``group`` may be ``None``. ``properties`` is copied into a read-only
    mapping, so later changes to the caller's dict are not observed.
    """

    name: str
    group: Optional[str] = None
    properties: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.name is None:
            raise ArgumentError("name must not be null")
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties or {})))
