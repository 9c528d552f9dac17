"""Key referring back to a deployed app."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from deployer.exceptions import ArgumentError

DELIMITER = "."


def _check_part(value: object, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ArgumentError(f"'{field_name}' must have text")
    if DELIMITER in value:
        raise ArgumentError(f"'{field_name}' must not contain '{DELIMITER}': {value!r}")


@dataclass(frozen=True)
class AppDeploymentId:
    """Everything a deployer needs to un-deploy an app or report its status.

    The properties are private to the deployer that created the id and take no
    part in equality or hashing. ``str(id)`` gives ``group.name`` (or ``name``
    without a group) and is suitable as a persistence key.
    """

    group: Optional[str]
    name: str
    properties: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if self.group is not None:
            _check_part(self.group, "group")
        _check_part(self.name, "name")
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties or {})))

    @classmethod
    def of(cls, name: str, properties: Optional[Mapping[str, str]] = None) -> "AppDeploymentId":
        return cls(None, name, properties)

    @classmethod
    def from_key(cls, key: str) -> "AppDeploymentId":
        """Rebuild an id from its ``str()`` form; properties are not recoverable."""
        if not isinstance(key, str) or not key:
            raise ArgumentError("deployment key must have text")
        parts = key.split(DELIMITER)
        if len(parts) == 1:
            return cls(None, parts[0])
        if len(parts) == 2:
            return cls(parts[0], parts[1])
        raise ArgumentError(f"Bad deployment key {key!r}, expected <group>.<name> or <name>")

    def __str__(self) -> str:
        if self.group is None:
            return self.name
        return f"{self.group}{DELIMITER}{self.name}"
