"""Maven coordinates of a deployable artifact."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from deployer.exceptions import ArgumentError, CoordinateFormatError

from .constants import COORDINATES_PATTERN, DEFAULT_EXTENSION, EMPTY_CLASSIFIER, FIELD_PATTERN


def _require_text(value: object, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ArgumentError(f"'{field_name}' cannot be blank")
    _require_token(value, field_name)


def _require_token(value: str, field_name: str) -> None:
    if FIELD_PATTERN.fullmatch(value) is None:
        raise ArgumentError(f"'{field_name}' must not contain ':' or whitespace: {value!r}")


@dataclass(frozen=True, kw_only=True)
class MavenCoordinates:
    """Represents a Maven artifact coordinate.

    Build one with keyword fields, leaving ``extension`` and ``classifier`` to
    their defaults when not needed::

        MavenCoordinates(group_id="org.example", artifact_id="some-app", version="2.0.0")
        MavenCoordinates(group_id="org.example", artifact_id="some-app",
                         extension="jar", classifier="exec", version="2.0.0")

    or parse the colon delimited form with :meth:`parse`.
    """

    group_id: str
    artifact_id: str
    version: str
    extension: str = DEFAULT_EXTENSION
    classifier: str = EMPTY_CLASSIFIER

    def __post_init__(self) -> None:
        _require_text(self.group_id, "groupId")
        _require_text(self.artifact_id, "artifactId")
        _require_text(self.extension, "extension")
        _require_text(self.version, "version")
        if self.classifier is None:
            object.__setattr__(self, "classifier", EMPTY_CLASSIFIER)
        elif not isinstance(self.classifier, str):
            raise ArgumentError(f"'classifier' must be a string: {self.classifier!r}")
        elif self.classifier:
            _require_token(self.classifier, "classifier")

    # classifier only contributes to the hash when present
    def __hash__(self) -> int:
        parts = [self.group_id, self.artifact_id, self.extension]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return hash(tuple(parts))

    def __str__(self) -> str:
        if self.classifier:
            return (
                f"{self.group_id}:{self.artifact_id}:{self.extension}:"
                f"{self.classifier}:{self.version}"
            )
        return f"{self.group_id}:{self.artifact_id}:{self.extension}:{self.version}"

    @classmethod
    def parse(cls, coordinates: str) -> "MavenCoordinates":
        """Parse ``<groupId>:<artifactId>[:<extension>[:<classifier>]]:<version>``."""
        if not isinstance(coordinates, str) or not coordinates:
            raise CoordinateFormatError(coordinates)
        match = COORDINATES_PATTERN.fullmatch(coordinates)
        if match is None:
            raise CoordinateFormatError(coordinates)
        return cls(
            group_id=match.group(1),
            artifact_id=match.group(2),
            extension=match.group(4) or DEFAULT_EXTENSION,
            classifier=match.group(6) or EMPTY_CLASSIFIER,
            version=match.group(7),
        )

    @property
    def file_name(self) -> str:
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.artifact_id}-{self.version}{suffix}.{self.extension}"

    @property
    def path_segments(self) -> List[str]:
        group_path = self.group_id.replace(".", "/")
        return [group_path, self.artifact_id, self.version, self.file_name]

    @property
    def repository_path(self) -> str:
        return "/".join(self.path_segments)
