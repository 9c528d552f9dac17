"""Constants shared across resource domain models."""

import re

DEFAULT_EXTENSION = "jar"
EMPTY_CLASSIFIER = ""

# a single coordinate field: no colons, no whitespace
FIELD_PATTERN = re.compile(r"[^:\s]+")

# <groupId>:<artifactId>[:<extension>[:<classifier>]]:<version>
COORDINATES_PATTERN = re.compile(r"([^:\s]+):([^:\s]+)(:([^:\s]*)(:([^:\s]+))?)?:([^:\s]+)")
