"""Shared configuration for SBOM generation.

The SBOM configuration lives in ``sbom.yaml`` at the package top level::

    type: spdx
    spdx:
      documentCreation:
        Creator:
          - "Person: Jane Doe"
        LicenseListVersion: "3.8"

One sub-tree per output format, one key per section within it. Section
entries map SPDX tag names to a string or a list of strings.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Self

import jsonschema
import yaml
from pydantic import BaseModel

from sbom.models import SbomType

SBOM_CONFIGURATION_FILE = "sbom.yaml"
PYPROJECT_FILE = "pyproject.toml"

# Package name used when none could be determined
DEFAULT_PACKAGE_NAME = "sbom-default-package-name"

# Base URL for document namespaces derived from the package name
PACKAGE_URL = "https://pypi.org/project/"

_TAG_VALUE_SCHEMA = {
    "anyOf": [
        {"type": "string"},
        {"type": "array", "items": {"type": "string"}},
    ]
}

# An empty YAML mapping ("spdx:" with nothing below it) loads as ""
_EMPTY = {"const": ""}

CONFIGURATION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "type": {"type": "string"},
        "package_name": {"type": "string"},
    },
    "additionalProperties": {
        "anyOf": [
            _EMPTY,
            {
                "type": "object",
                "additionalProperties": {
                    "anyOf": [
                        _EMPTY,
                        {"type": "object", "additionalProperties": _TAG_VALUE_SCHEMA},
                    ]
                },
            },
        ]
    },
}


@dataclass(frozen=True)
class Scalar:
    """A single configuration value."""

    value: str


@dataclass(frozen=True)
class ListValue:
    """A list of configuration values, in configuration order."""

    items: tuple[str, ...]


ConfigValue = Scalar | ListValue


def to_config_value(raw: str | list[str]) -> ConfigValue:
    """Wrap a configuration leaf in its variant.

    Args:
        raw: A string or list of strings from the configuration tree

    Returns:
        ListValue for lists, Scalar otherwise
    """
    if isinstance(raw, list):
        return ListValue(items=tuple(str(item) for item in raw))
    return Scalar(value=str(raw))


def validate_output_type(value: str) -> SbomType:
    """Validate the SBOM output type.

    Args:
        value: Output type from configuration

    Returns:
        The matching SbomType

    Raises:
        ValueError: If the output type is not supported
    """
    try:
        return SbomType(value.strip().lower())
    except ValueError as e:
        supported = ", ".join(t.value for t in SbomType)
        raise ValueError(
            f"Invalid SBOM type: '{value}'. Supported types: {supported}"
        ) from e


def validate_configuration_tree(data: Any) -> None:
    """Validate the structure of a parsed configuration tree.

    Raises:
        ValueError: If the tree does not match CONFIGURATION_SCHEMA
    """
    try:
        jsonschema.validate(instance=data, schema=CONFIGURATION_SCHEMA)
    except jsonschema.ValidationError as e:
        location = " -> ".join(str(p) for p in e.absolute_path)
        msg = f"Invalid SBOM configuration: {e.message}"
        if location:
            msg = f"{msg} (at {location})"
        raise ValueError(msg) from e


def read_package_name(package_top_level: Path) -> str | None:
    """Read the project name from pyproject.toml, if there is one.

    Raises:
        ValueError: If pyproject.toml exists but is not valid TOML
    """
    pyproject = package_top_level / PYPROJECT_FILE
    if not pyproject.is_file():
        return None
    try:
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid {PYPROJECT_FILE} at {pyproject}: {e}") from e
    project = data.get("project")
    if not isinstance(project, dict):
        return None
    name = project.get("name")
    return str(name) if name else None


class SbomConfiguration(BaseModel):
    """
    Parsed SBOM configuration for one package.

    Attributes:
        package_top_level: Directory the SBOM is generated for and written to
        package_name: Package name, or DEFAULT_PACKAGE_NAME when unknown
        output_type: Requested SBOM format
        contents: The configuration tree, every leaf a string
    """

    package_top_level: Path
    package_name: str = DEFAULT_PACKAGE_NAME
    output_type: SbomType = SbomType.SPDX
    contents: dict[str, Any] = {}

    @classmethod
    def from_yaml(
        cls,
        yaml_text: str,
        package_top_level: str | Path,
        package_name: str | None = None,
    ) -> Self:
        """
        Load a configuration from YAML text.

        BaseLoader keeps every scalar a string, so values such as
        ``2021-10-12T14:00:00Z`` or ``3.10`` reach the tags verbatim.

        Raises:
            ValueError: If the YAML is malformed or has an invalid structure
        """
        try:
            data = yaml.load(yaml_text, Loader=yaml.BaseLoader)
        except yaml.YAMLError as e:
            raise ValueError(f"YAML parsing error in SBOM configuration: {e}") from e
        if data is None or data == "":
            data = {}
        validate_configuration_tree(data)
        return cls._from_dict(data, Path(package_top_level), package_name)

    @classmethod
    def from_directory(cls, path: str | Path) -> Self:
        """
        Load the configuration of the package at ``path``.

        Reads ``sbom.yaml`` and takes the package name from the configuration
        or, failing that, from ``pyproject.toml``.

        Raises:
            ValueError: If the directory or configuration file is missing or invalid
        """
        package_top_level = Path(path)
        if not package_top_level.is_dir():
            raise ValueError(f"Package directory not found: {package_top_level}")
        config_file = package_top_level / SBOM_CONFIGURATION_FILE
        if not config_file.is_file():
            raise ValueError(
                f"No {SBOM_CONFIGURATION_FILE} configuration file found in {package_top_level}"
            )
        yaml_text = config_file.read_text(encoding="utf-8")
        return cls.from_yaml(
            yaml_text,
            package_top_level,
            package_name=read_package_name(package_top_level),
        )

    @classmethod
    def _from_dict(
        cls, data: dict, package_top_level: Path, package_name: str | None
    ) -> Self:
        """Create a configuration from a validated tree."""
        output_type = validate_output_type(data.get("type", SbomType.SPDX.value))
        name = data.get("package_name") or package_name or DEFAULT_PACKAGE_NAME
        contents = {
            key: value for key, value in data.items() if key not in ("type", "package_name")
        }
        return cls(
            package_top_level=package_top_level,
            package_name=name,
            output_type=output_type,
            contents=contents,
        )

    def has_format(self, output_type: SbomType) -> bool:
        """Check if the configuration has a sub-tree for an output format."""
        return output_type.value in self.contents

    def section(
        self, output_type: SbomType, section: str
    ) -> dict[str, ConfigValue] | None:
        """
        Get the entries of one section of an output format.

        Args:
            output_type: The output format sub-tree to look in
            section: The section name, e.g. "documentCreation"

        Returns:
            Tag names mapped to their values in configuration order,
            or None if the section is not configured
        """
        format_tree = self.contents.get(output_type.value) or {}
        if section not in format_tree:
            return None
        entries = format_tree[section] or {}
        return {key: to_config_value(raw) for key, raw in entries.items()}
