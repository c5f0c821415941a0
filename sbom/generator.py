"""Output generator selection."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from sbom.config import SbomConfiguration
from sbom.models import SbomType
from sbom.spdx.generator import SpdxOutputGenerator
from sbom.spdx.tags import TagRegistry


class OutputGenerator(Protocol):
    """Protocol for SBOM output generators."""

    tags: TagRegistry | None
    sbom_file_path: Path | None

    def build(self) -> bool:
        """Build the document tags."""
        ...

    def validate(self) -> bool:
        """Validate the built document."""
        ...

    def generate(self) -> bool:
        """Build, validate and write the SBOM file."""
        ...


GENERATORS: dict[SbomType, type[SpdxOutputGenerator]] = {
    SbomType.SPDX: SpdxOutputGenerator,
}


class SbomGenerator:
    """Runs the output generator for the configured SBOM type"""

    def __init__(self, configuration: SbomConfiguration):
        self.configuration = configuration
        self.generator: OutputGenerator = GENERATORS[configuration.output_type](
            configuration
        )
        self.valid = False

    @property
    def tags(self) -> TagRegistry | None:
        return self.generator.tags

    @property
    def sbom_file_path(self) -> Path | None:
        return self.generator.sbom_file_path

    def generate(self) -> bool:
        """Generate the SBOM; ``valid`` reflects the outcome."""
        self.valid = self.generator.generate()
        return self.valid
