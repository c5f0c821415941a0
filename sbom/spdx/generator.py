"""SPDX tag/value output generator.

Runs every section through assembly, validation and serialization, in the
order of the section table. The first hard failure ends the run; the public
methods report it as False and log the reason.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from sbom import __version__
from sbom.config import SbomConfiguration
from sbom.logging_config import logger
from sbom.models import SbomType
from sbom.spdx.assembler import assemble_section
from sbom.spdx.builder import create_spdx_tags
from sbom.spdx.constants import OUTPUT_FILE_NAME
from sbom.spdx.protocols import AssemblyContext, SectionPolicy
from sbom.spdx.sections import SECTION_POLICIES
from sbom.spdx.serializer import serialize_section
from sbom.spdx.tags import TagRegistry
from sbom.spdx.validator import validate_section


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SpdxOutputGenerator:
    """Generator for SPDX tag/value SBOM files"""

    def __init__(
        self,
        configuration: SbomConfiguration,
        policies: Iterable[SectionPolicy] = SECTION_POLICIES,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize the generator

        Args:
            configuration: Parsed SBOM configuration, never modified
            policies: Section policies, in document order
            clock: Source of the creation timestamp (default: current UTC time)
        """
        self.configuration = configuration
        self.policies = tuple(policies)
        self._clock = clock or _utc_now
        self.tags: TagRegistry | None = None
        self.sbom_file_path: Path | None = None

    @property
    def output_file(self) -> Path:
        """Path the SBOM file is written to."""
        return self.configuration.package_top_level / OUTPUT_FILE_NAME

    def _assembly_context(self) -> AssemblyContext:
        return AssemblyContext(
            package_name=self.configuration.package_name,
            created=self._clock(),
            tool_version=__version__,
        )

    def _assemble(self) -> TagRegistry | None:
        """Create a fresh tag registry and assemble every section into it."""
        with logger.indent_block("Building SPDX sections", loud=True):
            if not self.configuration.has_format(SbomType.SPDX):
                logger.error(
                    "Cannot build SPDX sections, no spdx tag in SBOM configuration file"
                )
                return None

            tags = create_spdx_tags(self.policies)
            context = self._assembly_context()
            for policy in self.policies:
                section_config = self.configuration.section(SbomType.SPDX, policy.name)
                if not assemble_section(tags, policy, section_config, context):
                    logger.error(f"Failed to build SPDX {policy.title} section.")
                    return None
        return tags

    def _validate(self, tags: TagRegistry) -> bool:
        with logger.indent_block("Validating SPDX sections", loud=True):
            for policy in self.policies:
                if not validate_section(tags, policy):
                    return False
        return True

    def build(self) -> bool:
        """Build a fresh tag registry and assemble every section."""
        self.tags = self._assemble()
        return self.tags is not None

    def validate(self) -> bool:
        """Validate every section of the built registry."""
        if self.tags is None:
            logger.error("Cannot validate SPDX sections, no SPDX tags have been built")
            return False
        return self._validate(self.tags)

    def _prepare_output_file(self) -> Path | None:
        """Replace any stale SBOM file with a fresh, empty one."""
        output_file = self.output_file
        if output_file.exists():
            try:
                output_file.unlink()
            except OSError:
                logger.error(
                    f"SPDX SBOM generation - unable to delete existing sbom file at "
                    f"{output_file} - aborting generation"
                )
                return None
        try:
            with open(output_file, "x", encoding="utf-8"):
                pass
        except OSError:
            logger.error(
                f"SPDX SBOM generation - unable to create output sbom file at "
                f"{output_file} - aborting generation"
            )
            return None
        return output_file

    def generate(self) -> bool:
        """
        Generate the SPDX SBOM file

        Prepares the output file, then builds, validates and writes every
        section. On success the file path is kept in ``sbom_file_path``.

        Returns:
            True if the SBOM file was written completely
        """
        self.sbom_file_path = None

        output_file = self._prepare_output_file()
        if output_file is None:
            return False
        tags = self._assemble()
        self.tags = tags
        if tags is None:
            return False
        if not self._validate(tags):
            return False

        with logger.indent_block("Writing SPDX sections", loud=True):
            for policy in self.policies:
                logger.debug(f"Generating SPDX {policy.title} section")
                if not serialize_section(tags, policy.name, output_file):
                    logger.error(
                        f"SPDX SBOM generation - unable to generate the {policy.title} "
                        f"section in file at {output_file} - aborting generation"
                    )
                    return False

        self.sbom_file_path = output_file
        logger.info(f"SPDX SBOM written to {output_file}")
        return True
