"""SPDX tag/value document generation."""

from sbom.spdx.assembler import assemble_section
from sbom.spdx.builder import TAG_DEFINITIONS, TagSpec, create_spdx_tags
from sbom.spdx.generator import SpdxOutputGenerator
from sbom.spdx.protocols import AssemblyContext, SectionPolicy
from sbom.spdx.sections import SECTION_POLICIES
from sbom.spdx.serializer import format_tag_line, serialize_section
from sbom.spdx.tags import TagRegistry, UnknownTagError
from sbom.spdx.validator import validate_section

__all__ = [
    "AssemblyContext",
    "SECTION_POLICIES",
    "SectionPolicy",
    "SpdxOutputGenerator",
    "TAG_DEFINITIONS",
    "TagRegistry",
    "TagSpec",
    "UnknownTagError",
    "assemble_section",
    "create_spdx_tags",
    "format_tag_line",
    "serialize_section",
    "validate_section",
]
