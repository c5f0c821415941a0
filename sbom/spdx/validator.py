"""Section validation."""

from __future__ import annotations

from sbom.logging_config import logger
from sbom.spdx.protocols import SectionPolicy
from sbom.spdx.tags import TagRegistry


def tags_to_string(names: list[str]) -> str:
    """Join tag names for an error message."""
    return ", ".join(names)


def conformance_warnings(tags: TagRegistry, policy: SectionPolicy) -> list[str]:
    """Run the soft checks of a section and collect their findings."""
    warnings: list[str] = []
    for check in policy.checks:
        warnings.extend(check(tags))
    return warnings


def validate_section(tags: TagRegistry, policy: SectionPolicy) -> bool:
    """
    Validate one section of the document.

    Missing required tags fail the section and are reported together.
    Soft SPDX conformance problems are only logged as warnings.

    Args:
        tags: Registry of the current generation run
        policy: Policy of the section to validate

    Returns:
        True if every required tag of the section is set
    """
    with logger.indent_block(f"Validating SPDX {policy.title} section"):
        failed = tags.section_valid(policy.name)
        if failed:
            logger.error(
                f"Failed to validate SPDX {policy.title} section, "
                f"failed tags are {tags_to_string(failed)}"
            )
            return False

        for warning in conformance_warnings(tags, policy):
            logger.warning(f"SPDX {policy.title} section has {warning}")
    return True
