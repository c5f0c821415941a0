"""Populate the tags of a section from derived values and configuration.

Derived values are applied first. Configuration entries then replace the
values of overridable tags. Configuration problems (unknown tag names,
overrides of fixed tags) are logged as warnings and never abort assembly.
"""

from __future__ import annotations

from collections.abc import Mapping

from sbom.config import ConfigValue, ListValue, Scalar
from sbom.logging_config import logger
from sbom.spdx.protocols import AssemblyContext, SectionPolicy
from sbom.spdx.tags import TagRegistry


def apply_config_value(tags: TagRegistry, name: str, value: ConfigValue) -> None:
    """Replace the values of a tag with a configuration value.

    A list replaces the values with all its items in order, a scalar
    replaces them with a single value.
    """
    tag = tags.tag_by_name(name)
    if isinstance(value, ListValue):
        tag.set_values(value.items)
    elif isinstance(value, Scalar):
        tag.set_value(value.value)


def apply_overrides(
    tags: TagRegistry,
    policy: SectionPolicy,
    section_config: Mapping[str, ConfigValue],
) -> None:
    """Apply the configuration entries of a section, in configuration order."""
    for key, value in section_config.items():
        tag = tags.get(key)
        if tag is None or tag.section != policy.name:
            logger.warning(
                f"SPDX {policy.title} tag {key} is not a valid SPDX tag name - not processing"
            )
            continue
        if not tag.overridable:
            logger.warning(f"SPDX tag {key} cannot be overridden by configuration")
            continue
        apply_config_value(tags, key, value)
        logger.debug(f"Set {key} from configuration")


def assemble_section(
    tags: TagRegistry,
    policy: SectionPolicy,
    section_config: Mapping[str, ConfigValue] | None,
    context: AssemblyContext,
) -> bool:
    """
    Assemble one section of the document.

    Args:
        tags: Registry of the current generation run
        policy: Policy of the section to assemble
        section_config: Configuration entries of the section, None if absent
        context: Trusted values for derived tags

    Returns:
        True; configuration anomalies are only warned about
    """
    with logger.indent_block(f"Building SPDX {policy.title} section"):
        if policy.derive is not None:
            policy.derive(tags, context)
        if section_config:
            apply_overrides(tags, policy, section_config)
        else:
            logger.debug(f"No {policy.name} configuration, using derived values")
    return True
