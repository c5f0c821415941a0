"""Canonical SPDX 2.2 tag definitions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sbom.models import Tag
from sbom.spdx.constants import SectionNames, TagNames
from sbom.spdx.protocols import SectionPolicy
from sbom.spdx.sections import SECTION_POLICIES
from sbom.spdx.tags import TagRegistry


@dataclass(frozen=True)
class TagSpec:
    """Declaration of one SPDX tag."""

    name: str
    section: str
    overridable: bool = True
    multi_valued: bool = False


_DOC = SectionNames.DOCUMENT_CREATION

# Declaration order is serialization order
TAG_DEFINITIONS: tuple[TagSpec, ...] = (
    TagSpec(TagNames.SPDX_VERSION, _DOC, overridable=False),
    TagSpec(TagNames.DATA_LICENSE, _DOC, overridable=False),
    TagSpec(TagNames.SPDX_ID, _DOC),
    TagSpec(TagNames.DOCUMENT_NAME, _DOC),
    TagSpec(TagNames.DOCUMENT_NAMESPACE, _DOC),
    TagSpec(TagNames.EXTERNAL_DOCUMENT_REF, _DOC, multi_valued=True),
    TagSpec(TagNames.LICENSE_LIST_VERSION, _DOC),
    TagSpec(TagNames.CREATOR, _DOC, multi_valued=True),
    TagSpec(TagNames.CREATED, _DOC),
    TagSpec(TagNames.CREATOR_COMMENT, _DOC),
    TagSpec(TagNames.DOCUMENT_COMMENT, _DOC),
)


def create_spdx_tags(
    policies: Iterable[SectionPolicy] = SECTION_POLICIES,
    definitions: Iterable[TagSpec] = TAG_DEFINITIONS,
) -> TagRegistry:
    """Create a registry holding the canonical SPDX tag set.

    Every tag starts unset. A tag is required when the policy of its
    section lists it.

    Returns:
        A new TagRegistry in declaration order
    """
    required = {policy.name: policy.required for policy in policies}
    registry = TagRegistry()
    for spec in definitions:
        registry.add(
            Tag(
                name=spec.name,
                section=spec.section,
                overridable=spec.overridable,
                required=spec.name in required.get(spec.section, frozenset()),
                multi_valued=spec.multi_valued,
            )
        )
    return registry
