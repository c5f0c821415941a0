"""Section policies for SPDX 2.2 documents.

Each section is described by a SectionPolicy: its required tags, the hook
that derives built-in values and the soft conformance checks run after
validation. SECTION_POLICIES is walked in order by the generator.
"""

from __future__ import annotations

import re
from datetime import timezone
from typing import TYPE_CHECKING

from sbom.config import PACKAGE_URL
from sbom.spdx.constants import (
    CREATED_FORMAT,
    CREATOR_PREFIXES,
    CREATOR_TOOL,
    DATA_LICENSE,
    DOCUMENT_SPDX_ID,
    SPDX_VERSION,
    SectionNames,
    TagNames,
)
from sbom.spdx.protocols import AssemblyContext, CheckFn, SectionPolicy

if TYPE_CHECKING:
    from sbom.spdx.tags import TagRegistry

CREATED_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")

TOOL_NAME = "spdx-sbom"


def derive_document_creation(tags: TagRegistry, context: AssemblyContext) -> None:
    """Set the document creation values that do not come from configuration.

    Document name and namespace are only derived when a package name was
    actually supplied.
    """
    tags.tag_by_name(TagNames.SPDX_VERSION).set_value(SPDX_VERSION)
    tags.tag_by_name(TagNames.DATA_LICENSE).set_value(DATA_LICENSE)
    tags.tag_by_name(TagNames.SPDX_ID).set_value(DOCUMENT_SPDX_ID)

    tool = f"{TOOL_NAME}-{context.tool_version}" if context.tool_version else TOOL_NAME
    tags.tag_by_name(TagNames.CREATOR).set_value(f"{CREATOR_TOOL} {tool}")
    created = context.created.astimezone(timezone.utc)
    tags.tag_by_name(TagNames.CREATED).set_value(created.strftime(CREATED_FORMAT))

    if context.has_package_name:
        tags.tag_by_name(TagNames.DOCUMENT_NAME).set_value(context.package_name)
        tags.tag_by_name(TagNames.DOCUMENT_NAMESPACE).set_value(
            f"{PACKAGE_URL}{context.package_name}"
        )


def check_creator_values(tags: TagRegistry) -> list[str]:
    """Each creator should be declared as a tool, person or organization."""
    return [
        f'invalid creator tag value - "{value}"'
        for value in tags.tag_by_name(TagNames.CREATOR).values
        if not any(prefix in value for prefix in CREATOR_PREFIXES)
    ]


def check_created_format(tags: TagRegistry) -> list[str]:
    """Created should be a UTC timestamp in YYYY-MM-DDThh:mm:ssZ form."""
    return [
        f'created tag value "{value}" is not in YYYY-MM-DDThh:mm:ssZ format'
        for value in tags.tag_by_name(TagNames.CREATED).values
        if not CREATED_PATTERN.match(value)
    ]


def scalar_arity_check(section: str) -> CheckFn:
    """Build a check flagging single-valued tags that carry several values."""

    def check(tags: TagRegistry) -> list[str]:
        return [
            f"tag {tag.name} expects a single value but has {len(tag.values)}"
            for tag in tags.section_tags(section)
            if not tag.multi_valued and len(tag.values) > 1
        ]

    return check


DOCUMENT_CREATION = SectionPolicy(
    name=SectionNames.DOCUMENT_CREATION,
    title="Document Creation",
    required=frozenset(
        {
            TagNames.SPDX_VERSION,
            TagNames.DATA_LICENSE,
            TagNames.SPDX_ID,
            TagNames.DOCUMENT_NAME,
            TagNames.DOCUMENT_NAMESPACE,
            TagNames.CREATOR,
            TagNames.CREATED,
        }
    ),
    derive=derive_document_creation,
    checks=(
        check_creator_values,
        check_created_format,
        scalar_arity_check(SectionNames.DOCUMENT_CREATION),
    ),
)

SECTION_POLICIES: tuple[SectionPolicy, ...] = (DOCUMENT_CREATION,)
