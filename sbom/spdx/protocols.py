"""Section policies and the context passed to assembly hooks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Callable

from sbom.config import DEFAULT_PACKAGE_NAME

if TYPE_CHECKING:
    from sbom.spdx.tags import TagRegistry


@dataclass(frozen=True)
class AssemblyContext:
    """Trusted values the derivation hooks compute tags from."""

    package_name: str
    """Package name, or DEFAULT_PACKAGE_NAME when none was supplied."""

    created: datetime
    """Timestamp of the generation run (UTC)."""

    tool_version: str = ""
    """Version of this tool, used for the Creator tag."""

    @property
    def has_package_name(self) -> bool:
        """True if a real package name was supplied."""
        return bool(self.package_name) and self.package_name != DEFAULT_PACKAGE_NAME


# Sets derived tag values in the registry
DeriveFn = Callable[["TagRegistry", AssemblyContext], None]

# Returns warning messages for soft SPDX conformance problems
CheckFn = Callable[["TagRegistry"], list[str]]


@dataclass(frozen=True)
class SectionPolicy:
    """Declarative rules for one section of an SPDX document.

    Adding a section means adding a policy to the section table; the
    generator walks the table in order.
    """

    name: str
    """Section name, also the configuration key."""

    title: str
    """Human-readable section title for log messages."""

    required: frozenset[str] = frozenset()
    """Tags that must carry a non-empty value for the section to validate."""

    derive: DeriveFn | None = None
    """Hook applying built-in derived values before configuration overrides."""

    checks: tuple[CheckFn, ...] = field(default_factory=tuple)
    """Soft conformance checks; their findings are warnings only."""
