"""Data models for SBOM generation."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class SbomType(str, Enum):
    """Supported SBOM output formats."""

    SPDX = "spdx"


@dataclass
class Tag:
    """A single named field of an SBOM document.

    An empty ``values`` list means the tag is unset. ``multi_valued`` records
    the declared arity only; the model does not refuse extra values.
    """

    name: str
    section: str
    overridable: bool = True
    required: bool = False
    multi_valued: bool = False
    values: list[str] = field(default_factory=list)

    def is_set(self) -> bool:
        """Check if the tag carries at least one value."""
        return bool(self.values)

    def has_content(self) -> bool:
        """Check if at least one value is non-empty.

        Whitespace counts as content; values are written verbatim.
        """
        return any(self.values)

    def set_value(self, value: str) -> None:
        """Replace all values with a single value."""
        self.values = [str(value)]

    def set_values(self, values: Iterable[str]) -> None:
        """Replace all values, keeping the given order."""
        self.values = [str(value) for value in values]

    def clear(self) -> None:
        """Unset the tag."""
        self.values = []
