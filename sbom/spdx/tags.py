"""Tag registry mapping SPDX tag names to tags."""

from __future__ import annotations

from collections.abc import Iterator

from sbom.models import Tag


class UnknownTagError(Exception):
    """Raised when looking up a tag name that is not in the registry."""

    def __init__(self, tag_name: str, context: str = "") -> None:
        """Initialize the error.

        Args:
            tag_name: The unregistered tag name
            context: Additional context about where the lookup happened
        """
        self.tag_name = tag_name
        msg = f"No SPDX tag named '{tag_name}'"
        if context:
            msg = f"{msg} in {context}"
        super().__init__(msg)


class TagRegistry:
    """Registry of all tags for one SBOM document.

    Tags are kept in declaration order, which is also the order they are
    serialized in. A registry belongs to a single generation run.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._tags: dict[str, Tag] = {}

    def add(self, tag: Tag) -> None:
        """Register a tag.

        Args:
            tag: The tag to register

        Raises:
            ValueError: If a tag with the same name is already registered
        """
        if tag.name in self._tags:
            raise ValueError(f"Duplicate SPDX tag '{tag.name}'")
        self._tags[tag.name] = tag

    def exists(self, name: str) -> bool:
        """Check if a tag is registered under this name."""
        return name in self._tags

    def get(self, name: str) -> Tag | None:
        """Get a tag by name, or None if not registered."""
        return self._tags.get(name)

    def tag_by_name(self, name: str) -> Tag:
        """Get a tag by name.

        Args:
            name: The SPDX tag name

        Returns:
            The registered tag

        Raises:
            UnknownTagError: If no tag is registered under this name
        """
        try:
            return self._tags[name]
        except KeyError:
            raise UnknownTagError(name) from None

    @property
    def tags(self) -> list[Tag]:
        """All tags in declaration order."""
        return list(self._tags.values())

    def section_tags(self, section: str) -> list[Tag]:
        """Return the tags of a section in declaration order."""
        return [tag for tag in self._tags.values() if tag.section == section]

    def section_valid(self, section: str) -> list[str]:
        """Check the required tags of a section.

        Args:
            section: The section name

        Returns:
            Names of required tags without a non-empty value, empty if valid
        """
        return [
            tag.name
            for tag in self.section_tags(section)
            if tag.required and not tag.has_content()
        ]

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(list(self._tags.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._tags
