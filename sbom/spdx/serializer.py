"""Tag/value serialization of SPDX sections."""

from __future__ import annotations

from pathlib import Path

from sbom.logging_config import logger
from sbom.spdx.constants import LINE_TERMINATOR, TAG_VALUE_SEPARATOR
from sbom.spdx.tags import TagRegistry


def format_tag_line(name: str, value: str) -> str:
    """Render one tag/value line, including its terminator."""
    return f"{name}{TAG_VALUE_SEPARATOR}{value}{LINE_TERMINATOR}"


def serialize_section(tags: TagRegistry, section: str, output_file: Path) -> bool:
    """
    Append the set tags of a section to the output file.

    Tags are written in declaration order, one line per value in the order
    the values were assigned.

    Args:
        tags: Registry of the current generation run
        section: Name of the section to write
        output_file: The SBOM file, which must already exist

    Returns:
        True if all lines were written
    """
    if not output_file.is_file():
        logger.error(f"SPDX output file {output_file} does not exist")
        return False
    try:
        # newline="" keeps the carriage return terminator as written
        with open(output_file, "a", encoding="utf-8", newline="") as f:
            for tag in tags.section_tags(section):
                if not tag.is_set():
                    continue
                for value in tag.values:
                    f.write(format_tag_line(tag.name, value))
                    f.flush()
    except OSError as e:
        logger.error(f"Unable to write SPDX section {section} to {output_file}: {e}")
        return False
    return True
