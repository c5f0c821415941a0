"""SPDX 2.2 tag names, section names and format constants."""

SPDX_VERSION = "SPDX-2.2"
DATA_LICENSE = "CC0-1.0"
DOCUMENT_SPDX_ID = "SPDXRef-DOCUMENT"

# Tag/value format
TAG_VALUE_SEPARATOR = ": "
LINE_TERMINATOR = "\r"
OUTPUT_FILE_NAME = "sbom.spdx"

# Creator value prefixes
CREATOR_TOOL = "Tool:"
CREATOR_PERSON = "Person:"
CREATOR_ORGANISATION = "Organization:"
CREATOR_PREFIXES = (CREATOR_TOOL, CREATOR_PERSON, CREATOR_ORGANISATION)

# SPDX timestamps are UTC with a literal Z
CREATED_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class SectionNames:
    """Section names, as used for the configuration keys."""

    DOCUMENT_CREATION = "documentCreation"


class TagNames:
    """Document creation tag names."""

    SPDX_VERSION = "SPDXVersion"
    DATA_LICENSE = "DataLicense"
    SPDX_ID = "SPDXID"
    DOCUMENT_NAME = "DocumentName"
    DOCUMENT_NAMESPACE = "DocumentNamespace"
    EXTERNAL_DOCUMENT_REF = "ExternalDocumentRef"
    LICENSE_LIST_VERSION = "LicenseListVersion"
    CREATOR = "Creator"
    CREATED = "Created"
    CREATOR_COMMENT = "CreatorComment"
    DOCUMENT_COMMENT = "DocumentComment"
