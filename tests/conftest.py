"""Shared test fixtures for SBOM generation tests."""

import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest

from sbom.logging_config import GlobalIndent
from sbom.spdx.protocols import AssemblyContext

FIXED_TIME = datetime(2021, 10, 12, 14, 0, 0, tzinfo=timezone.utc)

DOCUMENT_CREATION_YAML = """\
type: spdx
spdx:
  documentCreation:
    SPDXID: SPDX Identifier from configuration
    DocumentName: Document name from configuration
    DocumentNamespace: Document name space from configuration
    ExternalDocumentRef:
      - External Doc Ref 1
      - External Doc Ref 2
    LicenseListVersion: "3.8"
    Creator: SJH
    Created: 2021-10-12T14:00:00Z
    CreatorComment: Creator comment from configuration
    DocumentComment: Document comment from configuration
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging setup done by a test (e.g. through the CLI)."""
    yield
    base_logger = logging.getLogger("sbom")
    base_logger.handlers = []
    base_logger.setLevel(logging.NOTSET)
    GlobalIndent.reset()


@pytest.fixture
def fixed_time() -> datetime:
    """Creation time used by fixed_clock."""
    return FIXED_TIME


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed creation time."""
    return lambda: FIXED_TIME


@pytest.fixture
def assembly_context() -> AssemblyContext:
    """Assembly context for a package called 'example'."""
    return AssemblyContext(package_name="example", created=FIXED_TIME, tool_version="0.1.0")


@pytest.fixture
def document_creation_yaml() -> str:
    """Configuration that sets every document creation tag."""
    return DOCUMENT_CREATION_YAML


@pytest.fixture
def make_package(tmp_path: Path):
    """Factory fixture creating a package directory with an sbom.yaml.

    Usage:
        def test_example(make_package):
            package_dir = make_package("type: spdx\\nspdx:\\n", project_name="demo")
    """

    def _make(sbom_yaml: str | None, project_name: str | None = None) -> Path:
        package_dir = tmp_path / "package"
        package_dir.mkdir(exist_ok=True)
        if sbom_yaml is not None:
            (package_dir / "sbom.yaml").write_text(sbom_yaml, encoding="utf-8")
        if project_name is not None:
            (package_dir / "pyproject.toml").write_text(
                f'[project]\nname = "{project_name}"\nversion = "1.0.0"\n',
                encoding="utf-8",
            )
        return package_dir

    return _make


@pytest.fixture
def read_sbom():
    """Read an SBOM file without newline translation."""

    def _read(path: Path) -> str:
        return path.read_bytes().decode("utf-8")

    return _read
