"""SPDX tag/value SBOM generation for Python packages."""

__version__ = "0.1.0"
