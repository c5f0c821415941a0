"""Tests for SBOM data models."""

from sbom.models import SbomType, Tag


class TestSbomType:
    """Tests for the SbomType enum."""

    def test_spdx_value(self) -> None:
        assert SbomType.SPDX.value == "spdx"

    def test_enum_is_string(self) -> None:
        assert isinstance(SbomType.SPDX, str)
        assert SbomType.SPDX == "spdx"


class TestTag:
    """Tests for the Tag dataclass."""

    def test_defaults(self) -> None:
        tag = Tag(name="DocumentComment", section="documentCreation")
        assert tag.values == []
        assert tag.overridable is True
        assert tag.required is False
        assert tag.multi_valued is False
        assert not tag.is_set()

    def test_set_value_replaces_existing_values(self) -> None:
        tag = Tag(name="Creator", section="documentCreation", values=["Tool: a", "Tool: b"])
        tag.set_value("Person: SJH")
        assert tag.values == ["Person: SJH"]

    def test_set_values_keeps_order(self) -> None:
        tag = Tag(name="ExternalDocumentRef", section="documentCreation", multi_valued=True)
        tag.set_values(["External Doc Ref 2", "External Doc Ref 1"])
        assert tag.values == ["External Doc Ref 2", "External Doc Ref 1"]

    def test_set_values_converts_to_strings(self) -> None:
        tag = Tag(name="LicenseListVersion", section="documentCreation")
        tag.set_values([3.8])  # type: ignore[list-item]
        assert tag.values == ["3.8"]

    def test_scalar_arity_not_enforced(self) -> None:
        """A scalar tag accepts several values; validation warns about it."""
        tag = Tag(name="Created", section="documentCreation")
        tag.set_values(["a", "b"])
        assert tag.values == ["a", "b"]

    def test_has_content_ignores_empty_values(self) -> None:
        tag = Tag(name="SPDXID", section="documentCreation", values=[""])
        assert tag.is_set()
        assert not tag.has_content()

        tag.set_value("  ")
        assert tag.has_content()

        tag.set_value("SPDXRef-DOCUMENT")
        assert tag.has_content()

    def test_clear(self) -> None:
        tag = Tag(name="SPDXID", section="documentCreation", values=["SPDXRef-DOCUMENT"])
        tag.clear()
        assert not tag.is_set()
