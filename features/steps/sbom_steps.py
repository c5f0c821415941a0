"""
Step definitions for SPDX SBOM generation scenarios.
"""

from behave import given, then, when  # type: ignore[import-untyped]

from sbom.config import SbomConfiguration
from sbom.generator import SbomGenerator
from sbom.spdx.serializer import format_tag_line


def _read_sbom(context) -> str:
    return (context.package_dir / "sbom.spdx").read_bytes().decode("utf-8")


# === Setup ===


@given('a package named "{name}"')  # type: ignore[misc]
def step_given_package_name(context, name):
    """Write a pyproject.toml declaring the package name."""
    (context.package_dir / "pyproject.toml").write_text(
        f'[project]\nname = "{name}"\n', encoding="utf-8"
    )


@given("an SBOM configuration:")  # type: ignore[misc]
def step_given_configuration(context):
    """Write the scenario text as sbom.yaml."""
    (context.package_dir / "sbom.yaml").write_text(context.text, encoding="utf-8")


@given('a stale SBOM file containing "{content}"')  # type: ignore[misc]
def step_given_stale_sbom(context, content):
    """Leave an SBOM file from an earlier run."""
    (context.package_dir / "sbom.spdx").write_text(content * 10, encoding="utf-8")


# === Actions ===


@when("I generate the SBOM")  # type: ignore[misc]
def step_when_generate(context):
    """Load the configuration and run the generator."""
    configuration = SbomConfiguration.from_directory(context.package_dir)
    context.generator = SbomGenerator(configuration)
    context.result = context.generator.generate()


# === Assertions ===


@then("the generation succeeds")  # type: ignore[misc]
def step_then_succeeds(context):
    assert context.result is True, "Expected SBOM generation to succeed"
    assert context.generator.sbom_file_path == context.package_dir / "sbom.spdx"


@then("the generation fails")  # type: ignore[misc]
def step_then_fails(context):
    assert context.result is False, "Expected SBOM generation to fail"
    assert context.generator.sbom_file_path is None


@then("the SBOM contains the lines:")  # type: ignore[misc]
def step_then_contains_lines(context):
    """Check the listed lines appear in this order."""
    content = _read_sbom(context)
    position = 0
    for row in context.table:
        line = format_tag_line(row["tag"], row["value"])
        found = content.find(line, position)
        assert found >= 0, f"Line {line!r} missing or out of order"
        position = found + len(line)


@then('the SBOM does not contain "{text}"')  # type: ignore[misc]
def step_then_not_contains(context, text):
    assert text not in _read_sbom(context)


@then('tag "{name}" has the value "{value}"')  # type: ignore[misc]
def step_then_tag_value(context, name, value):
    tag = context.generator.tags.tag_by_name(name)
    assert tag.values == [value], f"{name} is {tag.values}, expected [{value!r}]"


@then('the "{section}" section has no failing tags')  # type: ignore[misc]
def step_then_section_valid(context, section):
    failed = context.generator.tags.section_valid(section)
    assert failed == [], f"Failing tags: {failed}"


@then('the "{section}" section fails on "{names}"')  # type: ignore[misc]
def step_then_section_fails(context, section, names):
    failed = context.generator.tags.section_valid(section)
    assert ", ".join(failed) == names, f"Failing tags: {failed}"
