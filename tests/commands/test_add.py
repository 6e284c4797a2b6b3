"""Tests for the add command."""

from pathlib import Path

from click.testing import CliRunner

from clipmotion.cli import cli
from clipmotion.context import ClipmotionContext
from clipmotion.integrations.package_installer.fake import FakePackageInstaller
from clipmotion.integrations.registry_client.fake import FakeRegistryClient

UTILS_FILE = {
    "name": "utils.ts",
    "content": "export function cn(...inputs: string[]) {\n  return inputs.join(' ');\n}\n",
}


def _registry(make_component) -> FakeRegistryClient:
    return FakeRegistryClient(
        items={
            ("react", "fade"): make_component(
                "fade", dependencies=["framer-motion"], registry_dependencies=["utils"]
            ),
            ("react", "utils"): make_component(
                "utils", item_type="registry:lib", files=[UTILS_FILE]
            ),
            ("vue", "ripple"): make_component("ripple"),
        }
    )


def test_add_installs_component_and_dependencies(
    cli_runner: CliRunner, tmp_project: Path, make_component
) -> None:
    """Test that add writes files, installs packages and reports the dependency."""
    registry = _registry(make_component)
    packages = FakePackageInstaller()
    ctx = ClipmotionContext.for_test(
        registry_client=registry, package_installer=packages, cwd=tmp_project
    )

    result = cli_runner.invoke(cli, ["add", "fade"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert (tmp_project / "components" / "fade.tsx").exists()
    assert (tmp_project / "components" / "utils" / "index.ts").exists()
    assert packages.install_calls == [(["framer-motion"], False)]
    assert registry.fetch_calls == [("react", "fade"), ("react", "utils")]
    assert "✓ utils (1 new)" in result.output
    assert "✓ fade (1 new)" in result.output
    assert "All components installed successfully" in result.output
    assert "(including 1 dependency)" in result.output
    assert registry.closed


def test_add_without_config_fails(cli_runner: CliRunner, tmp_path: Path, make_component) -> None:
    ctx = ClipmotionContext.for_test(registry_client=_registry(make_component), cwd=tmp_path)

    result = cli_runner.invoke(cli, ["add", "fade"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Configuration file not found" in result.output
    assert "clipmotion init" in result.output


def test_add_suggests_other_frameworks(
    cli_runner: CliRunner, tmp_project: Path, make_component
) -> None:
    """Test that a component missing for the project framework points at the ones that have it."""
    registry = _registry(make_component)
    ctx = ClipmotionContext.for_test(registry_client=registry, cwd=tmp_project)

    result = cli_runner.invoke(cli, ["add", "ripple"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "✗ Failed: ripple" in result.output
    assert "`ripple` is available for: vue" in result.output
    assert "Try: clipmotion add ripple --framework vue" in result.output
    assert "Completed with 1 error" in result.output
    assert registry.has_item_calls == [
        ("nextjs", "ripple"),
        ("vue", "ripple"),
        ("angular", "ripple"),
    ]


def test_add_continues_after_a_failure(
    cli_runner: CliRunner, tmp_project: Path, make_component
) -> None:
    ctx = ClipmotionContext.for_test(registry_client=_registry(make_component), cwd=tmp_project)

    result = cli_runner.invoke(cli, ["add", "ripple", "fade"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert (tmp_project / "components" / "fade.tsx").exists()
    assert "1 succeeded, 1 failed" in result.output


def test_add_framework_override(cli_runner: CliRunner, tmp_project: Path, make_component) -> None:
    registry = _registry(make_component)
    ctx = ClipmotionContext.for_test(registry_client=registry, cwd=tmp_project)

    result = cli_runner.invoke(
        cli, ["add", "ripple", "--framework", "vue"], obj=ctx, catch_exceptions=False
    )

    assert result.exit_code == 0, result.output
    assert registry.fetch_calls == [("vue", "ripple")]


def test_add_custom_path(cli_runner: CliRunner, tmp_project: Path, make_component) -> None:
    """Test that --path redirects component files but not the utils module."""
    ctx = ClipmotionContext.for_test(registry_client=_registry(make_component), cwd=tmp_project)

    result = cli_runner.invoke(
        cli, ["add", "fade", "-p", "src/animations"], obj=ctx, catch_exceptions=False
    )

    assert result.exit_code == 0, result.output
    assert (tmp_project / "src" / "animations" / "fade.tsx").exists()
    assert (tmp_project / "components" / "utils" / "index.ts").exists()


def test_add_keeps_existing_files_without_overwrite(
    cli_runner: CliRunner, tmp_project: Path, make_component
) -> None:
    existing = tmp_project / "components" / "fade.tsx"
    existing.parent.mkdir(parents=True)
    existing.write_text("// customized\n", encoding="utf-8")
    ctx = ClipmotionContext.for_test(registry_client=_registry(make_component), cwd=tmp_project)

    result = cli_runner.invoke(cli, ["add", "fade"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert existing.read_text(encoding="utf-8") == "// customized\n"
    assert "✓ fade [1 skipped]" in result.output

    result = cli_runner.invoke(cli, ["add", "fade", "--overwrite"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert existing.read_text(encoding="utf-8") == "export function fade() {}\n"


def test_add_silent_prints_nothing_on_success(
    cli_runner: CliRunner, tmp_project: Path, make_component
) -> None:
    ctx = ClipmotionContext.for_test(registry_client=_registry(make_component), cwd=tmp_project)

    result = cli_runner.invoke(cli, ["add", "fade", "--silent"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert result.output == ""
