"""Tests for the credits command."""

import json
from pathlib import Path

from click.testing import CliRunner

from clipmotion.cli import cli
from clipmotion.context import ClipmotionContext


def _write_artifact(
    root: Path, framework: str, name: str, contributor: dict[str, str] | None
) -> None:
    meta: dict[str, object] = {"source": f"https://www.instagram.com/p/{name}/"}
    if contributor is not None:
        meta["contributor"] = contributor
    path = root / "public" / "r" / framework / f"{name}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(
            {
                "name": name,
                "type": "registry:component",
                "framework": framework,
                "description": f"{name} effect",
                "files": [{"name": f"{name}.tsx", "content": ""}],
                "meta": meta,
            }
        ),
        encoding="utf-8",
    )


ADA = {"name": "Ada", "github": "https://github.com/ada"}


def test_credits_lists_contributors(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test that a component shipped for several frameworks is credited once."""
    _write_artifact(tmp_path, "react", "fade", ADA)
    _write_artifact(tmp_path, "vue", "fade", ADA)
    _write_artifact(tmp_path, "react", "ripple", ADA)
    _write_artifact(tmp_path, "react", "wave", {"name": "Grace"})
    _write_artifact(tmp_path, "react", "glow", None)
    ctx = ClipmotionContext.for_test(cwd=tmp_path)

    result = cli_runner.invoke(cli, ["credits"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "2 contributors have made ClipMotion possible" in result.output
    assert "fade, ripple" in result.output
    assert "Grace" in result.output
    assert "glow" not in result.output


def test_credits_for_one_component(cli_runner: CliRunner, tmp_path: Path) -> None:
    _write_artifact(tmp_path, "react", "fade", ADA)
    _write_artifact(tmp_path, "vue", "fade", ADA)
    ctx = ClipmotionContext.for_test(cwd=tmp_path)

    result = cli_runner.invoke(cli, ["credits", "fade"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "Created by: Ada" in result.output
    assert "GitHub: https://github.com/ada" in result.output
    assert "Available for: react" in result.output
    assert "Available for: vue" in result.output


def test_credits_unknown_component(cli_runner: CliRunner, tmp_path: Path) -> None:
    _write_artifact(tmp_path, "react", "fade", ADA)
    ctx = ClipmotionContext.for_test(cwd=tmp_path)

    result = cli_runner.invoke(cli, ["credits", "missing"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert 'Component "missing" not found or has no credits.' in result.output


def test_credits_without_built_registry(cli_runner: CliRunner, tmp_path: Path) -> None:
    ctx = ClipmotionContext.for_test(cwd=tmp_path)

    result = cli_runner.invoke(cli, ["credits"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "registry:build" in result.output


def test_credits_after_create_and_build(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test that contributor tags written by create survive the build into credits."""
    ctx = ClipmotionContext.for_test(cwd=tmp_path)
    cli_runner.invoke(
        cli,
        ["create", "glow-card", "-f", "react", "--author", "Ada", "--github", ADA["github"]],
        obj=ctx,
        catch_exceptions=False,
    )
    cli_runner.invoke(cli, ["registry:build"], obj=ctx, catch_exceptions=False)

    result = cli_runner.invoke(cli, ["credits", "glow-card"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "Created by: Ada" in result.output
