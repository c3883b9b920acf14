from __future__ import annotations

from pathlib import Path

import pytest
import typer

from tagrel.cli.context import CLIContext
from tagrel.core.errors import ErrorCode
from tagrel.core.result import Err, Ok, Result
from tagrel.output.console import MockConsole
from tagrel.platform.process import ProcessError
from tagrel.release import gh as gh_mod
from tagrel.release import git as git_mod
from tagrel.release.config import Config

COMMIT = "0123456789abcdef0123456789abcdef01234567"


def _patch_context(
    monkeypatch: pytest.MonkeyPatch, *, root: Path, env: dict[str, str]
) -> tuple[MockConsole, MockConsole]:
    import tagrel.cli.commands.release_cmd as release_cmd

    console = MockConsole()
    err_console = MockConsole()
    config_root = root

    def fake_build_context(
        *,
        root: Path | None,
        ref_env: str,
        ref: str | None,
        repo: str | None = None,
        dry_run: bool = False,
    ) -> CLIContext:
        del root
        config = Config(
            root=config_root, ref_env=ref_env, ref=ref, repo=repo, dry_run=dry_run, env=env
        )
        return CLIContext(config=config, console=console, err_console=err_console)

    monkeypatch.setattr(release_cmd, "build_context", fake_build_context)
    return console, err_console


def _patch_tools(monkeypatch: pytest.MonkeyPatch, *, fail_create: str | None = None) -> list[list[str]]:
    calls: list[list[str]] = []

    def fake_run(cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
        del cwd
        calls.append(cmd)
        if cmd[0] == "git":
            return Ok(COMMIT + "\n")
        if cmd[2] == "delete" and cmd[-1].endswith("/v2"):
            return Err(ProcessError(tuple(cmd), 1, "", "release not found"))
        if cmd[2] == "create" and cmd[5] == fail_create:
            return Err(ProcessError(tuple(cmd), 1, "", "HTTP 422: Validation Failed"))
        return Ok("")

    monkeypatch.setattr(git_mod, "run_process", fake_run)
    monkeypatch.setattr(gh_mod, "run_process", fake_run)
    monkeypatch.setattr(git_mod, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(gh_mod, "which", lambda name: f"/usr/bin/{name}")
    return calls


def _widgets(root: Path) -> None:
    (root / "widgets").mkdir()
    (root / "widgets" / "a.tar.gz").write_bytes(b"a")


def _publish(**overrides: object) -> None:
    import tagrel.cli.commands.release_cmd as release_cmd

    options: dict[str, object] = {
        "ref": None,
        "ref_env": "GITHUB_REF_NAME",
        "root": None,
        "repo": None,
        "dry_run": False,
    }
    options.update(overrides)
    release_cmd.publish(**options)  # type: ignore[arg-type]


def test_publish_succeeds_despite_failed_delete(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _widgets(tmp_path)
    console, err_console = _patch_context(
        monkeypatch, root=tmp_path, env={"GITHUB_REF_NAME": "widgets/v2.3.1"}
    )
    calls = _patch_tools(monkeypatch)

    _publish()

    assert len([c for c in calls if c[0] == "gh" and c[2] == "create"]) == 3
    assert console.find("could not delete release 'widgets/v2'")
    assert console.find("OK 3 releases for widgets/v2.3.1 at 01234567")
    assert err_console.outputs == []


def test_publish_create_failure_exits_hosting_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _widgets(tmp_path)
    _, err_console = _patch_context(
        monkeypatch, root=tmp_path, env={"GITHUB_REF_NAME": "widgets/v2.3.1"}
    )
    calls = _patch_tools(monkeypatch, fail_create="widgets/v2.3")

    with pytest.raises(typer.Exit) as exc:
        _publish()

    assert exc.value.exit_code == int(ErrorCode.HOSTING_ERROR)
    assert err_console.messages == [
        "error: create GitHub release 'widgets/v2.3' failed (exit 1): HTTP 422: Validation Failed"
    ]
    assert not any("widgets/v2.3.1" in c for c in calls)


def test_publish_missing_env_exits_user_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _, err_console = _patch_context(monkeypatch, root=tmp_path, env={})
    calls = _patch_tools(monkeypatch)

    with pytest.raises(typer.Exit) as exc:
        _publish()

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert err_console.messages == [
        "error: missing env var GITHUB_REF_NAME (Run from a tag-triggered workflow or pass --ref.)"
    ]
    assert calls == []


def test_publish_missing_dir_exits_io_error(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _patch_context(monkeypatch, root=tmp_path, env={})
    _patch_tools(monkeypatch)

    with pytest.raises(typer.Exit) as exc:
        _publish(ref="widgets/v1.0.0")

    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)


def test_plan_prints_targets_without_subprocess(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    import tagrel.cli.commands.release_cmd as release_cmd

    _widgets(tmp_path)
    console, _ = _patch_context(monkeypatch, root=tmp_path, env={"GITHUB_REF_NAME": "widgets/v2.3.1"})
    calls = _patch_tools(monkeypatch)

    release_cmd.plan(ref=None, ref_env="GITHUB_REF_NAME", root=None)

    assert calls == []
    assert "  widgets/v2 (replace)" in console.messages
    assert "  widgets/v2.3 (replace)" in console.messages
    assert "  widgets/v2.3.1 (create)" in console.messages
    assert "  widgets/a.tar.gz" in console.messages


def test_plan_invalid_version_exits(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    import tagrel.cli.commands.release_cmd as release_cmd

    _, err_console = _patch_context(monkeypatch, root=tmp_path, env={})

    with pytest.raises(typer.Exit) as exc:
        release_cmd.plan(ref="checktypes/1.2.3", ref_env="GITHUB_REF_NAME", root=None)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert err_console.messages[0] == "error: invalid version: 1.2.3"
