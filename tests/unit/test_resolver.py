from __future__ import annotations

import pytest

from chief.cli.grammar import COMMAND_TREE, CommandNode, FlagSpec
from chief.cli.resolver import resolve
from chief.commands import Build, Clean, RunDev, RunProd, Test, Unrecognized


def _resolve(*argv: str):
    return resolve(list(argv), "example", "0.1.0")


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["run", "dev"], RunDev()),
        (["run", "prod"], RunProd()),
        (["test"], Test()),
        (["build"], Build(release=False)),
        (["build", "--release"], Build(release=True)),
        (["build", "-r"], Build(release=True)),
        (["clean"], Clean()),
    ],
)
def test_supported_commands_resolve_to_their_variant(argv, expected) -> None:
    assert _resolve(*argv) == expected


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["deploy"],
        ["RUN", "dev"],
        ["help"],
        ["--release"],
        ["--bogus"],
    ],
)
def test_unknown_first_token_is_unrecognized(argv) -> None:
    assert _resolve(*argv) == Unrecognized()


@pytest.mark.parametrize("argv", [["run"], ["run", "staging"], ["run", "--release"]])
def test_run_without_known_mode_is_unrecognized(argv) -> None:
    assert _resolve(*argv) == Unrecognized()


@pytest.mark.parametrize(
    "argv",
    [
        ["test", "extra"],
        ["clean", "now"],
        ["build", "fast"],
        ["build", "--rel"],
        ["clean", "-r"],
        ["run", "dev", "--release"],
        ["run", "prod", "extra"],
    ],
)
def test_trailing_or_foreign_tokens_are_unrecognized(argv) -> None:
    assert _resolve(*argv) == Unrecognized()


def test_release_flag_is_scoped_to_build() -> None:
    assert _resolve("build", "-r", "-r") == Build(release=True)
    assert _resolve("build", "--release", "-r") == Build(release=True)
    assert _resolve("run", "prod") == RunProd()


@pytest.mark.parametrize("flag", ["--version", "-V"])
def test_version_short_circuits_with_name_and_version(flag, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        resolve([flag], "my-app", "2.3.4-beta")
    assert exc.value.code == 0
    out, err = capsys.readouterr()
    assert out == "my-app 2.3.4-beta\n"
    assert err == ""


def test_version_ignores_active_grammar(capsys) -> None:
    tree = (CommandNode("lint", "Lints the project", factory=lambda _: Clean()),)
    with pytest.raises(SystemExit) as exc:
        resolve(["--version"], "tool", "9.9", tree)
    assert exc.value.code == 0
    assert capsys.readouterr().out == "tool 9.9\n"


def test_help_lists_top_level_commands(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        _resolve("--help")
    assert exc.value.code == 0
    out = capsys.readouterr().out
    for node in COMMAND_TREE:
        assert node.name in out


def test_subcommand_help_mentions_release_flag(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        _resolve("build", "--help")
    assert exc.value.code == 0
    assert "--release" in capsys.readouterr().out


def test_adding_a_command_is_a_data_change() -> None:
    tree = COMMAND_TREE + (
        CommandNode(
            "fmt",
            "Formats sources",
            flags=(FlagSpec("check", "c"),),
            factory=lambda flags: Build(release=flags["check"]),
        ),
    )
    assert resolve(["fmt", "-c"], "x", "1", tree) == Build(release=True)
    assert resolve(["fmt"], "x", "1", tree) == Build(release=False)
    assert resolve(["clean"], "x", "1", tree) == Clean()


def test_unmatched_input_writes_nothing(capsys) -> None:
    assert _resolve("nope", "--what") == Unrecognized()
    out, err = capsys.readouterr()
    assert out == ""
    assert err == ""


def test_version_keeps_whitespace_in_name(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        resolve(["--version"], "my  app", "1.0")
    assert exc.value.code == 0
    assert capsys.readouterr().out == "my  app 1.0\n"


def test_long_version_is_not_wrapped(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setenv("COLUMNS", "40")
    version = "0.1.0-beta.1+build.20261019.abcdef0123456789"
    with pytest.raises(SystemExit) as exc:
        resolve(["--version"], "example", version)
    assert exc.value.code == 0
    assert capsys.readouterr().out == f"example {version}\n"
