import os

import pytest

from pipex.command import (
    ENV_PATH_MSG,
    EXECUTE_PATH_MSG,
    COMMAND_NOT_FOUND_MSG,
    Command,
    PipexError,
    parse_command,
    path_directories,
    resolve_executable,
)


def test_path_directories_splits_on_colon():
    assert path_directories({"PATH": "/usr/bin:/bin"}) == ["/usr/bin", "/bin"]


def test_path_directories_drops_empty_entries():
    assert path_directories({"PATH": "::/opt/tools::/bin:"}) == ["/opt/tools", "/bin"]


def test_path_directories_missing_path():
    assert path_directories({"HOME": "/home/user"}) is None


def test_resolve_executable_finds_file(tmp_path):
    tool = tmp_path / "tool"
    tool.write_text("")
    assert resolve_executable("tool", [str(tmp_path)]) == f"{tmp_path}/tool"


def test_resolve_executable_first_directory_wins(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    (first / "tool").write_text("")
    (second / "tool").write_text("")
    assert resolve_executable("tool", [str(first), str(second)]) == f"{first}/tool"


def test_resolve_executable_skips_missing(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    (tmp_path / "tool").write_text("")
    assert resolve_executable("tool", [str(empty), str(tmp_path)]) == f"{tmp_path}/tool"


def test_resolve_executable_not_found(tmp_path):
    assert resolve_executable("absent", [str(tmp_path)]) is None


def test_parse_command_searches_path(tmp_path):
    (tmp_path / "tool").write_text("")
    command = parse_command("tool  -l   x", {"PATH": str(tmp_path)})
    assert command == Command(("tool", "-l", "x"), f"{tmp_path}/tool")


def test_parse_command_uses_existing_path_directly(tmp_path):
    tool = tmp_path / "tool"
    tool.write_text("")
    command = parse_command(f"{tool} arg", {})
    assert command.executable == str(tool)
    assert command.argv == (str(tool), "arg")


def test_parse_command_without_path_variable():
    with pytest.raises(PipexError) as info:
        parse_command("surely-not-a-file-here", {})
    assert info.value.message == ENV_PATH_MSG
    assert info.value.exit_code == 1


def test_parse_command_not_found(tmp_path):
    with pytest.raises(PipexError) as info:
        parse_command("surely-not-a-file-here", {"PATH": str(tmp_path)})
    assert str(info.value) == EXECUTE_PATH_MSG


def test_parse_command_empty_spec():
    with pytest.raises(PipexError) as info:
        parse_command("   ", {"PATH": os.defpath})
    assert info.value.message == COMMAND_NOT_FOUND_MSG


def test_pipex_error_joins_detail():
    error = PipexError("Error Fd : ", "No such file or directory")
    assert error.message == "Error Fd : No such file or directory"
    assert error.exit_code == 1