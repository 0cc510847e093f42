"""Turning a command specification into an executable and its arguments."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from pipex.text import split

ERROR_AC_MSG = "Error !\n4 arguments are required !\n"
PIPE_MSG = "Error Pipe : "
FORK_MSG = "Error Fork : "
OPEN_MSG = "Error Fd : "
ENV_PATH_MSG = "Error Env path !\n"
EXECUTE_PATH_MSG = "Error execute_path !\n"
COMMAND_NOT_FOUND_MSG = "Error command not found !\n"

FAIL = 1


class PipexError(Exception):
    """A failure reported on stderr, carrying the exit status to use."""

    def __init__(self, message: str, detail: str | None = None, exit_code: int = FAIL) -> None:
        self.message = message if detail is None else message + detail
        self.exit_code = exit_code
        super().__init__(self.message)


@dataclass(frozen=True)
class Command:
    """A resolved command: the argument vector and the file to execute."""

    argv: tuple[str, ...]
    executable: str


def path_directories(env: Mapping[str, str]) -> list[str] | None:
    """Return the directories listed in ``PATH``, or ``None`` if it is unset."""
    value = env.get("PATH")
    if value is None:
        return None
    return split(value, ":")


def resolve_executable(name: str, directories: list[str]) -> str | None:
    """Return the first ``directory/name`` that exists, or ``None``."""
    for directory in directories:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def parse_command(spec: str, env: Mapping[str, str]) -> Command:
    """Split ``spec`` on spaces and locate its program.

    A first word naming an existing file is used as is; otherwise it is
    searched for in the directories of ``PATH`` from ``env``.
    """
    argv = split(spec, " ")
    if not argv:
        raise PipexError(COMMAND_NOT_FOUND_MSG)
    name = argv[0]
    if os.access(name, os.F_OK):
        return Command(tuple(argv), name)
    directories = path_directories(env)
    if directories is None:
        raise PipexError(ENV_PATH_MSG)
    executable = resolve_executable(name, directories)
    if executable is None:
        raise PipexError(EXECUTE_PATH_MSG)
    return Command(tuple(argv), executable)