"""Run ``infile | cmd1 | cmd2 > outfile`` like the shell would."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import BinaryIO, Mapping

from pipex.command import (
    COMMAND_NOT_FOUND_MSG,
    ERROR_AC_MSG,
    FAIL,
    OPEN_MSG,
    PIPE_MSG,
    PipexError,
    parse_command,
)
from pipex.output import put_str


def _report(error: PipexError) -> None:
    put_str(error.message, sys.stderr)


def _launch(
    spec: str, stdin: BinaryIO, stdout: BinaryIO, env: dict[str, str]
) -> subprocess.Popen | None:
    try:
        command = parse_command(spec, env)
    except PipexError as error:
        _report(error)
        return None
    try:
        return subprocess.Popen(
            list(command.argv),
            executable=command.executable,
            stdin=stdin,
            stdout=stdout,
            env=env,
        )
    except OSError:
        _report(PipexError(COMMAND_NOT_FOUND_MSG))
        return None


def _first_stage(
    infile: str, spec: str, writer: BinaryIO, env: dict[str, str]
) -> subprocess.Popen | None:
    try:
        source = open(infile, "rb")
    except OSError as exc:
        _report(PipexError(OPEN_MSG, exc.strerror or str(exc)))
        return None
    with source:
        return _launch(spec, source, writer, env)


def _second_stage(
    outfile: str, spec: str, reader: BinaryIO, env: dict[str, str]
) -> subprocess.Popen | None:
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    except OSError as exc:
        _report(PipexError(OPEN_MSG, exc.strerror or str(exc)))
        return None
    with os.fdopen(fd, "wb") as target:
        return _launch(spec, reader, target, env)


def _status(process: subprocess.Popen | None) -> int:
    return FAIL if process is None else process.wait()


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Feed ``infile`` through ``first`` then ``second`` into ``outfile``.

    A failing stage is reported on stderr without stopping the other one.
    Returns the exit status of the second stage (1 if it never started).
    """
    environ = dict(os.environ if env is None else env)
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise PipexError(PIPE_MSG, exc.strerror or str(exc)) from exc
    with os.fdopen(read_fd, "rb") as reader, os.fdopen(write_fd, "wb") as writer:
        first_process = _first_stage(infile, first, writer, environ)
        writer.close()
        second_process = _second_stage(outfile, second, reader, environ)
        reader.close()
    _status(first_process)
    return _status(second_process)


def main(argv: list[str] | None = None) -> int:
    """Entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        put_str(ERROR_AC_MSG, sys.stderr)
        return FAIL
    infile, first, second, outfile = args
    try:
        run_pipeline(infile, first, second, outfile, os.environ)
    except PipexError as error:
        _report(error)
        return error.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())