"""Running external programs and capturing their output."""

from __future__ import annotations

import os
import signal
import subprocess
from typing import Iterable, Optional


class ProcessError(RuntimeError):
    """An external program could not be run or failed."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stdout: bytes = b"",
        stderr: bytes = b"",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _describe_status(returncode: int) -> str:
    if returncode < 0:
        try:
            name = signal.Signals(-returncode).name
        except ValueError:
            return f"signal: {-returncode}"
        return f"signal: {-returncode} ({name})"
    return f"exit status: {returncode}"


def _process_error(
    message: str,
    returncode: Optional[int] = None,
    stdout: bytes = b"",
    stderr: bytes = b"",
) -> ProcessError:
    parts = [message]
    if returncode is None:
        parts.append(" (never executed)")
    else:
        parts.append(f" ({_describe_status(returncode)})")
    for label, data in (("stdout", stdout), ("stderr", stderr)):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            continue
        if text.lstrip():
            parts.append(f"\n--- {label}\n{text}")
    return ProcessError("".join(parts), returncode, stdout, stderr)


class ProcessBuilder:
    """A builder for an external process."""

    def __init__(self, program: str | os.PathLike[str], *args: str | os.PathLike[str]) -> None:
        self.program = os.fspath(program)
        self._args: list[str] = [os.fspath(a) for a in args]

    def arg(self, arg: str | os.PathLike[str]) -> ProcessBuilder:
        """Add an argument to pass to the program."""
        self._args.append(os.fspath(arg))
        return self

    def args(self, args: Iterable[str | os.PathLike[str]]) -> ProcessBuilder:
        """Add several arguments to pass to the program."""
        self._args.extend(os.fspath(a) for a in args)
        return self

    def run_with_output(self) -> subprocess.CompletedProcess[bytes]:
        """Run the program and capture its output.

        Raises :class:`ProcessError` if the program cannot be started or
        exits unsuccessfully.
        """
        try:
            completed = subprocess.run(
                [self.program, *self._args],
                stdin=subprocess.DEVNULL,
                capture_output=True,
                check=False,
            )
        except OSError as err:
            raise _process_error(f"could not execute process {self}") from err
        if completed.returncode != 0:
            raise _process_error(
                f"process didn't exit successfully: {self}",
                completed.returncode,
                completed.stdout,
                completed.stderr,
            )
        return completed

    def read(self) -> str:
        """Run the program and return its standard output, trailing newlines removed."""
        stdout = self.run_with_output().stdout
        try:
            text = stdout.decode("utf-8")
        except UnicodeDecodeError as err:
            raise ProcessError(f"failed to parse output from {self}") from err
        return text.rstrip("\r\n")

    def display(self, alternate: bool = False) -> str:
        """Render the command line; quoted in backticks unless ``alternate``."""
        line = " ".join([self.program, *self._args])
        return line if alternate else f"`{line}`"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"ProcessBuilder({self.display(alternate=True)!r})"