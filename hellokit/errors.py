"""Error reporting for command-line programs.

Messages go to an error stream as ``program: message[: reason]`` and a
nonzero status ends the program.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, TextIO

EXIT_FAILURE = 1


class ErrorReporter:
    """Writes diagnostics to a stream and counts them."""

    def __init__(
        self,
        program_name: str | None = None,
        stream: TextIO | None = None,
        stdout: TextIO | None = None,
        print_progname: Callable[[], None] | None = None,
        one_per_line: bool = False,
        exit_failure: int = EXIT_FAILURE,
    ) -> None:
        if program_name is None:
            program_name = sys.argv[0] if sys.argv and sys.argv[0] else "python"
        self.program_name = program_name
        self._stream = stream
        self._stdout = stdout
        self.print_progname = print_progname
        self.one_per_line = one_per_line
        self.exit_failure = exit_failure
        self.message_count = 0
        self._last_location: tuple[str | None, int] | None = None

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def errno_message(self, errnum: int) -> str:
        """Return the system's text for ``errnum``."""
        try:
            text = os.strerror(errnum)
        except (ValueError, OverflowError):
            text = ""
        return text or "Unknown system error"

    def error(self, status: int, errnum: int, message: str, *args: object) -> None:
        """Report ``message % args``; exit with ``status`` if it is nonzero."""
        self._flush_stdout()
        self._write_progname("%s: ")
        self._tail(status, errnum, message, args)

    def error_at_line(
        self,
        status: int,
        errnum: int,
        file_name: str | None,
        line_number: int,
        message: str,
        *args: object,
    ) -> None:
        """Like :meth:`error`, with a ``file:line:`` location before the message."""
        if self.one_per_line:
            location = (file_name, line_number)
            if location == self._last_location:
                return
            self._last_location = location

        self._flush_stdout()
        self._write_progname("%s:")
        if file_name is not None:
            self.stream.write(f"{file_name}:{line_number}: ")
        else:
            self.stream.write(" ")
        self._tail(status, errnum, message, args)

    def _flush_stdout(self) -> None:
        out = self.stdout
        if out is not None and not getattr(out, "closed", False):
            out.flush()

    def _write_progname(self, template: str) -> None:
        if self.print_progname is not None:
            self.print_progname()
        else:
            self.stream.write(template % self.program_name)

    def _tail(
        self, status: int, errnum: int, message: str, args: tuple[object, ...]
    ) -> None:
        stream = self.stream
        stream.write(message % args if args else message)
        self.message_count += 1
        if errnum:
            stream.write(f": {self.errno_message(errnum)}")
        stream.write("\n")
        stream.flush()
        if status:
            raise SystemExit(status)