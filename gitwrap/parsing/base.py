"""Base protocol and line splitting for git output parsers."""

from typing import Iterator, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class OutputParser(Protocol[T_co]):
    """Protocol for parsers turning git stdout into records."""

    def parse(self, output: str) -> list[T_co]:
        """Parse stdout into records, raising MalformedOutputError on bad lines."""
        ...


def split_lines(output: str) -> list[str]:
    """Split stdout into lines, dropping the empty line after a final newline.

    Output terminated with CRLF is split on CRLF; otherwise lines are split on
    LF and any carriage return is kept as part of the line.
    """
    newline = "\r\n" if output.endswith("\r\n") else "\n"
    lines = output.split(newline)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def record_lines(output: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every non-blank line of stdout."""
    for number, line in enumerate(split_lines(output), start=1):
        if not line.strip():
            continue
        yield number, line
