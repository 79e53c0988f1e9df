"""Parser for filename-only listings."""

from gitwrap.parsing.base import record_lines


class LineParser:
    """Return each non-empty line verbatim."""

    def parse(self, output: str) -> list[str]:
        return [line for _, line in record_lines(output)]
