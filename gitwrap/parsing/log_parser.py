"""Parser for delimiter-joined `git log` records."""

from gitwrap.exceptions import MalformedOutputError
from gitwrap.models.records import CommitRecord
from gitwrap.parsing.base import record_lines

LOG_DELIMITER = "||"

# hash, author name, author email, author date (RFC 2822), subject
LOG_FIELDS = ("%h", "%aN", "%aE", "%aD", "%s")


def log_format(delimiter: str = LOG_DELIMITER) -> str:
    """Return the `--format=` value matching LogParser(delimiter)."""
    return delimiter.join(LOG_FIELDS)


class LogParser:
    """
    Parse one CommitRecord per line of `git log --format=<log_format()>`.

    Lines are split on the first four delimiters only, so the subject is
    everything after them: it may be empty or contain the delimiter itself.
    Lines with fewer than five fields raise MalformedOutputError.
    """

    def __init__(self, delimiter: str = LOG_DELIMITER):
        self.delimiter = delimiter

    def parse(self, output: str) -> list[CommitRecord]:
        commits = []
        for number, line in record_lines(output):
            fields = line.split(self.delimiter, len(LOG_FIELDS) - 1)
            if len(fields) != len(LOG_FIELDS):
                raise MalformedOutputError(
                    f"Expected {len(LOG_FIELDS)} log fields, got {len(fields)}",
                    line,
                    number,
                )
            hash_, name, email, date, title = fields
            commits.append(
                CommitRecord(hash=hash_, name=name, email=email, date=date, title=title)
            )
        return commits
